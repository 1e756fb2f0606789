"""Plain-text record keeping for a small cinema: seats, invoices and monthly revenue."""

__version__ = "0.1.0"
__all__ = ["seats", "invoices", "revenue"]