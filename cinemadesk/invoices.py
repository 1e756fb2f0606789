"""Invoice book that prices tickets from the schedule, ticket and service files."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

INVOICE_FILE = "HoaDon.txt"
TICKET_FILE = "Ve.txt"
STAFF_FILE = "NhanVien.txt"
SCHEDULE_FILE = "LichChieu.txt"
SERVICE_FILE = "DichVu.txt"

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class Invoice:
    """One invoice: showing time plus seat, the clerk's CCCD and the amount."""

    showing: str
    cccd: str
    amount: float = 0.0


class InvoiceError(Exception):
    """Base class for invoice book errors."""


class DuplicateInvoiceError(InvoiceError):
    """Raised when an invoice for the showing already exists."""


class TicketNotFoundError(InvoiceError, LookupError):
    """Raised when no ticket matches the showing."""


class StaffNotFoundError(InvoiceError, LookupError):
    """Raised when no staff member has the CCCD."""


class InvoiceNotFoundError(InvoiceError, LookupError):
    """Raised when no invoice matches the showing."""


def _leading_float(text: str) -> float:
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _after_colon(line: str) -> str:
    return line[line.find(":") + 2:]


def format_amount(value: float) -> str:
    """Render an amount with six significant digits, as the data files hold it."""
    return f"{value:g}"


def parse_invoices(text: str) -> list[Invoice]:
    """Read invoice records of three labelled lines each."""
    lines = iter(text.splitlines())
    invoices = []
    for line in lines:
        if not line:
            continue
        invoice = Invoice("", "")
        if "Gio Chieu + So Ghe:" in line:
            invoice.showing = _after_colon(line)
        line = next(lines, "")
        if "CCCD" in line:
            invoice.cccd = _after_colon(line)
        line = next(lines, "")
        if "Thanh Tien" in line:
            invoice.amount = _leading_float(_after_colon(line))
        invoices.append(invoice)
    return invoices


def format_invoices(invoices: Iterable[Invoice]) -> str:
    """Render invoices in the on-disk record format."""
    return "".join(
        f"Gio Chieu + So Ghe: {inv.showing}\n"
        f"CCCD         : {inv.cccd}\n"
        f"Thanh Tien   : {format_amount(inv.amount)}\n\n"
        for inv in invoices
    )


def _value_after(lines: Iterable[str], marker: str, label: str) -> str | None:
    """The text after the first line holding `label` that follows a `marker` line."""
    it = iter(lines)
    for line in it:
        if marker in line:
            for following in it:
                if label in following:
                    return _after_colon(following)
    return None


class InvoiceBook:
    """Invoices stored in a data directory alongside the files they refer to."""

    def __init__(self, directory="."):
        self.directory = Path(directory)
        self._invoices: list[Invoice] = []
        self.load()

    def _lines(self, name: str) -> list[str]:
        try:
            return (self.directory / name).read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []

    def load(self) -> None:
        """Replace the in-memory invoices with the invoice file's contents."""
        self._invoices = parse_invoices("\n".join(self._lines(INVOICE_FILE)))

    def save(self) -> None:
        """Write all invoices to the invoice file."""
        (self.directory / INVOICE_FILE).write_text(
            format_invoices(self._invoices), encoding="utf-8"
        )

    def ticket_exists(self, showing: str) -> bool:
        """Whether the ticket file mentions the showing."""
        needle = "Gio chieu+So ghe: " + showing
        return any(needle in line for line in self._lines(TICKET_FILE))

    def staff_exists(self, cccd: str) -> bool:
        """Whether the staff file mentions the CCCD."""
        needle = "CCCD         : " + cccd
        return any(needle in line for line in self._lines(STAFF_FILE))

    def invoice_exists(self, showing: str) -> bool:
        """Whether the invoice file already mentions the showing."""
        needle = "Gio Chieu + So Ghe: " + showing
        return any(needle in line for line in self._lines(INVOICE_FILE))

    def ticket_price(self, showing: str) -> float:
        """Ticket price of the showing's time slot, or 0 when unknown."""
        time = showing.split("+", 1)[0]
        value = _value_after(
            self._lines(SCHEDULE_FILE), "Gio chieu    : " + time, "Gia ve      :"
        )
        return 0.0 if value is None else _leading_float(value)

    def service_price(self, showing: str) -> float:
        """Price of the service booked with the ticket, or 0 when unknown."""
        name = _value_after(
            self._lines(TICKET_FILE), "Gio chieu+So ghe: " + showing, "Ten dich vu:"
        )
        return 0.0 if name is None else self.service_price_by_name(name)

    def service_price_by_name(self, name: str) -> float:
        """Price of the named service, or 0 when unknown."""
        value = _value_after(
            self._lines(SERVICE_FILE), "Ten dich vu  : " + name, "Gia dich vu  :"
        )
        return 0.0 if value is None else _leading_float(value)

    def total_for(self, showing: str) -> float:
        """Ticket price plus service price."""
        return self.ticket_price(showing) + self.service_price(showing)

    def add(self, showing: str, cccd: str) -> Invoice:
        """Create and store an invoice for the showing."""
        if self.invoice_exists(showing):
            raise DuplicateInvoiceError("Hoa don da ton tai!")
        if not self.ticket_exists(showing):
            raise TicketNotFoundError("Khong tim thay thong tin ve!")
        if not self.staff_exists(cccd):
            raise StaffNotFoundError("Khong tim thay nhan vien!")
        invoice = Invoice(showing, cccd, self.total_for(showing))
        self._invoices.append(invoice)
        self.save()
        return invoice

    def edit(self, showing: str, new_showing: str, cccd: str) -> Invoice:
        """Move an invoice to another showing and clerk, repricing it."""
        if showing != new_showing and any(
            inv.showing == new_showing for inv in self._invoices
        ):
            raise DuplicateInvoiceError("Hoa don voi Gio Chieu + So Ghe nay da ton tai!")
        if not self.ticket_exists(new_showing):
            raise TicketNotFoundError("Khong tim thay thong tin ve!")
        if not self.staff_exists(cccd):
            raise StaffNotFoundError("Khong tim thay nhan vien!")
        invoice = next((inv for inv in self._invoices if inv.showing == showing), None)
        if invoice is None:
            raise InvoiceNotFoundError("Khong tim thay hoa don!")
        invoice.showing = new_showing
        invoice.cccd = cccd
        invoice.amount = self.total_for(new_showing)
        self.save()
        return invoice

    def remove(self, showing: str) -> Invoice:
        """Delete the invoice for the showing."""
        invoice = next((inv for inv in self._invoices if inv.showing == showing), None)
        if invoice is None:
            raise InvoiceNotFoundError("Khong tim thay hoa don de xoa!")
        self._invoices.remove(invoice)
        self.save()
        return invoice

    def find(self, query: str) -> list[Invoice]:
        """Invoices whose showing or CCCD equals the query."""
        return [inv for inv in self._invoices if query in (inv.showing, inv.cccd)]

    def __iter__(self) -> Iterator[Invoice]:
        return iter(self._invoices)

    def __len__(self) -> int:
        return len(self._invoices)


def _describe(invoice: Invoice) -> str:
    return (
        f"Gio chieu+So ghe: {invoice.showing}\n"
        f"CCCD         : {invoice.cccd}\n"
        f"Thanh tien   : {format_amount(invoice.amount)}\n"
    )


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv=None) -> int:
    """Run one round of the invoice management menu."""
    parser = argparse.ArgumentParser(description="Manage cinema invoices.")
    parser.add_argument("--dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)
    book = InvoiceBook(args.dir)

    print("Quan li hoa don")
    print("1. Tim hoa don\n2. Them hoa don\n3. Xoa hoa don\n4. Sua hoa don\n5. Xem hoa don")
    print("Nhap bat ki de quay lai")
    choice = _ask("Nhap lua chon: ")

    try:
        if choice == "1":
            query = _ask("Nhap (Gio chieu+So ghe/CCCD) de tim: ")
            found = book.find(query)
            for invoice in found:
                print(_describe(invoice))
            if not found:
                print("Khong tim thay hoa don!\n")
        elif choice == "2":
            showing = _ask("Nhap Gio Chieu + So Ghe de them: ")
            cccd = _ask("Nhap CCCD de them: ")
            book.add(showing, cccd)
            print("Them hoa don thanh cong!\n")
        elif choice == "3":
            showing = _ask("Nhap Gio Chieu + So Ghe can xoa: ")
            book.remove(showing)
            print("Xoa hoa don thanh cong!\n")
        elif choice == "4":
            showing = _ask("Nhap Gio Chieu + So Ghe: ")
            new_showing = _ask("Nhap Gio Chieu + So Ghe Moi: ")
            cccd = _ask("Nhap CCCD: ")
            book.edit(showing, new_showing, cccd)
            print("Sua hoa don thanh cong!\n")
        elif choice == "5":
            if not len(book):
                print("Khong co hoa don nao!\n")
            for invoice in book:
                print(_describe(invoice))
        else:
            print()
    except InvoiceError as exc:
        print(f"{exc}\n")
    return 0