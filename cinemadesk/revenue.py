"""Monthly revenue ledger built from the invoice file."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from cinemadesk.invoices import INVOICE_FILE, format_amount

REVENUE_FILE = "DoanhThu.txt"

_SHOWING_LABEL = "Gio Chieu + So Ghe:"
_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class MonthlyRevenue:
    """Revenue of one month (mm/yyyy): the showings sold and their total."""

    month: str
    showings: list[str] = field(default_factory=list)
    total: float = 0.0


class RevenueError(Exception):
    """Base class for revenue ledger errors."""


class DuplicateMonthError(RevenueError):
    """Raised when the month already has a revenue entry."""


class NoInvoicesError(RevenueError, LookupError):
    """Raised when the invoice file holds nothing for the month."""


class MonthNotFoundError(RevenueError, LookupError):
    """Raised when the ledger has no entry for the month."""


def _after_colon(line: str) -> str:
    return line[line.find(":") + 2:]


def _leading_float(text: str) -> float:
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _month_of(showing: str) -> str:
    """The mm/yyyy part of a showing written as hh:mm-dd/mm/yyyy+S."""
    return showing[9:16]


def parse_revenue(text: str) -> list[MonthlyRevenue]:
    """Read revenue records introduced by a "Thang thu:" line."""
    entries: list[MonthlyRevenue] = []
    current = MonthlyRevenue("")
    for line in text.splitlines():
        if "Thang thu:" in line:
            month = _after_colon(line)
            if current.month:
                entries.append(current)
                current = MonthlyRevenue(month)
            else:
                current.month = month
        elif "Dong thu :" in line:
            value = _after_colon(line)
            if value:
                current.showings.extend(part.lstrip() for part in value.split(","))
        elif "Tien thu :" in line:
            current.total = _leading_float(_after_colon(line))
    if current.month:
        entries.append(current)
    return entries


def format_revenue(entries: Iterable[MonthlyRevenue]) -> str:
    """Render revenue entries in the on-disk record format."""
    return "".join(
        f"Thang thu: {entry.month}\n"
        f"Dong thu : {', '.join(entry.showings)}\n"
        f"Tien thu : {format_amount(entry.total)}\n\n"
        for entry in entries
    )


class RevenueLedger:
    """Revenue entries stored next to the invoice file they are drawn from."""

    def __init__(self, directory="."):
        self.directory = Path(directory)
        self._entries: list[MonthlyRevenue] = []
        self.load()

    def _text(self, name: str) -> str:
        try:
            return (self.directory / name).read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def _invoice_showings(self) -> Iterator[str]:
        for line in self._text(INVOICE_FILE).splitlines():
            if _SHOWING_LABEL in line:
                yield _after_colon(line)

    def load(self) -> None:
        """Replace the in-memory entries with the revenue file's contents."""
        self._entries = parse_revenue(self._text(REVENUE_FILE))

    def save(self) -> None:
        """Write all entries to the revenue file."""
        (self.directory / REVENUE_FILE).write_text(
            format_revenue(self._entries), encoding="utf-8"
        )

    def month_total(self, month: str) -> float:
        """Sum of the invoice amounts whose showing falls in the month."""
        lines = iter(self._text(INVOICE_FILE).splitlines())
        total = 0.0
        for line in lines:
            if _SHOWING_LABEL not in line:
                continue
            showing = _after_colon(line)
            start = showing.find("-") + 4
            if showing[start:start + 7] != month:
                continue
            for following in lines:
                if "Thanh Tien" in following:
                    total += _leading_float(_after_colon(following))
                    break
        return total

    def has_invoices(self, month: str) -> bool:
        """Whether any invoice has a showing in the month."""
        return any(_month_of(s) == month for s in self._invoice_showings())

    def showings_for(self, month: str) -> list[str]:
        """Showings of the month's invoices, in file order."""
        return [s for s in self._invoice_showings() if _month_of(s) == month]

    def _lookup(self, month: str) -> MonthlyRevenue | None:
        return next((e for e in self._entries if e.month == month), None)

    def add(self, month: str) -> MonthlyRevenue:
        """Record the revenue of a month from the invoice file."""
        if self._lookup(month) is not None:
            raise DuplicateMonthError(f"Doanh thu cho thang {month} da ton tai!")
        if not self.has_invoices(month):
            raise NoInvoicesError(f"Khong tim thay hoa don cho thang {month}")
        entry = MonthlyRevenue(month, self.showings_for(month), self.month_total(month))
        self._entries.append(entry)
        self.save()
        return entry

    def remove(self, month: str) -> list[MonthlyRevenue]:
        """Delete every entry for the month."""
        removed = [e for e in self._entries if e.month == month]
        if not removed:
            raise MonthNotFoundError(
                f"Khong tim thay doanh thu cho thang {month} de xoa!"
            )
        self._entries = [e for e in self._entries if e.month != month]
        self.save()
        return removed

    def edit(self, old_month: str, new_month: str) -> MonthlyRevenue:
        """Move an entry to another month and recompute it from the invoices."""
        if not self.has_invoices(new_month):
            raise NoInvoicesError(f"Khong tim thay hoa don cho thang {new_month}")
        entry = self._lookup(old_month)
        if entry is None:
            raise MonthNotFoundError(
                f"Khong tim thay doanh thu cho thang {old_month} de sua!"
            )
        if self._lookup(new_month) is not None:
            raise DuplicateMonthError(f"Thang thu {new_month} da ton tai!")
        entry.month = new_month
        entry.showings = self.showings_for(new_month)
        entry.total = self.month_total(new_month)
        self.save()
        return entry

    def find(self, month: str) -> MonthlyRevenue:
        """The entry for the month."""
        entry = self._lookup(month)
        if entry is None:
            raise MonthNotFoundError(f"Khong tim thay doanh thu cho thang {month}!")
        return entry

    def __iter__(self) -> Iterator[MonthlyRevenue]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _describe(entry: MonthlyRevenue) -> str:
    showings = "".join(f"{s}, " for s in entry.showings)
    return (
        f"Thang thu: {entry.month}\n"
        f"Dong thu : {showings}\n"
        f"Tien thu : {format_amount(entry.total)}\n"
    )


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv=None) -> int:
    """Run one round of the revenue management menu."""
    parser = argparse.ArgumentParser(description="Manage monthly cinema revenue.")
    parser.add_argument("--dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)
    ledger = RevenueLedger(args.dir)

    print("Quan li doanh thu")
    print("1. Tim doanh thu\n2. Them doanh thu\n3. Xoa doanh thu")
    print("4. Sua doanh thu\n5. Xem doanh thu\nNhap bat ki de quay lai")
    choice = _ask("Chon chuc nang: ")

    try:
        if choice == "1":
            month = _ask("Nhap Thang thu (mm/yyyy) de tim: ")
            print(_describe(ledger.find(month)), end="")
        elif choice == "2":
            month = _ask("Nhap Thang thu (mm/yyyy) de them: ")
            ledger.add(month)
            print(f"Them doanh thu cho thang {month} thanh cong!\n")
        elif choice == "3":
            month = _ask("Nhap Thang thu (mm/yyyy) de xoa: ")
            ledger.remove(month)
            print(f"Xoa doanh thu cho thang {month} thanh cong!\n")
        elif choice == "4":
            old_month = _ask("Nhap Thang thu (mm/yyyy) cu: ")
            new_month = _ask("Nhap Thang thu (mm/yyyy) moi: ")
            ledger.edit(old_month, new_month)
            print(f"Sua thang thu tu {old_month} thanh {new_month} thanh cong!\n")
        elif choice == "5":
            if not len(ledger):
                print("Khong co doanh thu nao!\n")
            for entry in ledger:
                print(_describe(entry))
        else:
            print()
    except RevenueError as exc:
        print(f"{exc}\n")
    return 0