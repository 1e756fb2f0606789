"""Seat registry kept in a plain-text file of labelled records."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_FILE = "Ghe.txt"

_DIGITS = frozenset("0123456789")


@dataclass
class Seat:
    """One seat: its number, area letter and row letter."""

    number: str
    area: str
    row: str


class SeatError(Exception):
    """Base class for seat registry errors."""


class InvalidSeatError(SeatError, ValueError):
    """Raised when a seat number, area or row is malformed."""


class DuplicateSeatError(SeatError):
    """Raised when a seat number is already registered."""


class SeatNotFoundError(SeatError, LookupError):
    """Raised when no seat has the requested number."""


def is_valid_number(value: str) -> bool:
    """A seat number is a positive decimal integer without leading zeros."""
    if not value or not set(value) <= _DIGITS:
        return False
    if value[0] == "0" and len(value) > 1:
        return False
    return int(value) > 0


def is_valid_area(value: str) -> bool:
    """An area is a single upper-case ASCII letter."""
    return len(value) == 1 and "A" <= value <= "Z"


def is_valid_row(value: str) -> bool:
    """A row is a single lower-case ASCII letter."""
    return len(value) == 1 and "a" <= value <= "z"


def _field(line: str, label: str) -> str:
    if label in line:
        return line[line.find(":") + 2:]
    return ""


def parse_seats(text: str) -> list[Seat]:
    """Read seat records: three labelled lines followed by a separator line."""
    lines = iter(text.splitlines())
    seats = []
    for line in lines:
        if not line:
            continue
        number = _field(line, "So ghe:")
        area = _field(next(lines, ""), "Khu vuc:")
        row = _field(next(lines, ""), "Hang ghe:")
        seats.append(Seat(number, area, row))
        next(lines, None)
    return seats


def format_seats(seats: Iterable[Seat]) -> str:
    """Render seats in the on-disk record format."""
    return "".join(
        f"So ghe: {seat.number}\nKhu vuc: {seat.area}\nHang ghe: {seat.row}\n\n"
        for seat in seats
    )


def _check(number: str, area: str, row: str) -> None:
    if not (is_valid_number(number) and is_valid_area(area) and is_valid_row(row)):
        raise InvalidSeatError("Thong tin khong hop le. Vui long kiem tra lai.")


class SeatRegistry:
    """The seats stored in one file; every change is written back at once."""

    def __init__(self, path=DEFAULT_FILE):
        self.path = Path(path)
        self._seats: list[Seat] = []
        self.load()

    def load(self) -> None:
        """Replace the in-memory seats with the file's contents."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        self._seats = parse_seats(text)

    def save(self) -> None:
        """Write all seats to the file."""
        self.path.write_text(format_seats(self._seats), encoding="utf-8")

    def _lookup(self, number: str) -> Seat | None:
        return next((seat for seat in self._seats if seat.number == number), None)

    def add(self, number: str, area: str, row: str) -> Seat:
        """Register a new seat."""
        _check(number, area, row)
        if self._lookup(number) is not None:
            raise DuplicateSeatError("Ghe da ton tai.")
        seat = Seat(number, area, row)
        self._seats.append(seat)
        self.save()
        return seat

    def remove(self, number: str) -> Seat:
        """Remove the seat with this number."""
        seat = self._lookup(number)
        if seat is None:
            raise SeatNotFoundError("Khong tim thay ghe.")
        self._seats.remove(seat)
        self.save()
        return seat

    def edit(self, old_number: str, new_number: str, area: str, row: str) -> Seat:
        """Change a seat's number, area and row."""
        _check(new_number, area, row)
        if old_number != new_number and self._lookup(new_number) is not None:
            raise DuplicateSeatError("So ghe moi da ton tai trong danh sach!")
        seat = self._lookup(old_number)
        if seat is None:
            raise SeatNotFoundError("Khong tim thay ghe cu.")
        seat.number = new_number
        seat.area = area
        seat.row = row
        self.save()
        return seat

    def find(self, query: str) -> list[Seat]:
        """Seats whose number, area or row equals the query."""
        return [
            seat
            for seat in self._seats
            if query in (seat.number, seat.area, seat.row)
        ]

    def __iter__(self) -> Iterator[Seat]:
        return iter(self._seats)

    def __len__(self) -> int:
        return len(self._seats)


def _describe(seat: Seat) -> str:
    return f"So ghe   : {seat.number}\nKhu vuc  : {seat.area}\nHang ghe : {seat.row}\n"


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv=None) -> int:
    """Run one round of the seat management menu."""
    parser = argparse.ArgumentParser(description="Manage cinema seats.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="seat data file")
    args = parser.parse_args(argv)
    registry = SeatRegistry(args.file)

    print("Quan ly ghe")
    print("1. Tim ghe\n2. Them ghe\n3. Xoa ghe\n4. Sua ghe\n5. Xem ghe\nNhap bat ky de quay lai")
    choice = _ask("Chon chuc nang: ")

    try:
        if choice == "1":
            query = _ask("Tim ghe theo (so ghe/khu vuc/hng ghe): ")
            found = registry.find(query)
            for seat in found:
                print(_describe(seat))
            if not found:
                print("Khong tim thay ghe.\n")
        elif choice == "2":
            number = _ask("Them so ghe (>0): ")
            area = _ask("Them khu vuc (chu cai in hoa): ")
            row = _ask("Them hang ghe (chu cai in thuong): ")
            registry.add(number, area, row)
            print("Da them ghe thanh cong!\n")
        elif choice == "3":
            number = _ask("Nhap so ghe muon xoa: ")
            registry.remove(number)
            print("Da xoa ghe thanh cong!\n")
        elif choice == "4":
            old_number = _ask("Nhap so ghe cu (>0): ")
            new_number = _ask("Nhap so ghe moi (>0): ")
            area = _ask("Nhap khu vuc moi (chu cai in hoa): ")
            row = _ask("Nhap hang ghe moi (chu cai in thuong): ")
            if old_number == new_number and is_valid_number(new_number) \
                    and is_valid_area(area) and is_valid_row(row):
                print("So ghe moi khong thay doi, chi sua khu vuc va hang ghe!\n")
                registry.edit(old_number, new_number, area, row)
                print("Da sua khu vuc va hang ghe thanh cong!\n")
            else:
                registry.edit(old_number, new_number, area, row)
                print("Da sua ghe thanh cong!\n")
        elif choice == "5":
            if not len(registry):
                print("Danh sach ghe rong!\n")
            for seat in registry:
                print(_describe(seat))
        else:
            print()
    except SeatError as exc:
        print(f"{exc}\n")
    return 0