# cinemadesk

Record keeping for a small cinema. It covers seats, invoices and monthly revenue. Every record lives in a plain text file that you can read and edit by hand. The program messages are in Vietnamese, written without diacritics.

## Install

```
pip install .
```

Run the tests with `pip install .[test]` and then `pytest`.

## Commands

Each command shows a short menu. It runs the option you choose once and then exits. Any other input just prints a blank line and exits.

```
cinemadesk-seats [--file PATH]      # find, add, remove, edit or list seats (default file: Ghe.txt)
cinemadesk-invoices [--dir DIR]     # find, add, remove, edit or list invoices (HoaDon.txt in DIR)
cinemadesk-revenue [--dir DIR]      # find, add, remove, edit or list monthly revenue (DoanhThu.txt in DIR)
```

`--dir` defaults to the current directory. A failed operation prints the error message and exits normally.

## Data files

Seats (`Ghe.txt`). Each record is three lines followed by a blank line:

```
So ghe: 12
Khu vuc: B
Hang ghe: c
```

A seat number is a positive integer with no leading zeros. The area is one upper-case letter `A`–`Z`, and the row is one lower-case letter `a`–`z`.

Invoices (`HoaDon.txt`). A showing is written `hh:mm-dd/mm/yyyy+S`, where `S` is the seat:

```
Gio Chieu + So Ghe: 10:00-20/11/2024+1
CCCD         : <staff id>
Thanh Tien   : 95000
```

Adding or editing an invoice reads these files from the same directory:

- `Ve.txt`: the ticket must appear on a line containing `Gio chieu+So ghe: <showing>`. The first later line containing `Ten dich vu:` names the service booked with it.
- `NhanVien.txt`: the staff member must appear on a line containing `CCCD         : <staff id>`.
- `LichChieu.txt`: the ticket price is the first line containing `Gia ve      :` that follows a line containing `Gio chieu    : <hh:mm-dd/mm/yyyy>`.
- `DichVu.txt`: the service price is the first line containing `Gia dich vu  :` that follows a line containing `Ten dich vu  : <name>`.

The invoice amount is the ticket price plus the service price. A price that cannot be found counts as 0.

Revenue (`DoanhThu.txt`):

```
Thang thu: 11/2024
Dong thu : 10:00-20/11/2024+1, 14:00-21/11/2024+3
Tien thu : 190000
```

A revenue entry for a month (`mm/yyyy`) lists every invoice showing in that month and the sum of their amounts.

Amounts are written with up to six significant digits, as `%g` formats them.

## Library use

```python
from cinemadesk.seats import SeatRegistry, DuplicateSeatError

seats = SeatRegistry("Ghe.txt")
seats.add("12", "B", "c")
seats.edit("12", "14", "B", "d")
for seat in seats.find("B"):
    print(seat.number, seat.area, seat.row)
```

```python
from cinemadesk.invoices import InvoiceBook
from cinemadesk.revenue import RevenueLedger

book = InvoiceBook(".")
invoice = book.add("10:00-20/11/2024+1", staff_id)
print(invoice.amount)

ledger = RevenueLedger(".")
entry = ledger.add("11/2024")
print(entry.showings, entry.total)
```

Every change is written back to its file at once.

- `SeatRegistry`, `InvoiceBook` and `RevenueLedger` support iteration and `len()`.
- `parse_seats` / `format_seats`, `parse_invoices` / `format_invoices` and `parse_revenue` / `format_revenue` convert between the text format and the record objects.

When an operation fails, it raises an exception from its module:

- seats: `InvalidSeatError`, `DuplicateSeatError`, `SeatNotFoundError`, all subclasses of `SeatError`.
- invoices: `DuplicateInvoiceError`, `TicketNotFoundError`, `StaffNotFoundError`, `InvoiceNotFoundError`, all subclasses of `InvoiceError`.
- revenue: `DuplicateMonthError`, `NoInvoicesError`, `MonthNotFoundError`, all subclasses of `RevenueError`.

## What it does not do

The package does not manage tickets, staff, screening schedules or services. `Ve.txt`, `NhanVien.txt`, `LichChieu.txt` and `DichVu.txt` must be written by hand, or by some other tool, in the layout shown above. There is no combined menu that ties the three commands together, and none of the commands loops.