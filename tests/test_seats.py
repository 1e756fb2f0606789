import io

import pytest

from cinemadesk.seats import (
    DuplicateSeatError,
    InvalidSeatError,
    Seat,
    SeatNotFoundError,
    SeatRegistry,
    format_seats,
    is_valid_area,
    is_valid_number,
    is_valid_row,
    main,
    parse_seats,
)


@pytest.fixture
def registry(tmp_path):
    return SeatRegistry(tmp_path / "Ghe.txt")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", True),
        ("42", True),
        ("100", True),
        ("0", False),
        ("01", False),
        ("", False),
        ("-1", False),
        ("1a", False),
        (" 1", False),
    ],
)
def test_is_valid_number(value, expected):
    assert is_valid_number(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("A", True), ("Z", True), ("a", False), ("AB", False), ("", False), ("1", False)],
)
def test_is_valid_area(value, expected):
    assert is_valid_area(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("a", True), ("z", True), ("A", False), ("ab", False), ("", False), ("1", False)],
)
def test_is_valid_row(value, expected):
    assert is_valid_row(value) is expected


def test_format_matches_record_layout():
    text = format_seats([Seat("1", "A", "b")])
    assert text == "So ghe: 1\nKhu vuc: A\nHang ghe: b\n\n"


def test_parse_format_round_trip():
    seats = [Seat("1", "A", "b"), Seat("12", "C", "d")]
    assert parse_seats(format_seats(seats)) == seats


def test_parse_skips_blank_lines():
    text = "\n\nSo ghe: 3\nKhu vuc: B\nHang ghe: c\n\n\n"
    assert parse_seats(text) == [Seat("3", "B", "c")]


def test_add_persists(registry, tmp_path):
    registry.add("1", "A", "a")
    reloaded = SeatRegistry(tmp_path / "Ghe.txt")
    assert list(reloaded) == [Seat("1", "A", "a")]


@pytest.mark.parametrize(
    "number, area, row",
    [("0", "A", "a"), ("1", "a", "a"), ("1", "A", "A"), ("01", "A", "a")],
)
def test_add_rejects_invalid(registry, number, area, row):
    with pytest.raises(InvalidSeatError):
        registry.add(number, area, row)
    assert len(registry) == 0


def test_add_rejects_duplicate(registry):
    registry.add("1", "A", "a")
    with pytest.raises(DuplicateSeatError):
        registry.add("1", "B", "b")
    assert len(registry) == 1


def test_remove(registry, tmp_path):
    registry.add("1", "A", "a")
    registry.add("2", "A", "b")
    removed = registry.remove("1")
    assert removed == Seat("1", "A", "a")
    assert [seat.number for seat in SeatRegistry(tmp_path / "Ghe.txt")] == ["2"]


def test_remove_missing(registry):
    with pytest.raises(SeatNotFoundError):
        registry.remove("9")


def test_edit_same_number_changes_area_and_row(registry):
    registry.add("1", "A", "a")
    seat = registry.edit("1", "1", "B", "c")
    assert seat == Seat("1", "B", "c")
    assert list(registry) == [Seat("1", "B", "c")]


def test_edit_new_number(registry):
    registry.add("1", "A", "a")
    registry.edit("1", "5", "C", "d")
    assert list(registry) == [Seat("5", "C", "d")]


def test_edit_to_existing_number(registry):
    registry.add("1", "A", "a")
    registry.add("2", "A", "b")
    with pytest.raises(DuplicateSeatError):
        registry.edit("1", "2", "A", "a")


def test_edit_missing_seat(registry):
    with pytest.raises(SeatNotFoundError):
        registry.edit("7", "8", "A", "a")


def test_edit_invalid(registry):
    registry.add("1", "A", "a")
    with pytest.raises(InvalidSeatError):
        registry.edit("1", "2", "AA", "a")


def test_find_matches_any_field(registry):
    registry.add("1", "A", "a")
    registry.add("2", "B", "a")
    registry.add("3", "A", "c")
    assert [s.number for s in registry.find("A")] == ["1", "3"]
    assert [s.number for s in registry.find("a")] == ["1", "2"]
    assert [s.number for s in registry.find("2")] == ["2"]
    assert registry.find("Z") == []


def test_main_adds_seat(tmp_path, monkeypatch, capsys):
    path = tmp_path / "Ghe.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\nA\nb\n"))
    assert main(["--file", str(path)]) == 0
    assert "Da them ghe thanh cong!" in capsys.readouterr().out
    assert list(SeatRegistry(path)) == [Seat("5", "A", "b")]


def test_main_reports_invalid(tmp_path, monkeypatch, capsys):
    path = tmp_path / "Ghe.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0\nA\nb\n"))
    main(["--file", str(path)])
    assert "Thong tin khong hop le. Vui long kiem tra lai." in capsys.readouterr().out


def test_main_empty_listing(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    main(["--file", str(tmp_path / "Ghe.txt")])
    assert "Danh sach ghe rong!" in capsys.readouterr().out