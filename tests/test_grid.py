import pytest

from so_long.grid import Point, count_char, locate


MAP = ["11111", "10P01", "1C0E1", "11111"]


def test_locate_finds_player():
    assert locate(MAP, "P") == Point(1, 2)


def test_locate_finds_first_in_row_major_order():
    rows = ["111", "1C1", "CC1"]
    assert locate(rows, "C") == Point(1, 1)


def test_locate_missing_char_gives_minus_one():
    assert locate(MAP, "X") == Point(-1, -1)


def test_locate_stops_at_empty_row():
    rows = ["111", "", "1P1"]
    assert locate(rows, "P") == Point(-1, -1)


def test_locate_empty_map():
    assert locate([], "P") == Point(-1, -1)


@pytest.mark.parametrize(
    "char, expected",
    [("1", 14), ("C", 1), ("E", 1), ("P", 1), ("X", 0)],
)
def test_count_char(char, expected):
    assert count_char(MAP, char) == expected


def test_count_char_matches_total_cells():
    total = sum(count_char(MAP, c) for c in "10PCE")
    assert total == sum(len(row) for row in MAP)


def test_point_is_value_object():
    assert Point(2, 3) == Point(2, 3)
    assert {Point(1, 1), Point(1, 1)} == {Point(1, 1)}