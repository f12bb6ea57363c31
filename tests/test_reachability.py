import pytest

from so_long.grid import Point
from so_long.mapfile import MapError
from so_long.reachability import check_count_char, flood_fill, verify_map

OPEN_MAP = ["11111", "1PCE1", "11111"]
BLOCKED_COLLECTIBLE = ["1111111", "1PE1C01", "1111111"]
BLOCKED_EXIT = ["1111111", "1PC1E01", "1111111"]


def _write(tmp_path, rows, name="map.ber"):
    path = tmp_path / name
    path.write_text("\n".join(rows))
    return path


def test_flood_fill_reaches_everything():
    assert flood_fill(OPEN_MAP, Point(1, 1)) is True


def test_flood_fill_blocked_collectible():
    assert flood_fill(BLOCKED_COLLECTIBLE, Point(1, 1)) is False


def test_flood_fill_blocked_exit():
    assert flood_fill(BLOCKED_EXIT, Point(1, 1)) is False


def test_flood_fill_does_not_modify_rows():
    rows = list(OPEN_MAP)
    flood_fill(rows, Point(1, 1))
    assert rows == OPEN_MAP


def test_flood_fill_around_walls():
    rows = ["111111", "1P0001", "111101", "1EC001", "111111"]
    assert flood_fill(rows, Point(1, 1)) is True


def test_check_count_char_accepts_valid_map():
    assert check_count_char(OPEN_MAP) is None


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1P0E1", "11111"],
        ["111111", "1PCEE1", "111111"],
        ["111111", "1PPCE1", "111111"],
        ["11111", "10CE1", "11111"],
    ],
)
def test_check_count_char_rejects(rows):
    with pytest.raises(MapError, match="Too much or not enough of one char"):
        check_count_char(rows)


def test_verify_map_returns_rows(tmp_path):
    path = _write(tmp_path, OPEN_MAP)
    assert verify_map(path) == OPEN_MAP


def test_verify_map_unreachable(tmp_path):
    path = _write(tmp_path, BLOCKED_COLLECTIBLE)
    with pytest.raises(MapError, match="You can't go through the wall"):
        verify_map(path)


def test_verify_map_bad_counts(tmp_path):
    path = _write(tmp_path, ["11111", "1P0E1", "11111"])
    with pytest.raises(MapError, match="Too much or not enough of one char"):
        verify_map(path)


def test_verify_map_trailing_newline(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(OPEN_MAP) + "\n")
    with pytest.raises(MapError, match="Map ends with an empty line"):
        verify_map(path)