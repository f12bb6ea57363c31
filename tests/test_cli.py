import pytest

from so_long.cli import GameState, check_extension, main
from so_long.grid import TILE_SIZE, Point

VALID = ["111111", "1PCEC1", "111111"]


def _write(tmp_path, rows, name="map.ber"):
    path = tmp_path / name
    path.write_text("\n".join(rows))
    return path


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.ber", True),
        (".ber", True),
        ("level.txt", False),
        ("level.ber.txt", False),
        ("level.be", False),
    ],
)
def test_check_extension(path, expected):
    assert check_extension(path) is expected


def test_from_map_counts_and_exit():
    state = GameState.from_map(VALID)
    assert state.total_star == VALID[1].count("C")
    assert state.exit_position == Point(1, VALID[1].index("E"))
    assert state.count_move == 0
    assert state.count_star == 0


def test_window_size_scales_by_tile():
    state = GameState.from_map(VALID)
    assert state.window_size == (len(VALID[0]) * TILE_SIZE, len(VALID) * TILE_SIZE)


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Error\nthe arg is not valid\n"


def test_main_with_wrong_extension(capsys, tmp_path):
    path = _write(tmp_path, VALID, name="map.txt")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nthe arg is not valid\n"


def test_main_with_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 0
    assert capsys.readouterr().out == "Error\nthe arg is not valid\n"


def test_main_valid_map_prints_nothing(capsys, tmp_path):
    path = _write(tmp_path, VALID)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_unreachable_map(capsys, tmp_path):
    path = _write(tmp_path, ["1111111", "1PE1C01", "1111111"])
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nYou can't go through the wall\n"


def test_main_ragged_map(capsys, tmp_path):
    path = _write(tmp_path, ["11111", "1PCE11", "11111"])
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nInconsistent line length\n"


def test_main_map_with_trailing_empty_line(capsys, tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nMap ends with an empty line\n"