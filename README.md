# so_long

This package loads and checks map files for a small top-down game. In the game
the player collects every collectible and then walks to the exit.

## Map format

A map is a plain text file with the `.ber` extension. Each line of the file is
one row of tiles:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

A map is valid only if all of the following are true:

- every row has the same length;
- the first and last rows are all walls, and every row starts and ends with a wall;
- it uses only the characters `1`, `0`, `C`, `E` and `P`;
- it has at most 30 rows, and no row is wider than 59 tiles;
- it has exactly one `P`, exactly one `E` and at least one `C`;
- the player can reach every `C` and the `E` from `P` without passing through walls;
- the file does not end with a newline after the last row.

Example:

```
1111111
1P0C0E1
1111111
```

## Command line

```
so_long maps/level1.ber
```

The command takes exactly one argument, and that argument must end in `.ber`.
It reads the map and validates it. When the argument is wrong it prints
`Error` and then `the arg is not valid`. When validation fails it prints
`Error` and then the reason, for example:

```
Error
Map ends with an empty line
```

A valid map produces no output. The command always exits with status 0.

## Library use

```python
from so_long.mapfile import load_map, MapError
from so_long.reachability import verify_map
from so_long.grid import locate, count_char
from so_long.cli import GameState

try:
    rows = load_map("maps/level1.ber")       # shape and character checks
    rows = verify_map("maps/level1.ber")     # plus tile counts and reachability
except MapError as exc:
    print(exc)
else:
    print(locate(rows, "P"), count_char(rows, "C"))
    state = GameState.from_map(rows)
    print(state.total_star, state.exit_position, state.window_size)
```

- `so_long.mapfile`: `read_lines`, `count_lines`, `check_trailing_newline`, `load_map` and the `MapError` exception.
- `so_long.validate`: `check_line`, `check_len`, `check_start_last`, `check_shape`, `check_map`.
- `so_long.reachability`: `flood_fill`, `check_count_char`, `verify_map`.
- `so_long.grid`: the `Point` dataclass, `locate` and `count_char`.
- `so_long.cli`: `GameState`, `check_extension` and `main`.

The package also contains some small helpers:

- `so_long.linereader.LineReader` reads a stream or file descriptor one line at a time through a fixed-size buffer. `MultiLineReader` does the same for several file descriptors, and keeps a separate buffer for each one.
- `so_long.printf.format_string` and `so_long.printf.printf` support the conversions `%c %s %p %d %i %u %x %X %%`.
- `so_long.strings`, `so_long.memory`, `so_long.charclass`, `so_long.intlist` and `so_long.fdio` provide C-style string, byte-buffer, character-class, linked-list (`IntList`) and output helpers.

## What it does not do

The package only validates maps. It does not open a window, draw tiles or run
the game. `GameState` holds the starting counters, the exit position and the
window size in pixels (32 pixels per tile), but nothing in the package plays
the game.

## Tests

```
pip install -e .[test]
pytest
```