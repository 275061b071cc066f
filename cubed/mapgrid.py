"""Validation of the map section and its conversion to an integer grid."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .errors import CubError, map_error
from .model import GameInfo

PLAYER_CHARS = "NSEW"
_VALID_CELLS = frozenset("NSEW10 ")
_CELL_VALUES = {"0": 0, "1": 1, " ": 2, "\t": 2, "\n": 2, "\v": 2, "\f": 2, "\r": 2}
EMPTY = 2


def _cell(rows: Sequence[str], x: int, y: int) -> str:
    row = rows[y]
    return row[x] if 0 <= x < len(row) else ""


def is_zero_exposed(rows: Sequence[str], x: int, y: int, width: int, height: int) -> int:
    """Classify the neighbour of a floor cell.

    0: wall or floor, 1: anything else inside the map,
    2: outside the map, 3: anything else on the map border.
    """
    if not (0 <= x < width and 0 <= y < height):
        return 2
    if _cell(rows, x, y) in ("0", "1"):
        return 0
    if x - 1 < 0 or x + 1 >= width or y - 1 < 0 or y + 1 >= height:
        return 3
    return 1


def check_exposure(rows: Sequence[str], x: int, y: int, width: int, height: int) -> None:
    """Raise if the cell at (x, y) is an open floor or an unknown character."""
    cell = _cell(rows, x, y)
    if not cell:
        return
    if cell == "0":
        neighbours = ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
        codes = [
            (nx, ny, is_zero_exposed(rows, nx, ny, width, height))
            for nx, ny in neighbours
        ]
        if any(code for _, _, code in codes):
            for nx, ny, code in codes:
                if code == 1:
                    print(f"Error at: map[{ny}][{nx}] = {_cell(rows, nx, ny)}")
            raise CubError("Map is not closed with ones//Identifiers")
    elif cell not in _VALID_CELLS:
        raise CubError(f"Map has non-valid identifier... {rows[y][x:]}")


def flood_check(lines: Sequence[str], info: GameInfo) -> None:
    """Check every map cell for openings and invalid characters."""
    start = info.map_start
    rows = list(lines[start:start + info.map_height])
    for y, row in enumerate(rows):
        for x in range(min(info.map_width, len(row))):
            check_exposure(rows, x, y, info.map_width, info.map_height)


def _int_row(line: str, width: int) -> list[int]:
    cells = [_CELL_VALUES.get(ch, 0) for ch in line]
    return cells + [EMPTY] * (width - len(cells))


def create_int_map(lines: Sequence[str], info: GameInfo) -> None:
    """Measure the map, validate it and store it as a grid in info.

    Walls become 1, floors 0 and blanks or padding 2.
    """
    start = info.map_start
    end = start + 1
    while end < len(lines) and lines[end]:
        end += 1
    info.map_width = max(len(line) for line in lines[start:end])
    info.map_height = end - start
    if any(lines[end:]):
        raise CubError("Please, let the rest of the .cub file empty after the map...")
    flood_check(lines, info)
    info.map = [_int_row(line, info.map_width) for line in lines[start:end]]


def find_player(lines: MutableSequence[str], info: GameInfo) -> None:
    """Record the player's start and replace it with floor in lines."""
    players = 0
    start = info.map_start
    for index, line in enumerate(lines[start:], start=start):
        column = next((pos for pos, ch in enumerate(line) if ch in PLAYER_CHARS), None)
        if column is None:
            continue
        info.player_direction = line[column]
        info.player_x = column
        info.player_y = index - start
        lines[index] = line[:column] + "0" + line[column + 1:]
        players += 1
    if players != 1:
        raise map_error(2)


def warn_tabs(lines: Sequence[str], map_start: int) -> bool:
    """Print a warning if the map contains tabs; tell whether it did."""
    if any("\t" in line for line in lines[map_start:]):
        print("Warning: The map contains tabs(\\t). You may encounter some issues...")
        print("You should replace tabs by spaces.")
        return True
    return False


def load_map(lines: MutableSequence[str], info: GameInfo) -> None:
    """Locate the player, validate the map and build the grid."""
    find_player(lines, info)
    warn_tabs(lines, info.map_start)
    create_int_map(lines, info)