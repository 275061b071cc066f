"""Parsing of the header of a scene file: texture paths and colours."""

from __future__ import annotations

from collections.abc import Sequence

from .colors import get_color
from .errors import map_error, texture_error
from .model import GameInfo

HEADER_IDS = ("NO ", "EA ", "SO ", "WE ", "F ", "C ")
MAP_START_CHARS = frozenset("\t 1")
PNG_EXTENSION = ".png"


def find_map_position(lines: Sequence[str]) -> int | None:
    """Return the index of the first line made only of '1', spaces and tabs."""
    return next(
        (
            index
            for index, line in enumerate(lines)
            if line and set(line) <= MAP_START_CHARS
        ),
        None,
    )


def get_texture_value(lines: Sequence[str], ident: str) -> str:
    """Return the texture path given on the first line starting with ident."""
    line = next((candidate for candidate in lines if candidate.startswith(ident)), None)
    if line is None:
        raise texture_error(1)
    path = line[len(ident):]
    if "." not in path:
        raise texture_error(2)
    if path[path.rindex("."):] != PNG_EXTENSION:
        raise texture_error(3)
    return path


def validate_header(lines: Sequence[str], map_start: int) -> None:
    """Reject header lines that carry none of the known identifiers.

    Blank lines are ignored, and so is the line right before the map.
    """
    for index, line in enumerate(lines[:map_start]):
        if not line:
            continue
        if index + 1 < map_start and not line.startswith(HEADER_IDS):
            raise texture_error(5)


def has_duplicate(lines: Sequence[str], ident: str) -> bool:
    """Tell whether ident starts more than one line; raise if it starts none."""
    count = sum(line.startswith(ident) for line in lines)
    if count == 0:
        raise texture_error(1)
    return count > 1


def check_textures(lines: Sequence[str]) -> int:
    """Validate the header and return the index where the map starts."""
    map_start = find_map_position(lines)
    if map_start is None:
        raise map_error(1)
    validate_header(lines, map_start)
    if any(has_duplicate(lines, ident) for ident in HEADER_IDS):
        raise texture_error(4)
    return map_start


def load_textures(lines: Sequence[str], info: GameInfo) -> None:
    """Fill info with the map position, texture paths and colours."""
    info.map_start = check_textures(lines)
    info.north_texture = get_texture_value(lines, "NO ")
    info.south_texture = get_texture_value(lines, "SO ")
    info.east_texture = get_texture_value(lines, "EA ")
    info.west_texture = get_texture_value(lines, "WE ")
    info.ceiling_color = get_color(lines, "C ")
    info.floor_color = get_color(lines, "F ")