"""Errors raised while loading or running a scene."""

from __future__ import annotations


class CubError(Exception):
    """A fatal problem with the scene file or the game setup."""

    exit_status = 1


_COLOR_MESSAGES = {
    1: 'Invalid color setup... Respect this rgb format: "[F or C] R,G,B"',
    2: "Invalid rgb value. Pick a number from 0 to 255...",
    3: "Invalid floor and/or ceiling identifier...",
}

_FILE_MESSAGES = {
    1: "Please, put a .cub file...",
    2: "Unable to open the provided file...",
    3: "The .cub file is empty...",
}

_MAP_MESSAGES = {
    1: "No map found in file. Make sure to put a map at the end.",
    2: "The map has an invalid number of players...",
    3: "The map is not playable... Borders may not be set correctly.",
}

_TEXTURE_MESSAGES = {
    1: "Identifiers missing from .cub file on texture(s).",
    2: "No file extension on texture(s).",
    3: "Incorrect file extension on texture(s).",
    4: "Some texture(s) and/or color(s) have the same value.",
    5: "Error in the identifiers, make sure to put (NO,SO,EA,WE) and (F,C).",
}


def _build(table: dict[int, str], kind: str, code: int) -> CubError:
    try:
        return CubError(table[code])
    except KeyError:
        raise ValueError(f"unknown {kind} error code: {code}") from None


def color_error(code: int) -> CubError:
    """Return the error for a floor or ceiling colour problem."""
    return _build(_COLOR_MESSAGES, "color", code)


def file_error(code: int) -> CubError:
    """Return the error for a problem with the scene file itself."""
    return _build(_FILE_MESSAGES, "file", code)


def map_error(code: int) -> CubError:
    """Return the error for a problem with the map layout."""
    return _build(_MAP_MESSAGES, "map", code)


def texture_error(code: int) -> CubError:
    """Return the error for a problem with the texture identifiers."""
    return _build(_TEXTURE_MESSAGES, "texture", code)