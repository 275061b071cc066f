"""Parsing of the floor and ceiling colour lines."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import CubError, color_error
from .split import split_set

COLOR_SEPARATORS = " ,\t"
_DIGITS = "0123456789"


def pixel(r: int, g: int, b: int, a: int) -> int:
    """Pack four channels into a 0xRRGGBBAA value."""
    if max(r, g, b, a) > 255:
        raise CubError("Please do not exceed 255 in the colors...")
    return (r << 24 | g << 16 | b << 8 | a) & 0xFFFFFFFF


def validate_color_line(line: str) -> None:
    """Check that everything after the identifier is 'R,G,B' digits."""
    body = line[2:]
    if any(ch != "," and ch not in _DIGITS for ch in body):
        raise color_error(1)
    if body.count(",") != 2:
        raise color_error(1)


def get_color(lines: Iterable[str], ident: str) -> int:
    """Find the first line starting with ident and return its packed colour."""
    key = ident[:2]
    line = next((candidate for candidate in lines if candidate[:2] == key), None)
    if line is None:
        raise color_error(3)
    validate_color_line(line)
    fields = split_set(line, COLOR_SEPARATORS)
    if len(fields) < 4:
        raise color_error(1)
    red, green, blue = (int(value) for value in fields[1:4])
    return pixel(red, green, blue, 255)