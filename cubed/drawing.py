"""An in-memory RGBA image and the primitive shapes drawn on it."""

from __future__ import annotations

import struct
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .errors import CubError
from .model import Color, Point, Rectangle

_MASK = 0xFFFFFFFF


@dataclass(eq=False)
class Image:
    """A width x height grid of 0xRRGGBBAA pixels, transparent at first."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise CubError("Failed to initialize image")
        self.pixels = [int(Color.TRANSPARENT)] * (self.width * self.height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._contains(x, y):
            self.pixels[y * self.width + x] = int(color) & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]

    def tobytes(self) -> bytes:
        """Return the pixels as packed RGBA bytes, row by row."""
        return struct.pack(f">{len(self.pixels)}I", *self.pixels)


def line_points(p1: Point, p2: Point) -> Iterator[Point]:
    """Yield the points of the Bresenham line from p1 to p2, both included."""
    dx = abs(p2.x - p1.x)
    sx = 1 if p1.x < p2.x else -1
    dy = -abs(p2.y - p1.y)
    sy = 1 if p1.y < p2.y else -1
    err = dx + dy
    x, y = p1.x, p1.y
    while True:
        yield Point(x, y)
        if x == p2.x and y == p2.y:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def draw_line(image: Image, p1: Point, p2: Point, color: int) -> None:
    """Draw a straight line between two points."""
    for point in line_points(p1, p2):
        image.put_pixel(point.x, point.y, color)


def draw_rectangle(image: Image, rect: Rectangle, color: int) -> None:
    """Fill a rectangle, clipped to the image."""
    x0 = max(rect.x, 0)
    x1 = min(rect.x + rect.width, image.width)
    y0 = max(rect.y, 0)
    y1 = min(rect.y + rect.height, image.height)
    if x0 >= x1 or y0 >= y1:
        return
    run = [int(color) & _MASK] * (x1 - x0)
    for y in range(y0, y1):
        start = y * image.width
        image.pixels[start + x0:start + x1] = run


def draw_triangle(image: Image, points: Sequence[Point], color: int) -> None:
    """Draw the outline of the triangle given by three points."""
    a, b, c = points
    draw_line(image, a, b, color)
    draw_line(image, b, c, color)
    draw_line(image, c, a, color)


def set_background(
    image: Image, ceiling_color: int, floor_color: int, vertical_view: int = 0
) -> None:
    """Paint the upper half with the ceiling colour and the lower with the floor."""
    half = image.height // 2
    horizon = half + vertical_view
    draw_rectangle(image, Rectangle(0, 0, image.width, horizon), ceiling_color)
    draw_rectangle(
        image, Rectangle(0, horizon, image.width, half - vertical_view), floor_color
    )