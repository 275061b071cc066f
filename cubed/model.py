"""Core value types shared by the parser, the renderer and the game loop."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


class Color(IntEnum):
    """Named colours packed as 0xRRGGBBAA."""

    TRANSPARENT = 0x00000000
    TRANSLUCENT = 0x0000007F
    WHITE = 0xFFFFFFFF
    BLACK = 0x000000FF
    RED = 0xFF0000FF
    GREEN = 0x00FF00FF
    BLUE = 0x0000FFFF
    YELLOW = 0xFFFF00FF
    GRAY = 0x808080FF
    ORANGE = 0xFFA500FF
    PURPLE = 0xFF00FFFF
    CYAN = 0x00FFFFFF
    PINK = 0xFFC0CBFF
    BROWN = 0xA52A2AFF
    SKYBLUE = 0x87CEEBFF
    LIGHT_GRAY = 0xBBBBBBFF
    LIGHT_BLUE = 0xADD8E6FF
    LIGHT_GREEN = 0x90EE90FF
    LIGHT_YELLOW = 0xFFFFE0FF
    LIGHT_ORANGE = 0xFFDAB9FF
    LIGHT_PURPLE = 0xE6E6FAFF
    LIGHT_SKYBLUE = 0x87CEFAFF
    DARK_GRAY = 0x404040FF
    DARK_BLUE = 0x00008BFF
    DARK_GREEN = 0x006400FF
    DARK_RED = 0x8B0000FF
    DARK_ORANGE = 0xFF8C00FF
    DARK_PURPLE = 0x800080FF
    DARK_PINK = 0xFF1493FF
    DARK_YELLOW = 0xBDB76BFF
    DARK_SKYBLUE = 0x00BFFFFF


@dataclass(frozen=True)
class Point:
    """An integer position on a grid or an image."""

    x: int
    y: int


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class GameInfo:
    """Everything read from a scene description file."""

    floor_color: int = 0
    ceiling_color: int = 0
    north_texture: str | None = None
    east_texture: str | None = None
    south_texture: str | None = None
    west_texture: str | None = None
    player_direction: str = ""
    player_x: int = 0
    player_y: int = 0
    map_width: int = 0
    map_height: int = 0
    map: list[list[int]] = field(default_factory=list)
    map_start: int = 0


def degree_to_radian(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0