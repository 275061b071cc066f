"""Player state and the DDA raycaster that renders textured walls."""

from __future__ import annotations

import math
import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from PIL import Image as PILImage

from .drawing import Image
from .errors import CubError
from .model import Color, GameInfo, degree_to_radian

WALL = 1
FLOOR = 0
SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 900
_NO_DIRECTION = 1e30
_START_ANGLES = {"N": -90, "E": 0, "S": 90, "W": 180}

# Texture slots, in the order the raycaster picks them.
WEST, EAST, NORTH, SOUTH = range(4)


@dataclass(frozen=True)
class Texture:
    """A decoded RGBA image used to paint walls."""

    width: int
    height: int
    pixels: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture must not be empty")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError("pixel data does not match the texture size")

    def color_at(self, x: int, y: int) -> int:
        """Return the 0xRRGGBBAA colour of one texel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) is outside the texture")
        offset = (y * self.width + x) * 4
        return int.from_bytes(self.pixels[offset:offset + 4], "big")


def load_png(path: str | os.PathLike[str] | None) -> Texture:
    """Load a PNG file as a texture."""
    if path is None:
        raise CubError("Failed to load texture")
    try:
        with PILImage.open(path) as source:
            rgba = source.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise CubError(f"Failed to load texture {os.fspath(path)}") from exc
    return Texture(rgba.width, rgba.height, rgba.tobytes())


class Action(Enum):
    """Player inputs, applied in the order they are declared."""

    FORWARD = auto()
    BACKWARD = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()


@dataclass(frozen=True)
class RayHit:
    """Where the ray for one screen column hit a wall and how to draw it."""

    column: int
    map_x: int
    map_y: int
    side: int
    distance: float
    ray_dx: float
    ray_dy: float
    line_height: int
    draw_start: int
    draw_end: int
    wall_x: float
    tex_num: int
    tex_x: int
    tex_step: float
    tex_pos: float


def compute_tile_size(
    screen_width: int, screen_height: int, map_width: int, map_height: int
) -> int | None:
    """Return the minimap tile size, or None when it would be under 3 pixels."""
    size = min((screen_width // 2) // map_width, (screen_height // 2) // map_height)
    return size if size >= 3 else None


@dataclass
class Raycaster:
    """The player's position and view over a grid of walls and floors."""

    grid: list[list[int]]
    textures: Sequence[Texture]
    px: float
    py: float
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    floor_color: int = 0
    ceiling_color: int = 0
    pdx: float = 1.0
    pdy: float = 0.0
    cpx: float = 0.0
    cpy: float | None = None
    mspeed: float = 0.05
    rspeed: float = 0.05
    vertical_view: int = 0
    tile_size: int | None = field(init=False)

    def __post_init__(self) -> None:
        if len(self.textures) != 4:
            raise ValueError("exactly four wall textures are required")
        if self.cpy is None:
            self.cpy = 0.5 * (self.screen_width / self.screen_height)
        self.tile_size = compute_tile_size(
            self.screen_width, self.screen_height, self.map_width, self.map_height
        )

    @property
    def map_width(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    @property
    def map_height(self) -> int:
        return len(self.grid)

    @classmethod
    def from_game_info(
        cls,
        info: GameInfo,
        textures: Sequence[Texture] | None = None,
    ) -> Raycaster:
        """Build a raycaster for a parsed scene, loading its textures if needed."""
        if textures is None:
            textures = [
                load_png(info.west_texture),
                load_png(info.east_texture),
                load_png(info.north_texture),
                load_png(info.south_texture),
            ]
        caster = cls(
            grid=info.map,
            textures=list(textures),
            px=info.player_x + 0.5,
            py=info.player_y + 0.5,
            floor_color=info.floor_color,
            ceiling_color=info.ceiling_color,
        )
        angle = _START_ANGLES.get(info.player_direction)
        if angle is not None:
            caster.rotate(degree_to_radian(angle))
        return caster

    def _cell(self, x: int, y: int) -> int:
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return WALL

    def rotate(self, angle: float) -> None:
        """Turn the view direction and the camera plane by angle radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.pdx, self.pdy = (
            self.pdx * cos_a - self.pdy * sin_a,
            self.pdx * sin_a + self.pdy * cos_a,
        )
        self.cpx, self.cpy = (
            self.cpx * cos_a - self.cpy * sin_a,
            self.cpx * sin_a + self.cpy * cos_a,
        )

    def move(self, dx: float, dy: float) -> None:
        """Move along each axis separately, unless that axis would enter a non-floor cell."""
        if self._cell(int(self.px + dx), int(self.py)) == FLOOR:
            self.px += dx
        if self._cell(int(self.px), int(self.py + dy)) == FLOOR:
            self.py += dy

    def apply(self, actions: Iterable[Action]) -> None:
        """Apply one frame of player input."""
        active = set(actions)
        step_x = self.mspeed * self.pdx
        step_y = self.mspeed * self.pdy
        moves = {
            Action.FORWARD: (step_x, step_y),
            Action.BACKWARD: (-step_x, -step_y),
            Action.STRAFE_LEFT: (step_y, -step_x),
            Action.STRAFE_RIGHT: (-step_y, step_x),
        }
        for action in Action:
            if action not in active:
                continue
            if action in moves:
                self.move(*moves[action])
            elif action is Action.TURN_LEFT:
                self.rotate(-self.rspeed)
            else:
                self.rotate(self.rspeed)

    def cast_ray(self, column: int) -> RayHit:
        """Cast the ray for one screen column and return what it hit."""
        width, height = self.screen_width, self.screen_height
        camera_x = 2 * column / width - 1
        rdx = self.pdx + self.cpx * camera_x
        rdy = self.pdy + self.cpy * camera_x
        map_x, map_y = int(self.px), int(self.py)

        delta_x = _NO_DIRECTION if rdx == 0 else abs(1 / rdx)
        delta_y = _NO_DIRECTION if rdy == 0 else abs(1 / rdy)
        if rdx < 0:
            step_x, side_x = -1, (self.px - map_x) * delta_x
        else:
            step_x, side_x = 1, (map_x + 1.0 - self.px) * delta_x
        if rdy < 0:
            step_y, side_y = -1, (self.py - map_y) * delta_y
        else:
            step_y, side_y = 1, (map_y + 1.0 - self.py) * delta_y

        while True:
            if side_x < side_y:
                side_x += delta_x
                map_x += step_x
                side = 0
            else:
                side_y += delta_y
                map_y += step_y
                side = 1
            if self._cell(map_x, map_y) == WALL:
                break
        distance = side_x - delta_x if side == 0 else side_y - delta_y

        line_height = int(height / distance) if distance > 0 else sys.maxsize
        half = line_height // 2
        draw_start = max(-half + height // 2 + self.vertical_view, 0)
        draw_end = min(half + height // 2 + self.vertical_view, height - 1)
        wall_x = self.py + distance * rdy if side == 0 else self.px + distance * rdx
        wall_x -= math.floor(wall_x)

        if side == 0:
            tex_num = WEST if rdx < 0 else EAST
        else:
            tex_num = NORTH if rdy < 0 else SOUTH
        texture = self.textures[tex_num]
        tex_x = int(wall_x * texture.width)
        if (side == 0 and rdx > 0) or (side == 1 and rdy < 0):
            tex_x = texture.width - tex_x - 1
        tex_step = texture.height / line_height
        tex_pos = (draw_start - self.vertical_view - height // 2 + half) * tex_step

        return RayHit(
            column=column,
            map_x=map_x,
            map_y=map_y,
            side=side,
            distance=distance,
            ray_dx=rdx,
            ray_dy=rdy,
            line_height=line_height,
            draw_start=draw_start,
            draw_end=draw_end,
            wall_x=wall_x,
            tex_num=tex_num,
            tex_x=tex_x,
            tex_step=tex_step,
            tex_pos=tex_pos,
        )

    def _draw_column(self, screen: Image, hit: RayHit) -> None:
        texture = self.textures[hit.tex_num]
        column = hit.column
        texel_x = texture.width - hit.tex_x - 1
        clear = int(Color.TRANSPARENT)
        for y in range(hit.draw_start):
            screen.put_pixel(column, y, clear)
        position = hit.tex_pos
        for y in range(hit.draw_start, hit.draw_end):
            texel_y = min(max(int(position), 0), texture.height - 1)
            position += hit.tex_step
            screen.put_pixel(column, y, texture.color_at(texel_x, texel_y))
        for y in range(max(hit.draw_start, hit.draw_end), self.screen_height):
            screen.put_pixel(column, y, clear)

    def render(self, screen: Image) -> list[RayHit]:
        """Draw the walls seen from the player's position onto screen."""
        hits = [self.cast_ray(column) for column in range(self.screen_width)]
        for hit in hits:
            self._draw_column(screen, hit)
        return hits