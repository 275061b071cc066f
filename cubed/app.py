"""The game window, its frame loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .drawing import Image, set_background  # noqa: E402
from .errors import CubError  # noqa: E402
from .model import GameInfo  # noqa: E402
from .parser import parse_file  # noqa: E402
from .raycaster import Action, Raycaster  # noqa: E402

WINDOW_TITLE = "cub3D"
FRAME_RATE = 60
USAGE = "Invalid number of arguments. Type => ./cub3D [.cub file]"

_KEY_BINDINGS = (
    (pygame.K_w, Action.FORWARD),
    (pygame.K_s, Action.BACKWARD),
    (pygame.K_a, Action.STRAFE_LEFT),
    (pygame.K_d, Action.STRAFE_RIGHT),
    (pygame.K_LEFT, Action.TURN_LEFT),
    (pygame.K_q, Action.TURN_LEFT),
    (pygame.K_RIGHT, Action.TURN_RIGHT),
    (pygame.K_e, Action.TURN_RIGHT),
)


def _actions(pressed) -> Iterator[Action]:
    for key, action in _KEY_BINDINGS:
        if pressed[key]:
            yield action


def _surface(image: Image) -> pygame.Surface:
    return pygame.image.frombuffer(image.tobytes(), (image.width, image.height), "RGBA")


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def run(info: GameInfo) -> Raycaster:
    """Open the game window for a parsed scene and play until it is closed.

    Returns the raycaster in the state the player left it.
    """
    caster = Raycaster.from_game_info(info)
    width, height = caster.screen_width, caster.screen_height

    background = Image(width, height)
    set_background(background, caster.ceiling_color, caster.floor_color, caster.vertical_view)
    screen = Image(width, height)
    caster.render(screen)

    pygame.init()
    try:
        try:
            window = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise CubError("Failed to initialize the window") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        background_surface = _surface(background)
        screen_surface = _surface(screen)
        clock = pygame.time.Clock()
        while True:
            if _quit_requested():
                break
            pressed = pygame.key.get_pressed()
            if pressed[pygame.K_ESCAPE]:
                break
            actions = list(_actions(pressed))
            if actions:
                caster.apply(actions)
                caster.render(screen)
                screen_surface = _surface(screen)
            window.blit(background_surface, (0, 0))
            window.blit(screen_surface, (0, 0))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return caster


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise CubError(USAGE)
        info = parse_file(args[0])
        run(info)
    except CubError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return exc.exit_status
    return 0


if __name__ == "__main__":
    sys.exit(main())