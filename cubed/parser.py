"""Reading and validating a scene file."""

from __future__ import annotations

import os

from .errors import file_error
from .mapgrid import load_map
from .model import GameInfo
from .textures import load_textures

CUB_EXTENSION = ".cub"


def validate_file(path: str | os.PathLike[str]) -> None:
    """Check that path names a readable file with the .cub extension."""
    name = os.fspath(path)
    dot = name.rfind(".")
    if dot <= 0 or name[dot:] != CUB_EXTENSION:
        raise file_error(1)
    if os.path.isdir(name):
        raise file_error(3)
    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise file_error(2) from exc
    with handle:
        try:
            handle.read(1)
        except OSError as exc:
            raise file_error(3) from exc


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of the file without their line breaks."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise file_error(2) from exc
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    if not lines:
        raise file_error(3)
    return lines


def parse_file(path: str | os.PathLike[str]) -> GameInfo:
    """Load a scene file and return everything it describes."""
    validate_file(path)
    info = GameInfo()
    lines = read_lines(path)
    load_textures(lines, info)
    load_map(lines, info)
    return info