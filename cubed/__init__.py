"""Raycasting maze explorer: .cub scene parsing, wall rendering and a game window."""

__version__ = "0.1.0"