"""Collision helpers for the game server."""

from __future__ import annotations

from typing import Iterable

from .utils import Position


def out_of_bounds(head: Position, width: int, height: int, top: int = 0) -> bool:
    """Return ``True`` if ``head`` lies outside ``[0, width)`` x ``[top, height)``."""

    return not (0 <= head.x < width and top <= head.y < height)


def head_overlaps(head: Position, segments: Iterable[Position]) -> bool:
    """Return ``True`` if ``head`` shares a cell with any of ``segments``."""

    for segment in segments:
        if segment == head:
            return True
    return False
