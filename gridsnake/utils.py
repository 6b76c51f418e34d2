"""Utility primitives used by the authoritative game server."""

from __future__ import annotations

from dataclasses import dataclass
import enum
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class Direction(enum.Enum):
    """The four cardinal headings a snake can take.

    ``y`` grows downwards, matching the row order of the render container.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

KEY_BINDINGS = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


@dataclass(frozen=True)
class Position:
    """A cell on the game grid."""

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the neighbouring cell one step towards ``direction``."""

        return Position(self.x + direction.dx, self.y + direction.dy)

    def to_tuple(self) -> tuple[int, int]:
        """Return the position as an ``(x, y)`` tuple."""

        return self.x, self.y


def direction_from_key(name: object) -> Optional[Direction]:
    """Map an arrow/WASD key name to a heading, ``None`` when unbound."""

    if not isinstance(name, str):
        return None
    return KEY_BINDINGS.get(name.lower())


def random_item(items: Sequence[T]) -> T:
    """Return an element of ``items`` chosen uniformly at random."""

    return items[random.randrange(len(items))]


def random_cell(width: int, height: int, top: int = 0) -> Position:
    """Return a uniformly random cell with ``x`` in ``[0, width)`` and ``y`` in ``[top, height)``."""

    return Position(random.randrange(width), random.randrange(top, height))
