"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from . import collision, constants
from .utils import Direction, Position


@dataclass
class Snake:
    """Authoritative representation of a snake controlled by a player.

    ``segments`` is ordered head first. The body only ever grows: every move
    pushes a new head and drops the tail unless the snake is growing.
    """

    owner: str
    color: str
    segments: List[Position]
    direction: Direction = Direction.RIGHT
    score: int = 0
    alive: bool = True
    on_bye: Optional[Callable[["Snake"], None]] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("A snake needs at least one segment")
        self.pending_direction = self.direction

    @classmethod
    def create(
        cls,
        owner: str,
        head: Position,
        color: str,
        size: int = constants.INITIAL_SNAKE_SIZE,
        direction: Direction = Direction.RIGHT,
    ) -> "Snake":
        """Create a straight snake whose body trails behind ``head``."""

        segments = [head]
        back = direction.opposite
        for _ in range(size - 1):
            segments.append(segments[-1].moved(back))
        return cls(owner=owner, color=color, segments=segments, direction=direction)

    @property
    def head(self) -> Position:
        return self.segments[0]

    def change_direction(self, direction: Direction) -> None:
        """Queue ``direction`` for the next move unless it reverses the snake."""

        if not self.alive or direction is self.direction.opposite:
            return
        self.pending_direction = direction

    def next_head(self) -> Position:
        """Return where the head will be after the next move."""

        return self.head.moved(self.pending_direction)

    def move(self, grow: bool = False) -> Position:
        """Advance the snake one cell and return the new head."""

        if not self.alive:
            return self.head
        new_head = self.next_head()
        self.direction = self.pending_direction
        self.segments.insert(0, new_head)
        if not grow:
            self.segments.pop()
        return new_head

    def is_at(self, position: Position) -> bool:
        return position in self.segments

    def hit(self, width: int, height: int, top: int = constants.HEADER_ROWS) -> bool:
        """Return ``True`` if the head left the playable area."""

        return collision.out_of_bounds(self.head, width, height, top)

    def hit_snake(self, other: "Snake") -> bool:
        """Return ``True`` if the head overlaps any segment of ``other``.

        Against itself the head cell is skipped, so a hit means the head
        re-entered its own body.
        """

        segments = other.segments[1:] if other is self else other.segments
        return collision.head_overlaps(self.head, segments)

    def scored(self) -> None:
        self.score += constants.FOOD_SCORE

    def bye(self) -> None:
        """Tear the snake down. Only the first call has any effect."""

        if not self.alive:
            return
        self.alive = False
        if self.on_bye is not None:
            self.on_bye(self)
