"""Render sink used by the world to publish frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from .utils import Position


@dataclass(frozen=True)
class Container:
    """Size of the drawable area in cells, header row included."""

    width: int
    height: int


@dataclass(frozen=True)
class Cell:
    """One draw instruction."""

    x: int
    y: int
    color: str

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "color": self.color}


class RenderSink(Protocol):
    """Write-only target for draw commands and score updates."""

    @property
    def container(self) -> Container: ...

    def draw(self, position: Position, color: str) -> None: ...

    def clear_screen(self) -> None: ...

    def render(self) -> None: ...

    def reset_score(self) -> None: ...

    def update_score(self, score: int) -> None: ...


@dataclass
class Frame:
    """A complete picture of the board as drawn during one tick."""

    number: int
    cells: List[Cell] = field(default_factory=list)
    score: int = 0


class FrameRenderer:
    """Collect draw commands into frames.

    Commands issued between :meth:`clear_screen` and :meth:`render` form one
    frame. :meth:`render` publishes it as :attr:`last_frame`.
    """

    def __init__(self, width: int, height: int) -> None:
        self._container = Container(width, height)
        self._frames = 0
        self._pending: List[Cell] = []
        self.score = 0
        self.last_frame: Optional[Frame] = None

    @property
    def container(self) -> Container:
        return self._container

    def draw(self, position: Position, color: str) -> None:
        self._pending.append(Cell(position.x, position.y, color))

    def clear_screen(self) -> None:
        self._pending = []

    def render(self) -> None:
        self._frames += 1
        frame = Frame(number=self._frames, cells=self._pending, score=self.score)
        self._pending = []
        self.last_frame = frame

    def reset_score(self) -> None:
        self.score = 0

    def update_score(self, score: int) -> None:
        self.score = score
