"""Client side board state mirroring the frames sent by the server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Cell:
    """A single coloured cell to draw."""

    x: int
    y: int
    color: str


@dataclass
class BoardState:
    """Latest frame received from the server."""

    width: int
    height: int
    tick: int = 0
    score: int = 0
    cells: List[Cell] = field(default_factory=list)
    leaderboard: List[dict] = field(default_factory=list)
    game_over: bool = False

    def update_from_frame(self, frame: dict) -> None:
        self.tick = int(frame.get("tick", self.tick))
        self.score = int(frame.get("score", self.score))
        self.cells = [
            Cell(int(cell["x"]), int(cell["y"]), str(cell.get("color", "white")))
            for cell in frame.get("cells", [])
        ]
        self.leaderboard = list(frame.get("leaderboard", []))
