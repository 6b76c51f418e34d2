"""Pygame based renderer for the game client."""

from __future__ import annotations

from typing import Iterable, List

import pygame

from .entities import BoardState, Cell


class Renderer:
    """Responsible for all drawing tasks.

    The board is a grid of square cells; row 0 is the header that shows the
    score, so snakes and food are only ever drawn from row 1 downwards.
    """

    def __init__(self, screen: pygame.Surface, cell_size: int) -> None:
        self.screen = screen
        self.cell_size = cell_size
        self.font = pygame.font.SysFont("arial", max(12, cell_size - 4))
        self.leaderboard_font = pygame.font.SysFont("arial", 16)
        self.background_color = (20, 24, 28)
        self.header_color = (40, 46, 52)

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw_header(self, board: BoardState) -> None:
        pygame.draw.rect(self.screen, self.header_color, (0, 0, self.screen.get_width(), self.cell_size))
        text = f"Score: {board.score}"
        if board.game_over:
            text += "   Game over - press Enter to play again"
        label = self.font.render(text, True, (255, 255, 255))
        self.screen.blit(label, (4, (self.cell_size - label.get_height()) / 2))

    def draw_cells(self, cells: Iterable[Cell]) -> None:
        size = self.cell_size
        for cell in cells:
            try:
                color = pygame.Color(cell.color)
            except ValueError:
                color = pygame.Color("white")
            pygame.draw.rect(self.screen, color, (cell.x * size, cell.y * size, size - 1, size - 1))

    def draw_leaderboard(self, entries: List[dict]) -> None:
        x = self.screen.get_width() - 160
        y = self.cell_size + 8
        for index, entry in enumerate(entries):
            text = f"{index + 1}. {entry['score']}"
            surface = self.leaderboard_font.render(text, True, pygame.Color(entry.get("color", "white")))
            self.screen.blit(surface, (x, y))
            y += 18

    def present(self) -> None:
        pygame.display.flip()
