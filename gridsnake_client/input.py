"""Translate local key presses into commands for the server."""

from __future__ import annotations

from typing import Optional

import pygame

KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
}


class InputManager:
    """Map pygame key events to the key names the server understands."""

    def key_for(self, event: pygame.event.Event) -> Optional[str]:
        if event.type != pygame.KEYDOWN:
            return None
        return KEY_NAMES.get(event.key)

    @staticmethod
    def wants_quit(event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return True
        return event.type == pygame.KEYDOWN and event.key in (pygame.K_q, pygame.K_ESCAPE)

    @staticmethod
    def wants_rejoin(event: pygame.event.Event) -> bool:
        return event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN
