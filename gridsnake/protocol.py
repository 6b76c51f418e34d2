"""JSON protocol helpers for the websocket transport."""

from __future__ import annotations

import json
from typing import List

from .render import Container, Frame
from .snake import Snake


def parse_client_message(message: str | bytes) -> dict:
    """Parse a raw client ``message`` into a Python dictionary."""

    try:
        payload = json.loads(message)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid client message") from exc
    if not isinstance(payload, dict):
        raise ValueError("Client message must be a JSON object")
    return payload


def encode_frame(frame: Frame, leaderboard: List[dict]) -> str:
    """Encode a rendered frame for broadcasting to clients."""

    return json.dumps(
        {
            "type": "frame",
            "tick": frame.number,
            "cells": [cell.to_dict() for cell in frame.cells],
            "score": frame.score,
            "leaderboard": leaderboard,
        }
    )


def encode_welcome(snake: Snake, container: Container) -> str:
    """Encode the welcome payload sent upon connection."""

    return json.dumps(
        {
            "type": "welcome",
            "id": snake.owner,
            "color": snake.color,
            "width": container.width,
            "height": container.height,
        }
    )


def encode_game_over(snake: Snake) -> str:
    """Encode the notice sent to a client whose snake was removed."""

    return json.dumps({"type": "gameover", "id": snake.owner, "score": snake.score})
