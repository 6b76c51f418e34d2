from __future__ import annotations

from typing import Sequence, Tuple

import pytest

from gridsnake.render import FrameRenderer
from gridsnake.snake import Snake
from gridsnake.utils import Direction, Position
from gridsnake.world import World


def make_snake(
    owner: str,
    cells: Sequence[Tuple[int, int]],
    direction: Direction = Direction.RIGHT,
    color: str = "orange",
) -> Snake:
    return Snake(
        owner=owner,
        color=color,
        segments=[Position(x, y) for x, y in cells],
        direction=direction,
    )


def add_snake(world: World, snake: Snake) -> Snake:
    world.snakes[snake.owner] = snake
    return snake


@pytest.fixture
def renderer() -> FrameRenderer:
    return FrameRenderer(10, 10)


@pytest.fixture
def world(renderer: FrameRenderer) -> World:
    return World(renderer, snake_collisions=True)
