"""Food entity definition and spawn policy."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Iterable, Optional

from . import constants, utils
from .render import Container
from .snake import Snake


def food_target(snake_count: int) -> int:
    """Number of food items the board should hold for ``snake_count`` players."""

    return math.ceil(snake_count / 2)


@dataclass(frozen=True)
class Food:
    """A collectible cell that makes a snake grow."""

    position: utils.Position
    color: str

    @classmethod
    def spawn(
        cls,
        snakes: Iterable[Snake],
        container: Container,
        attempts: int = constants.SPAWN_ATTEMPTS,
    ) -> Optional["Food"]:
        """Create food on a random cell that no snake occupies.

        Gives up after ``attempts`` occupied draws and returns ``None``. Cells
        already holding food are not excluded, so two items may stack.
        """

        snakes = list(snakes)
        for _ in range(attempts):
            position = utils.random_cell(container.width, container.height, constants.HEADER_ROWS)
            if any(snake.is_at(position) for snake in snakes):
                continue
            return cls(position=position, color=utils.random_item(constants.FOOD_COLORS))
        logging.debug("No free cell for food after %s attempts", attempts)
        return None
