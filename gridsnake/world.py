"""Authoritative game world simulation."""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional

from . import constants, utils
from .food import Food, food_target
from .render import RenderSink
from .snake import Snake
from .utils import Position


class World:
    """Holds all entities and advances the simulation on every tick.

    Snakes are keyed by the id of the client that owns them, so one client
    can never control two snakes. Every tick runs in a fixed order:

    1. collision sweep over the positions produced by the previous move phase
    2. move phase, where each snake steps and eats synchronously
    3. food respawn towards ``ceil(snakes / 2)``
    4. render dispatch

    Handlers (:meth:`join`, :meth:`leave`, :meth:`change_direction`) and
    :meth:`tick` are plain synchronous calls. Driven from a single event loop
    they never interleave, so a tick never sees a half applied join or leave.
    """

    def __init__(
        self,
        renderer: RenderSink,
        snake_collisions: bool = constants.SNAKE_COLLISIONS,
        on_collision: Optional[Callable[[Snake], None]] = None,
    ) -> None:
        self.renderer = renderer
        self.snake_collisions = snake_collisions
        self.on_collision = on_collision
        self.tick_count: int = 0
        self.snakes: Dict[str, Snake] = {}
        self.food: List[Food] = []

    def reset(self) -> None:
        """Drop every entity and present an empty board."""

        for snake in list(self.snakes.values()):
            snake.bye()
        self.snakes.clear()
        self.food = []
        self.tick_count = 0
        self.renderer.reset_score()
        self.renderer.clear_screen()
        self.renderer.render()

    # -- player lifecycle -------------------------------------------------

    def join(self, client_id: str) -> Optional[Snake]:
        """Create a snake for ``client_id``; ``None`` if it already has one."""

        if client_id in self.snakes:
            logging.debug("Ignoring duplicate join from %s", client_id)
            return None
        snake = Snake.create(
            owner=client_id,
            head=self._starting_head(),
            color=utils.random_item(constants.SNAKE_COLORS),
        )
        self.snakes[client_id] = snake
        logging.info("Snake for %s joined at %s", client_id, snake.head.to_tuple())
        return snake

    def leave(self, client_id: str) -> None:
        snake = self.snakes.get(client_id)
        if snake is None:
            return
        self.remove_snake(snake)
        logging.info("Snake for %s left", client_id)

    def change_direction(self, client_id: str, key: object) -> None:
        snake = self.snakes.get(client_id)
        if snake is None:
            return
        direction = utils.direction_from_key(key)
        if direction is not None:
            snake.change_direction(direction)

    def remove_snake(self, snake: Snake) -> None:
        """Remove ``snake`` from the live set and tear it down once."""

        if self.snakes.get(snake.owner) is not snake:
            return
        del self.snakes[snake.owner]
        snake.bye()

    def _starting_head(self) -> Position:
        container = self.renderer.container
        size = constants.INITIAL_SNAKE_SIZE
        # Body trails left of the head; heads start in the left half.
        low = size - 1
        high = max(low, container.width // 2)
        head = Position(low, constants.HEADER_ROWS)
        for _ in range(constants.PLACEMENT_ATTEMPTS):
            head = Position(
                random.randint(low, high),
                random.randrange(constants.HEADER_ROWS, container.height),
            )
            body = [Position(head.x - offset, head.y) for offset in range(size)]
            if not any(other.is_at(cell) for other in self.snakes.values() for cell in body):
                break
        return head

    # -- tick phases ------------------------------------------------------

    def tick(self) -> None:
        self.tick_count += 1
        self.check_player_hits()
        self.move_snakes()
        self.generate_food()
        self.draw()

    def check_player_hits(self) -> List[Snake]:
        """Remove every snake with a fatal collision and return them.

        Snakes are checked in join order against the live set as it stands
        at that moment, so a snake removed earlier in the sweep is never an
        obstacle for the ones after it.
        """

        container = self.renderer.container
        removed: List[Snake] = []
        for snake in list(self.snakes.values()):
            if not snake.alive:
                continue
            if snake.hit(container.width, container.height):
                logging.info("Snake for %s hit the wall at %s", snake.owner, snake.head.to_tuple())
                self._kill(snake, removed)
                continue
            if not self.snake_collisions:
                continue
            for other in list(self.snakes.values()):
                if snake.hit_snake(other):
                    logging.info("Snake for %s ran into %s", snake.owner, other.owner)
                    self._kill(snake, removed)
                    break
        return removed

    def _kill(self, snake: Snake, removed: List[Snake]) -> None:
        self.remove_snake(snake)
        removed.append(snake)
        if self.on_collision is not None:
            self.on_collision(snake)

    def move_snakes(self) -> None:
        for snake in list(self.snakes.values()):
            index = self._food_index_at(snake.next_head())
            snake.move(grow=index is not None)
            if index is not None:
                self._eat(snake, index)

    def _food_index_at(self, position: Position) -> Optional[int]:
        for index, food in enumerate(self.food):
            if food.position == position:
                return index
        return None

    def _eat(self, snake: Snake, index: int) -> None:
        del self.food[index]
        snake.scored()
        self.renderer.update_score(snake.score)
        logging.debug("Snake for %s scored, now %s", snake.owner, snake.score)

    def generate_food(self) -> None:
        deficit = food_target(len(self.snakes)) - len(self.food)
        for _ in range(deficit):
            food = Food.spawn(self.snakes.values(), self.renderer.container)
            if food is None:
                logging.warning("Board is full, skipping food spawn this tick")
                return
            self.food.append(food)

    def draw(self) -> None:
        self.renderer.clear_screen()
        for food in self.food:
            self.renderer.draw(food.position, food.color)
        for snake in self.snakes.values():
            for index, segment in enumerate(snake.segments):
                self.renderer.draw(segment, constants.HEAD_COLOR if index == 0 else snake.color)
        self.renderer.render()

    # -- derived views ----------------------------------------------------

    def leaderboard(self) -> List[dict]:
        entries = sorted(self.snakes.values(), key=lambda s: s.score, reverse=True)
        return [
            {"owner": snake.owner, "color": snake.color, "score": snake.score}
            for snake in entries[:10]
        ]
