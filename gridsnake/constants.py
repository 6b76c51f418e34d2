"""Gameplay constants shared across the server modules."""

TICK_INTERVAL: float = 0.1
INITIAL_SNAKE_SIZE: int = 3
FOOD_SCORE: int = 1
HEADER_ROWS: int = 1
SPAWN_ATTEMPTS: int = 200
PLACEMENT_ATTEMPTS: int = 50
SNAKE_COLLISIONS: bool = True
BOARD_WIDTH: int = 40
BOARD_HEIGHT: int = 24
HEAD_COLOR: str = "gray"
SNAKE_COLORS: tuple[str, ...] = ("red", "green", "yellow", "blue", "magenta", "cyan")
FOOD_COLORS: tuple[str, ...] = ("red", "green", "yellow", "blue", "magenta", "cyan", "white")
