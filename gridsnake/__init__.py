"""Server package for the gridsnake multiplayer game."""

__all__ = [
    "collision",
    "constants",
    "food",
    "loop",
    "main",
    "protocol",
    "render",
    "snake",
    "utils",
    "world",
]
