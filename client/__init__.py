"""Pygame front end for the Gravity Snake game."""

__all__ = [
    "input",
    "main",
    "render",
]
