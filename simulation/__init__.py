"""Simulation package for the Gravity Snake game."""

__all__ = [
    "chain",
    "collision",
    "constants",
    "entities",
    "events",
    "food",
    "input",
    "physics",
    "session",
    "utils",
]
