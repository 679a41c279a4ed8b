from __future__ import annotations

from typing import Iterable, List, Sequence

import pytest

from simulation.session import Session


class ScriptedRandom:
    """Random source that replays fixed values, then a constant fallback.

    The default fallback of 0.99 spawns two vegetables near the bottom right
    corner and never a sick item, keeping restocks away from a centred head.
    """

    def __init__(self, values: Iterable[float] = (), choice_index: int = 0, fallback: float = 0.99) -> None:
        self.values: List[float] = list(values)
        self.choice_index = choice_index
        self.fallback = fallback

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.fallback

    def choice(self, seq: Sequence):
        return seq[self.choice_index % len(seq)]


@pytest.fixture
def scripted_random() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def session(scripted_random: ScriptedRandom) -> Session:
    """A running 800x600 session with an empty board."""

    game = Session(800, 600, rng=scripted_random)
    game.food = []
    game.remedies = []
    game.start()
    return game


@pytest.fixture
def make_random():
    """Factory for :class:`ScriptedRandom` with custom values."""

    return ScriptedRandom
