"""Animation events emitted by the simulation for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from . import constants


class AnimationKind(str, Enum):
    EAT = "eat"
    OUCH = "ouch"
    SICK = "sick"
    CELEBRATION = "celebration"
    REMEDY_CELEBRATION = "remedy_celebration"


DURATIONS = {
    AnimationKind.EAT: constants.EAT_FRAMES,
    AnimationKind.OUCH: constants.OUCH_FRAMES,
    AnimationKind.SICK: constants.SICK_FRAMES,
    AnimationKind.CELEBRATION: constants.CELEBRATION_FRAMES,
    AnimationKind.REMEDY_CELEBRATION: constants.CELEBRATION_FRAMES,
}


@dataclass
class AnimationEvent:
    """A short lived visual effect.

    ``timer`` counts frames up from zero; the event expires once it reaches
    ``max_timer``.
    """

    kind: AnimationKind
    x: float
    y: float
    emoji: str
    timer: int = 0
    max_timer: int = 0

    @classmethod
    def create(cls, kind: AnimationKind, x: float, y: float, emoji: str) -> "AnimationEvent":
        """Create a fresh event with the duration registered for ``kind``."""

        return cls(kind=kind, x=x, y=y, emoji=emoji, timer=0, max_timer=DURATIONS[kind])

    @property
    def progress(self) -> float:
        """Fraction of the lifetime already elapsed, in ``[0, 1]``."""

        if self.max_timer <= 0:
            return 1.0
        return min(1.0, self.timer / self.max_timer)

    @property
    def expired(self) -> bool:
        return self.timer >= self.max_timer


def advance_animations(animations: Iterable[AnimationEvent]) -> List[AnimationEvent]:
    """Tick every animation by one frame and return the ones still alive."""

    alive: List[AnimationEvent] = []
    for animation in animations:
        animation.timer += 1
        if not animation.expired:
            alive.append(animation)
    return alive
