"""Turn raw key and orientation input into a per-frame tilt vector."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from . import constants, utils

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

_ARROWS = {UP: "↑", DOWN: "↓", LEFT: "←", RIGHT: "→"}


@dataclass(frozen=True)
class Tilt:
    """Immutable tilt snapshot consumed by one simulation step."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class RawInput:
    """Latest raw input, written only by the event handlers.

    ``orientation`` holds the most recent ``(gamma, beta)`` reading in degrees
    until the aggregator consumes it.
    """

    held: Set[str] = field(default_factory=set)
    orientation: Optional[Tuple[float, float]] = None

    def press(self, direction: str) -> None:
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.held.add(direction)

    def release(self, direction: str) -> None:
        self.held.discard(direction)

    def set_orientation(self, gamma: float, beta: float) -> None:
        self.orientation = (gamma, beta)

    def clear(self) -> None:
        self.held.clear()
        self.orientation = None

    def active_arrows(self) -> List[str]:
        """Return the arrows of the held directions in display order."""

        return [_ARROWS[direction] for direction in DIRECTIONS if direction in self.held]


def orientation_tilt(gamma: float, beta: float) -> Tilt:
    """Map device orientation angles to a tilt clamped to ``[-1, 1]``."""

    return Tilt(
        utils.clamp(gamma / constants.ORIENTATION_RANGE, -1.0, 1.0),
        utils.clamp(beta / constants.ORIENTATION_RANGE, -1.0, 1.0),
    )


def _axis(current: float, negative: bool, positive: bool) -> float:
    if negative:
        return -constants.KEY_TILT
    if positive:
        return constants.KEY_TILT
    return current * constants.TILT_DECAY


def next_tilt(previous: Tilt, held: Set[str], orientation: Optional[Tuple[float, float]] = None) -> Tilt:
    """Return the tilt for the coming frame.

    A fresh orientation reading replaces ``previous``; the key rule is then
    applied on top: a held direction snaps its axis to ``KEY_TILT`` and a
    released axis relaxes geometrically towards zero.
    """

    base = orientation_tilt(*orientation) if orientation is not None else previous
    return Tilt(
        _axis(base.x, LEFT in held, RIGHT in held),
        _axis(base.y, UP in held, DOWN in held),
    )


class InputAggregator:
    """Samples ``RawInput`` once per frame into immutable ``Tilt`` values."""

    def __init__(self, raw: Optional[RawInput] = None) -> None:
        self.raw = raw if raw is not None else RawInput()
        self.tilt = Tilt()

    def sample(self) -> Tilt:
        orientation, self.raw.orientation = self.raw.orientation, None
        self.tilt = next_tilt(self.tilt, set(self.raw.held), orientation)
        return self.tilt

    def reset(self) -> None:
        self.raw.clear()
        self.tilt = Tilt()
