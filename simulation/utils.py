"""Small geometry and randomness helpers used by the simulation."""

from __future__ import annotations

import math
import random
from typing import Tuple


def clamp(value: float, low: float, high: float) -> float:
    """Return ``value`` limited to the closed range ``[low, high]``."""

    return max(low, min(high, value))


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Return the Euclidean distance between two points."""

    return math.hypot(ax - bx, ay - by)


def circles_overlap(ax: float, ay: float, ar: float, bx: float, by: float, br: float) -> bool:
    """Return ``True`` if two circles strictly overlap.

    Circles that merely touch do not count as overlapping.
    """

    return distance(ax, ay, bx, by) < ar + br


def random_point_in_rect(
    rng: random.Random, width: float, height: float, margin: float
) -> Tuple[float, float]:
    """Return a uniformly random point inside the canvas inset by ``margin``."""

    x = margin + rng.random() * (width - 2 * margin)
    y = margin + rng.random() * (height - 2 * margin)
    return x, y
