"""Keep every body segment within reach of the one in front of it."""

from __future__ import annotations

from typing import Sequence

from . import constants, utils
from .entities import Segment


def resolve_chain(segments: Sequence[Segment], segment_distance: float = constants.SEGMENT_DISTANCE) -> None:
    """Pull each follower towards its predecessor, head to tail.

    A segment further than ``segment_distance`` from its predecessor is moved
    along the connecting line by exactly the excess. The walk is sequential,
    so every correction sees the predecessor's position from this frame.
    """

    for index in range(1, len(segments)):
        prev = segments[index - 1]
        curr = segments[index]
        dist = utils.distance(prev.x, prev.y, curr.x, curr.y)
        if dist <= segment_distance or dist == 0:
            continue
        excess = dist - segment_distance
        curr.x += (prev.x - curr.x) / dist * excess
        curr.y += (prev.y - curr.y) / dist * excess
