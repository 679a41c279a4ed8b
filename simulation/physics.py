"""Head physics: tilt force, gravity, friction, speed limit and wall bounces."""

from __future__ import annotations

import math
from typing import List

from . import constants
from .entities import Segment
from .input import Tilt

WALL_LEFT = "left"
WALL_RIGHT = "right"
WALL_TOP = "top"
WALL_BOTTOM = "bottom"


def apply_forces(head: Segment, tilt: Tilt, speed_factor: float) -> None:
    """Accelerate ``head`` by the tilt and gravity, then apply friction."""

    head.vx += tilt.x * constants.TILT_FORCE * speed_factor
    head.vy += tilt.y * constants.TILT_FORCE * speed_factor
    head.vy += constants.GRAVITY * speed_factor
    head.vx *= constants.FRICTION
    head.vy *= constants.FRICTION


def limit_speed(head: Segment, max_speed: float) -> None:
    """Rescale the head velocity so its magnitude does not exceed ``max_speed``."""

    speed = math.hypot(head.vx, head.vy)
    if speed > max_speed and speed > 0:
        head.vx = head.vx / speed * max_speed
        head.vy = head.vy / speed * max_speed


def bounce_off_walls(head: Segment, width: float, height: float) -> List[str]:
    """Clamp the head inside the canvas and reflect it off any wall it crossed.

    Every edge is tested on its own, so a corner hit reports two walls.
    """

    walls: List[str] = []
    if head.x - head.radius < 0:
        head.x = head.radius
        head.vx *= -constants.BOUNCE
        walls.append(WALL_LEFT)
    if head.x + head.radius > width:
        head.x = width - head.radius
        head.vx *= -constants.BOUNCE
        walls.append(WALL_RIGHT)
    if head.y - head.radius < 0:
        head.y = head.radius
        head.vy *= -constants.BOUNCE
        walls.append(WALL_TOP)
    if head.y + head.radius > height:
        head.y = height - head.radius
        head.vy *= -constants.BOUNCE
        walls.append(WALL_BOTTOM)
    return walls


def integrate_head(head: Segment, tilt: Tilt, speed_factor: float, width: float, height: float) -> List[str]:
    """Advance the head by one frame.

    Returns the walls that were hit; each one costs the snake a segment.
    """

    apply_forces(head, tilt, speed_factor)
    limit_speed(head, constants.MAX_SPEED * speed_factor)
    head.x += head.vx
    head.y += head.vy
    return bounce_off_walls(head, width, height)
