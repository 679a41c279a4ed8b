import math
import random

import pytest

from simulation import constants
from simulation.entities import Segment
from simulation.input import Tilt
from simulation.physics import (
    WALL_BOTTOM,
    WALL_LEFT,
    WALL_RIGHT,
    WALL_TOP,
    apply_forces,
    integrate_head,
    limit_speed,
)


def test_gravity_and_friction_from_rest() -> None:
    head = Segment(400.0, 300.0)
    walls = integrate_head(head, Tilt(), 1.0, 800, 600)
    assert walls == []
    assert head.vx == 0.0
    assert head.vy == pytest.approx(0.05 * 0.95)
    assert head.y == pytest.approx(300.0 + 0.05 * 0.95)


def test_tilt_force_scales_with_speed_factor() -> None:
    normal = Segment(400.0, 300.0)
    slowed = Segment(400.0, 300.0)
    apply_forces(normal, Tilt(1.0, 0.0), 1.0)
    apply_forces(slowed, Tilt(1.0, 0.0), 0.5)
    assert normal.vx == pytest.approx(0.8 * 0.95)
    assert slowed.vx == pytest.approx(0.4 * 0.95)


def test_speed_limit_preserves_direction() -> None:
    head = Segment(0.0, 0.0, vx=6.0, vy=8.0)
    limit_speed(head, 4.0)
    assert math.hypot(head.vx, head.vy) == pytest.approx(4.0)
    assert head.vx / head.vy == pytest.approx(6.0 / 8.0)


def test_speed_limit_leaves_slow_and_still_heads_alone() -> None:
    head = Segment(0.0, 0.0, vx=1.0, vy=1.0)
    limit_speed(head, 4.0)
    assert (head.vx, head.vy) == (1.0, 1.0)

    still = Segment(0.0, 0.0)
    limit_speed(still, 4.0)
    assert (still.vx, still.vy) == (0.0, 0.0)


@pytest.mark.parametrize("speed_factor", [constants.NORMAL_SPEED, constants.AFFLICTED_SPEED])
def test_speed_never_exceeds_limit(speed_factor: float) -> None:
    rng = random.Random(7)
    head = Segment(400.0, 300.0)
    limit = constants.MAX_SPEED * speed_factor
    for _ in range(2000):
        tilt = Tilt(rng.uniform(-1, 1), rng.uniform(-1, 1))
        integrate_head(head, tilt, speed_factor, 800, 600)
        assert math.hypot(head.vx, head.vy) <= limit + 1e-9
        assert head.radius <= head.x <= 800 - head.radius
        assert head.radius <= head.y <= 600 - head.radius


def test_right_wall_bounce() -> None:
    head = Segment(784.0, 300.0, vx=3.9, vy=0.0)
    walls = integrate_head(head, Tilt(), 1.0, 800, 600)
    expected_vx = 3.9 * 0.95
    assert walls == [WALL_RIGHT]
    assert head.x == 800 - head.radius
    assert head.vx == pytest.approx(-0.8 * expected_vx)


def test_left_and_top_walls() -> None:
    head = Segment(16.0, 16.0, vx=-3.0, vy=-3.0)
    walls = integrate_head(head, Tilt(), 1.0, 800, 600)
    assert walls == [WALL_LEFT, WALL_TOP]
    assert (head.x, head.y) == (head.radius, head.radius)
    assert head.vx > 0
    assert head.vy > 0


def test_bottom_wall() -> None:
    head = Segment(400.0, 584.0, vx=0.0, vy=3.0)
    assert integrate_head(head, Tilt(), 1.0, 800, 600) == [WALL_BOTTOM]
    assert head.y == 600 - head.radius
    assert head.vy < 0
