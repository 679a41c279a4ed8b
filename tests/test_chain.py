import math

import pytest

from simulation import constants
from simulation.chain import resolve_chain
from simulation.entities import Segment


def test_follower_is_pulled_to_exact_distance() -> None:
    snake = [Segment(100.0, 100.0), Segment(100.0, 180.0)]
    resolve_chain(snake)
    assert snake[1].x == pytest.approx(100.0)
    assert snake[1].y == pytest.approx(130.0)


def test_close_followers_are_left_alone() -> None:
    snake = [Segment(100.0, 100.0), Segment(110.0, 110.0)]
    resolve_chain(snake)
    assert (snake[1].x, snake[1].y) == (110.0, 110.0)


def test_corrections_propagate_within_the_frame() -> None:
    snake = [Segment(-30.0, 0.0), Segment(30.0, 0.0), Segment(60.0, 0.0)]
    resolve_chain(snake)
    assert snake[1].x == pytest.approx(0.0)
    assert snake[2].x == pytest.approx(30.0)


def test_every_link_within_segment_distance() -> None:
    snake = [Segment(float(i * 47 % 300), float(i * 83 % 200)) for i in range(12)]
    resolve_chain(snake)
    for prev, curr in zip(snake, snake[1:]):
        assert math.hypot(prev.x - curr.x, prev.y - curr.y) <= constants.SEGMENT_DISTANCE + 1e-9


def test_stacked_segments_stay_finite() -> None:
    snake = [Segment(50.0, 50.0), Segment(50.0, 50.0), Segment(50.0, 50.0)]
    resolve_chain(snake)
    assert all(math.isfinite(segment.x) and math.isfinite(segment.y) for segment in snake)
