import pytest

from simulation.input import DOWN, LEFT, RIGHT, UP, InputAggregator, RawInput, Tilt, next_tilt, orientation_tilt


def test_held_keys_snap_tilt() -> None:
    tilt = next_tilt(Tilt(), {LEFT, DOWN})
    assert tilt == Tilt(-0.8, 0.8)

    tilt = next_tilt(Tilt(), {RIGHT, UP})
    assert tilt == Tilt(0.8, -0.8)


def test_left_wins_over_right_and_up_over_down() -> None:
    assert next_tilt(Tilt(), {LEFT, RIGHT, UP, DOWN}) == Tilt(-0.8, -0.8)


def test_released_axis_relaxes_without_reaching_zero() -> None:
    tilt = Tilt(0.8, -0.8)
    for _ in range(50):
        tilt = next_tilt(tilt, set())
    assert tilt.x == pytest.approx(0.8 * 0.85**50)
    assert tilt.y == pytest.approx(-0.8 * 0.85**50)
    assert tilt.x > 0
    assert tilt.y < 0


@pytest.mark.parametrize(
    "gamma, beta, expected",
    [(15.0, -15.0, Tilt(0.5, -0.5)), (90.0, -45.0, Tilt(1.0, -1.0)), (0.0, 30.0, Tilt(0.0, 1.0))],
)
def test_orientation_is_scaled_and_clamped(gamma: float, beta: float, expected: Tilt) -> None:
    assert orientation_tilt(gamma, beta) == expected


def test_orientation_reading_is_consumed_once() -> None:
    aggregator = InputAggregator()
    aggregator.raw.set_orientation(30.0, -15.0)

    first = aggregator.sample()
    assert first.x == pytest.approx(0.85)
    assert first.y == pytest.approx(-0.5 * 0.85)
    assert aggregator.raw.orientation is None

    second = aggregator.sample()
    assert second.x == pytest.approx(0.85 * 0.85)


def test_held_key_overrides_orientation_on_its_axis() -> None:
    aggregator = InputAggregator()
    aggregator.raw.set_orientation(30.0, 30.0)
    aggregator.raw.press(LEFT)
    tilt = aggregator.sample()
    assert tilt.x == -0.8
    assert tilt.y == pytest.approx(0.85)


def test_release_and_active_arrows() -> None:
    raw = RawInput()
    raw.press(RIGHT)
    raw.press(UP)
    assert raw.active_arrows() == ["↑", "→"]
    raw.release(UP)
    raw.release(UP)
    assert raw.active_arrows() == ["→"]


def test_unknown_direction_is_rejected() -> None:
    with pytest.raises(ValueError):
        RawInput().press("sideways")


def test_reset_clears_tilt_and_keys() -> None:
    aggregator = InputAggregator()
    aggregator.raw.press(DOWN)
    aggregator.sample()
    aggregator.reset()
    assert aggregator.tilt == Tilt()
    assert not aggregator.raw.held
