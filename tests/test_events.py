import pytest

from simulation.events import AnimationEvent, AnimationKind, advance_animations


@pytest.mark.parametrize(
    "kind, frames",
    [
        (AnimationKind.EAT, 20),
        (AnimationKind.OUCH, 25),
        (AnimationKind.SICK, 30),
        (AnimationKind.CELEBRATION, 60),
        (AnimationKind.REMEDY_CELEBRATION, 60),
    ],
)
def test_animation_lifetimes(kind: AnimationKind, frames: int) -> None:
    animations = [AnimationEvent.create(kind, 10.0, 20.0, "*")]
    alive_frames = 0
    while animations:
        alive_frames += 1
        animations = advance_animations(animations)
    assert alive_frames == frames


def test_timer_is_monotonic_and_progress_bounded() -> None:
    event = AnimationEvent.create(AnimationKind.EAT, 0.0, 0.0, "🍎")
    seen = []
    animations = [event]
    while animations:
        seen.append(event.timer)
        assert 0.0 <= event.progress <= 1.0
        animations = advance_animations(animations)
    assert seen == sorted(seen)
    assert event.expired
