"""Collision detection between the head and everything it can touch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from . import constants, utils
from .entities import FoodItem, FoodKind, RemedyItem, Segment
from .events import AnimationEvent, AnimationKind

if TYPE_CHECKING:
    from .session import Session


def touches(head: Segment, x: float, y: float, radius: float) -> bool:
    return utils.circles_overlap(head.x, head.y, head.radius, x, y, radius)


def collect_food(session: "Session", food: FoodItem, events: List[AnimationEvent]) -> None:
    """Eat a fruit or vegetable: score it, grow by one segment, maybe level up."""

    food.collected = True
    session.score += food.points
    events.append(AnimationEvent.create(AnimationKind.EAT, food.x, food.y, food.emoji))

    tail = session.snake[-1]
    session.snake.append(
        Segment(tail.x, tail.y, radius=constants.SNAKE_RADIUS * constants.TAIL_RADIUS_FACTOR)
    )

    if len(session.snake) % constants.SEGMENTS_PER_LEVEL == 0:
        session.advance_level(events)

    remaining = sum(1 for item in session.food if not item.collected)
    if remaining < constants.MIN_FOOD_ON_BOARD:
        session.spawn_food()


def collect_sick(session: "Session", food: FoodItem, events: List[AnimationEvent]) -> None:
    """Eat a sick item: the snake slows down until it finds a remedy."""

    food.collected = True
    session.afflicted = True
    session.speed_factor = constants.AFFLICTED_SPEED
    events.append(AnimationEvent.create(AnimationKind.SICK, food.x, food.y, food.emoji))
    logging.debug("Snake got sick at (%.0f, %.0f)", food.x, food.y)
    session.spawn_food()


def collect_remedy(session: "Session", remedy: RemedyItem, events: List[AnimationEvent]) -> None:
    remedy.collected = True
    session.score += constants.REMEDY_POINTS
    session.afflicted = False
    session.speed_factor = constants.NORMAL_SPEED
    events.append(AnimationEvent.create(AnimationKind.REMEDY_CELEBRATION, remedy.x, remedy.y, "🎉"))
    logging.debug("Snake cured, score %s", session.score)


def detect_self_collision(snake: List[Segment]) -> int:
    """Return the index of the first body segment the head overlaps, or ``-1``.

    The segments right behind the head are skipped; they overlap it on any
    tight curve.
    """

    head = snake[0]
    for index in range(constants.SELF_COLLISION_SKIP, len(snake)):
        segment = snake[index]
        if touches(head, segment.x, segment.y, segment.radius):
            return index
    return -1


def resolve_collisions(session: "Session") -> List[AnimationEvent]:
    """Apply every collision of the head for this frame and return the events."""

    events: List[AnimationEvent] = []
    head = session.head

    for food in list(session.food):
        if food.collected or not touches(head, food.x, food.y, food.radius):
            continue
        if food.kind is FoodKind.SICK:
            collect_sick(session, food, events)
        else:
            collect_food(session, food, events)

    for remedy in list(session.remedies):
        if remedy.collected or not touches(head, remedy.x, remedy.y, remedy.radius):
            continue
        collect_remedy(session, remedy, events)

    session.food = [food for food in session.food if not food.collected]
    session.remedies = [remedy for remedy in session.remedies if not remedy.collected]

    if detect_self_collision(session.snake) >= 0:
        session.lose_segment(events)
    return events
