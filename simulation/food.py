"""Food catalog and the spawn pass that restocks the board."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import List, Tuple

from . import constants, utils
from .entities import FoodItem, FoodKind, RemedyItem


@dataclass(frozen=True)
class FoodSpec:
    """A catalog entry describing one kind of fruit or vegetable."""

    name: str
    emoji: str
    color: str
    points: int


FRUITS: Tuple[FoodSpec, ...] = (
    FoodSpec("apple", "🍎", "#ff4757", 15),
    FoodSpec("banana", "🍌", "#ffa502", 12),
    FoodSpec("orange", "🍊", "#ff6348", 15),
    FoodSpec("strawberry", "🍓", "#ff3838", 18),
)

VEGETABLES: Tuple[FoodSpec, ...] = (
    FoodSpec("carrot", "🥕", "#ffa502", 20),
    FoodSpec("broccoli", "🥦", "#2ed573", 25),
    FoodSpec("tomato", "🍅", "#ff4757", 15),
)

SICK = FoodSpec("sick", "🤢", "#ff6b6b", 0)


def pick_spec(rng: random.Random) -> FoodSpec:
    """Draw a catalog entry, favouring fruit over vegetables."""

    catalog = FRUITS if rng.random() < constants.FRUIT_BIAS else VEGETABLES
    return rng.choice(catalog)


def make_food(spec: FoodSpec, position: Tuple[float, float]) -> FoodItem:
    kind = FoodKind.SICK if spec is SICK else FoodKind.FRUIT_VEGETABLE
    radius = constants.SICK_RADIUS if kind is FoodKind.SICK else constants.FOOD_RADIUS
    return FoodItem(
        x=position[0],
        y=position[1],
        radius=radius,
        kind=kind,
        name=spec.name,
        emoji=spec.emoji,
        color=spec.color,
        points=spec.points,
    )


def spawn_pass(
    rng: random.Random, width: float, height: float, afflicted: bool
) -> Tuple[List[FoodItem], List[RemedyItem]]:
    """Return the food and remedies produced by one restocking pass.

    One or two fruit/vegetable items are always added, a sick item is added
    occasionally and a single remedy is added whenever the snake is afflicted.
    Everything lands inside the canvas inset by ``SPAWN_MARGIN``.
    """

    def position() -> Tuple[float, float]:
        return utils.random_point_in_rect(rng, width, height, constants.SPAWN_MARGIN)

    food: List[FoodItem] = []
    count = 1 if rng.random() < constants.DOUBLE_SPAWN_CHANCE else 2
    for _ in range(count):
        spec = pick_spec(rng)
        food.append(make_food(spec, position()))

    if rng.random() < constants.SICK_CHANCE:
        food.append(make_food(SICK, position()))

    remedies: List[RemedyItem] = []
    if afflicted:
        x, y = position()
        remedies.append(RemedyItem(x=x, y=y))
    return food, remedies
