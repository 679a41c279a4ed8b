"""Entity definitions for the snake, its food and remedies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants


class FoodKind(str, Enum):
    """Kinds of food that can lie on the board."""

    FRUIT_VEGETABLE = "fruit_vegetable"
    SICK = "sick"


@dataclass
class Segment:
    """One unit of the snake body.

    Only the head's velocity is driven by input; the followers share the
    shape but are moved by the chain resolver alone.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = constants.SNAKE_RADIUS

    def to_dict(self) -> dict[str, float]:
        """Serialise the segment to a plain dictionary."""

        return {"x": self.x, "y": self.y, "vx": self.vx, "vy": self.vy, "radius": self.radius}


@dataclass
class FoodItem:
    """A fruit, vegetable or sick item waiting to be eaten."""

    x: float
    y: float
    radius: float
    kind: FoodKind
    name: str
    emoji: str
    color: str
    points: int
    collected: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "type": self.kind.value,
            "name": self.name,
            "emoji": self.emoji,
            "color": self.color,
            "points": self.points,
        }


@dataclass
class RemedyItem:
    """A pill that cures the affliction caused by sick food."""

    x: float
    y: float
    radius: float = constants.REMEDY_RADIUS
    collected: bool = False
    emoji: str = "💊"
    color: str = "#ffffff"

    def to_dict(self) -> dict[str, object]:
        return {"x": self.x, "y": self.y, "radius": self.radius, "emoji": self.emoji}
