"""The game session: owned state plus the per-frame step."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from . import chain, collision, constants, food, physics
from .entities import FoodItem, RemedyItem, Segment
from .events import AnimationEvent, AnimationKind
from .input import Tilt


class Session:
    """Holds all entities of one game and advances them frame by frame.

    Nothing outside :meth:`step` and the lifecycle methods mutates the state,
    so input handlers only ever touch the raw input buffer.
    """

    def __init__(
        self,
        width: float = constants.CANVAS_WIDTH,
        height: float = constants.CANVAS_HEIGHT,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 2 * constants.SPAWN_MARGIN or height <= 2 * constants.SPAWN_MARGIN:
            raise ValueError(
                f"Canvas {width}x{height} is too small for a {constants.SPAWN_MARGIN:.0f}px spawn margin"
            )
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Put the session back into its pre-game state."""

        self.score: int = 0
        self.level: int = 1
        self.snake: List[Segment] = [Segment(self.width / 2, self.height / 2)]
        self.food: List[FoodItem] = []
        self.remedies: List[RemedyItem] = []
        self.afflicted: bool = False
        self.speed_factor: float = constants.NORMAL_SPEED
        self.running: bool = False
        self.game_over: bool = False
        self.final_score: Optional[int] = None
        self.frame: int = 0
        self.spawn_food()

    def start(self) -> None:
        self.running = True
        logging.info("Game started")

    def restart(self) -> None:
        self.reset()
        self.start()

    @property
    def head(self) -> Segment:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def visible_food(self) -> List[FoodItem]:
        return [item for item in self.food if not item.collected]

    def visible_remedies(self) -> List[RemedyItem]:
        return [item for item in self.remedies if not item.collected]

    def spawn_food(self) -> None:
        new_food, new_remedies = food.spawn_pass(self.rng, self.width, self.height, self.afflicted)
        self.food.extend(new_food)
        self.remedies.extend(new_remedies)

    def advance_level(self, events: List[AnimationEvent]) -> None:
        self.level += 1
        events.append(
            AnimationEvent.create(AnimationKind.CELEBRATION, self.width / 2, self.height / 2, "🎉")
        )
        logging.info("Level up: %s (length %s)", self.level, self.length)
        self.spawn_food()

    def lose_segment(self, events: List[AnimationEvent]) -> None:
        """Drop the tail, or end the game when only the head is left."""

        if len(self.snake) > 1:
            self.snake.pop()
            head = self.head
            events.append(AnimationEvent.create(AnimationKind.OUCH, head.x, head.y, "😵"))
            logging.debug("Lost a segment, length now %s", self.length)
            return
        self.end_game()

    def end_game(self) -> None:
        self.running = False
        self.game_over = True
        self.final_score = self.score
        logging.info("Game over with score %s at level %s", self.score, self.level)

    def step(self, tilt: Tilt) -> List[AnimationEvent]:
        """Advance the simulation by one frame.

        ``tilt`` is sampled once by the caller and held for the whole frame.
        Returns the animation events produced during the frame.
        """

        if not self.running:
            return []
        self.frame += 1

        events: List[AnimationEvent] = []
        walls = physics.integrate_head(self.head, tilt, self.speed_factor, self.width, self.height)
        for _ in walls:
            self.lose_segment(events)
            if not self.running:
                return events

        chain.resolve_chain(self.snake)
        events.extend(collision.resolve_collisions(self))
        return events

    def snapshot(self) -> dict:
        """Return a read-only view of the state for the presentation layer."""

        return {
            "frame": self.frame,
            "score": self.score,
            "level": self.level,
            "length": self.length,
            "afflicted": self.afflicted,
            "speedFactor": self.speed_factor,
            "running": self.running,
            "gameOver": self.game_over,
            "finalScore": self.final_score,
            "snake": [segment.to_dict() for segment in self.snake],
            "food": [item.to_dict() for item in self.visible_food()],
            "remedies": [item.to_dict() for item in self.visible_remedies()],
        }
