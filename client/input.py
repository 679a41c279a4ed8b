"""Translate pygame events into the simulation's raw input buffer."""

from __future__ import annotations

from typing import Dict

import pygame

from simulation import constants
from simulation.input import DOWN, LEFT, RIGHT, UP, RawInput

KEY_MAP: Dict[int, str] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

START_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_SPACE, pygame.K_r)


class InputManager:
    """Writes key and stick state into a ``RawInput``.

    An analogue stick stands in for device orientation: full deflection maps
    to ``ORIENTATION_RANGE`` degrees, i.e. a tilt of one.
    """

    def __init__(self, raw: RawInput) -> None:
        self.raw = raw
        self._axes = [0.0, 0.0]

    def handle_event(self, event: pygame.event.Event, running: bool, game_over: bool) -> bool:
        """Record ``event`` and return ``True`` if it asks to (re)start the game."""

        if event.type == pygame.KEYDOWN:
            direction = KEY_MAP.get(event.key)
            if direction is not None:
                self.raw.press(direction)
            if not running:
                keys = RESTART_KEYS if game_over else START_KEYS
                return event.key in keys
        elif event.type == pygame.KEYUP:
            direction = KEY_MAP.get(event.key)
            if direction is not None:
                self.raw.release(direction)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            return not running
        elif event.type == pygame.JOYAXISMOTION and running and event.axis in (0, 1):
            self._axes[event.axis] = float(event.value)
            self.raw.set_orientation(
                self._axes[0] * constants.ORIENTATION_RANGE,
                self._axes[1] * constants.ORIENTATION_RANGE,
            )
        return False
