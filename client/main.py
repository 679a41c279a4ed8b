"""Entry point for the pygame based game window."""

from __future__ import annotations

import argparse
import logging
import random
from typing import List

import pygame

from simulation import constants
from simulation.events import AnimationEvent, advance_animations
from simulation.input import InputAggregator
from simulation.session import Session

from .input import InputManager
from .render import Renderer


class GameApp:
    """Owns the window, the session and the frame loop."""

    def __init__(self, width: int, height: int, fps: int, seed: int | None = None) -> None:
        self.fps = fps
        self.session = Session(width, height, rng=random.Random(seed))
        self.aggregator = InputAggregator()
        self.input_manager = InputManager(self.aggregator.raw)
        self.animations: List[AnimationEvent] = []
        self.screen: pygame.Surface | None = None
        self.joysticks: list = []

    def handle_events(self) -> bool:
        """Process pending window events; return ``False`` when asked to quit."""

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.JOYDEVICEADDED:
                self.joysticks.append(pygame.joystick.Joystick(event.device_index))
                continue
            if self.input_manager.handle_event(event, self.session.running, self.session.game_over):
                self.start()
        return True

    def start(self) -> None:
        if self.session.game_over:
            self.session.restart()
            self.aggregator.reset()
            self.animations = []
        else:
            self.session.start()

    def update(self) -> None:
        if not self.session.running:
            return
        tilt = self.aggregator.sample()
        self.animations.extend(self.session.step(tilt))
        self.animations = advance_animations(self.animations)

    def run(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((int(self.session.width), int(self.session.height)))
        pygame.display.set_caption("Healthy Snake")
        renderer = Renderer(self.screen)
        clock = pygame.time.Clock()
        logging.info("Window opened at %sx%s, %s FPS", self.session.width, self.session.height, self.fps)

        running = True
        while running:
            clock.tick(self.fps)
            running = self.handle_events()
            self.update()
            renderer.draw(
                self.session,
                self.animations,
                self.aggregator.tilt,
                self.aggregator.raw.active_arrows(),
            )
            renderer.present()

        pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Healthy Snake")
    parser.add_argument("--width", type=int, default=constants.CANVAS_WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=constants.CANVAS_HEIGHT, help="Window height")
    parser.add_argument("--fps", type=int, default=constants.FPS, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="[%(levelname)s] %(message)s"
    )
    app = GameApp(args.width, args.height, args.fps, args.seed)
    app.run()


if __name__ == "__main__":
    main()
