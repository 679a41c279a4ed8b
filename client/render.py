"""Pygame based renderer for the game."""

from __future__ import annotations

from typing import Iterable, List, Tuple

import pygame

from simulation.entities import FoodItem, RemedyItem, Segment
from simulation.events import AnimationEvent, AnimationKind
from simulation.input import Tilt
from simulation.session import Session

Color = Tuple[int, int, int]

TEXT_FONTS = "arial"
EMOJI_FONTS = "notocoloremoji,segoeuiemoji,applecoloremoji,symbola,arial"

HEALTHY_HEAD: Color = (78, 205, 196)
HEALTHY_BODY: Color = (168, 230, 207)
SICK_HEAD: Color = (255, 107, 107)
SICK_BODY: Color = (255, 179, 179)
INK: Color = (44, 44, 84)

# Extra emojis drawn around each animation: (emoji, x offset, rise in px).
SPARKLES = {
    AnimationKind.EAT: [("✨", 15, 25), ("✨", -15, 25)],
    AnimationKind.SICK: [("💨", 20, 30)],
    AnimationKind.OUCH: [("💫", 10, 25), ("💫", -10, 25)],
    AnimationKind.CELEBRATION: [("🎊", 30, 35), ("🎊", -30, 35)],
    AnimationKind.REMEDY_CELEBRATION: [
        ("🎊", 40, 45),
        ("🎊", -40, 45),
        ("✨", 20, 55),
        ("✨", -20, 55),
        ("🎉", 0, 60),
    ],
}
RISE = {
    AnimationKind.EAT: 20,
    AnimationKind.SICK: 25,
    AnimationKind.OUCH: 20,
    AnimationKind.CELEBRATION: 40,
    AnimationKind.REMEDY_CELEBRATION: 50,
}


def hex_color(value: str) -> Color:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def vertical_gradient(size: Tuple[int, int], stops: List[Color]) -> pygame.Surface:
    """Build a surface filled with a top to bottom gradient through ``stops``."""

    width, height = size
    surface = pygame.Surface(size)
    bands = len(stops) - 1
    for y in range(height):
        position = y / max(1, height - 1) * bands
        band = min(int(position), bands - 1)
        t = position - band
        start, end = stops[band], stops[band + 1]
        color = tuple(int(a + (b - a) * t) for a, b in zip(start, end))
        pygame.draw.line(surface, color, (0, y), (width, y))
    return surface


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font = pygame.font.SysFont(TEXT_FONTS, 20)
        self.title_font = pygame.font.SysFont(TEXT_FONTS, 32, bold=True)
        self.emoji_fonts = {size: pygame.font.SysFont(EMOJI_FONTS, size) for size in (18, 20, 24, 28, 30, 37)}
        self.background = vertical_gradient(
            screen.get_size(), [hex_color("#667eea"), hex_color("#764ba2"), hex_color("#667eea")]
        )

    def _emoji(self, text: str, size: int, center: Tuple[float, float], alpha: int = 255) -> None:
        font = self.emoji_fonts.get(size) or self.emoji_fonts[20]
        surface = font.render(text, True, (255, 255, 255))
        surface.set_alpha(alpha)
        self.screen.blit(surface, surface.get_rect(center=(int(center[0]), int(center[1]))))

    def clear(self) -> None:
        self.screen.blit(self.background, (0, 0))

    def draw_food(self, items: Iterable[FoodItem]) -> None:
        for item in items:
            center = (int(item.x), int(item.y))
            pygame.draw.circle(self.screen, hex_color(item.color), center, int(item.radius))
            self._emoji(item.emoji, min(37, int(item.radius * 1.5)), center)
            pygame.draw.circle(
                self.screen, (255, 255, 255), (center[0] - 3, center[1] - 3), max(1, int(item.radius * 0.3)), width=2
            )

    def draw_remedies(self, items: Iterable[RemedyItem]) -> None:
        for item in items:
            rect = pygame.Rect(0, 0, int(item.radius * 2), int(item.radius * 2))
            rect.center = (int(item.x), int(item.y))
            pygame.draw.rect(self.screen, hex_color(item.color), rect)
            pygame.draw.rect(self.screen, (204, 204, 204), rect, width=2)
            self._emoji(item.emoji, 20, rect.center)

    def draw_snake(self, snake: List[Segment], afflicted: bool) -> None:
        head_color = SICK_HEAD if afflicted else HEALTHY_HEAD
        body_color = SICK_BODY if afflicted else HEALTHY_BODY
        # Tail first so the head ends up on top.
        for segment in reversed(snake[1:]):
            pygame.draw.circle(self.screen, body_color, (int(segment.x), int(segment.y)), int(segment.radius))
        if snake:
            self._draw_head(snake[0], head_color, afflicted)

    def _draw_head(self, head: Segment, color: Color, afflicted: bool) -> None:
        x, y = int(head.x), int(head.y)
        pygame.draw.circle(self.screen, color, (x, y), int(head.radius))
        pupil_y = y - 4 if afflicted else y - 6
        for dx in (-6, 6):
            pygame.draw.circle(self.screen, (255, 255, 255), (x + dx, y - 6), 5)
            pygame.draw.circle(self.screen, INK, (x + dx, pupil_y), 3)
        mouth = pygame.Rect(x - 8, y - 5, 16, 16)
        if afflicted:
            pygame.draw.arc(self.screen, INK, mouth.move(0, 8), 0.3, 2.84, 3)
        else:
            pygame.draw.arc(self.screen, INK, mouth, 3.44, 5.98, 3)

    def draw_animations(self, animations: Iterable[AnimationEvent]) -> None:
        for animation in animations:
            progress = animation.progress
            alpha = int(255 * (1 - progress))
            rise = RISE.get(animation.kind, 20)
            self._emoji(animation.emoji, 24, (animation.x, animation.y - progress * rise), alpha)
            for emoji, dx, extra_rise in SPARKLES.get(animation.kind, []):
                self._emoji(emoji, 18, (animation.x + dx, animation.y - progress * extra_rise), alpha)

    def draw_hud(self, session: Session, tilt: Tilt, active_keys: List[str]) -> None:
        health = "😵" if session.afflicted else "😊"
        lines = [
            f"Score: {session.score}",
            f"Length: {session.length}",
            f"Level: {session.level}",
            f"Keys: {' '.join(active_keys) if active_keys else 'None'}",
        ]
        y = 10
        for line in lines:
            self.screen.blit(self.font.render(line, True, (255, 255, 255)), (10, y))
            y += 24
        self._emoji(health, 28, (self.screen.get_width() - 30, 30))

        # Tilt indicator: a dot inside a 100px box, as on the phone version.
        box = pygame.Rect(self.screen.get_width() - 110, self.screen.get_height() - 110, 100, 100)
        pygame.draw.rect(self.screen, (255, 255, 255), box, width=2, border_radius=12)
        dot_x = max(5, min(85, 50 + tilt.x * 40))
        dot_y = max(5, min(85, 50 + tilt.y * 40))
        pygame.draw.circle(self.screen, (255, 71, 87), (box.x + int(dot_x) + 5, box.y + int(dot_y) + 5), 6)

    def draw_start_message(self) -> None:
        cx, cy = self.screen.get_width() // 2, self.screen.get_height() // 2
        title = self.title_font.render("Healthy Snake", True, INK)
        self.screen.blit(title, title.get_rect(center=(cx, cy - 30)))
        hint = self.font.render("Use Arrow Keys to Move - press Space to start", True, (64, 64, 122))
        self.screen.blit(hint, hint.get_rect(center=(cx, cy + 10)))

    def draw_game_over(self, final_score: int) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))
        cx, cy = self.screen.get_width() // 2, self.screen.get_height() // 2
        title = self.title_font.render("Game Over", True, (255, 80, 80))
        self.screen.blit(title, title.get_rect(center=(cx, cy - 30)))
        score = self.font.render(f"Final score: {final_score} - press Space or R to play again", True, (255, 255, 255))
        self.screen.blit(score, score.get_rect(center=(cx, cy + 10)))

    def draw(self, session: Session, animations: Iterable[AnimationEvent], tilt: Tilt, active_keys: List[str]) -> None:
        self.clear()
        self.draw_food(session.visible_food())
        self.draw_remedies(session.visible_remedies())
        self.draw_snake(session.snake, session.afflicted)
        self.draw_animations(animations)
        self.draw_hud(session, tilt, active_keys)
        if session.game_over and session.final_score is not None:
            self.draw_game_over(session.final_score)
        elif not session.running and session.length == 1:
            self.draw_start_message()

    def present(self) -> None:
        pygame.display.flip()
