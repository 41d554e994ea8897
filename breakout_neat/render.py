"""Drawing a Breakout game onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import pygame

from .engine import BreakoutEngine

SKY_BLUE = (102, 191, 255)
DARK_BLUE = (0, 82, 172)
RED = (230, 41, 55)
DARK_PURPLE = (112, 31, 126)
DARK_GRAY = (80, 80, 80)
WHITE = (255, 255, 255)
YELLOW = (253, 249, 0)
BLACK = (0, 0, 0)


@dataclass(frozen=True)
class Camera:
    """Maps world coordinates (origin top left, y down) onto screen pixels."""

    world_w: float
    world_h: float
    screen_w: int
    screen_h: int

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        return (
            round(x * self.screen_w / self.world_w),
            round(y * self.screen_h / self.world_h),
        )

    def scale(self, length: float) -> float:
        """Convert a horizontal world length into pixels."""
        return length * self.screen_w / self.world_w


@lru_cache(maxsize=None)
def _font(pixels: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, pixels)


def _draw_text(
    surface: pygame.Surface,
    camera: Camera,
    text: str,
    x: float,
    y: float,
    color: tuple[int, int, int] = BLACK,
    size: float = 1.0,
) -> None:
    """Draw text whose baseline starts at world point (x, y)."""
    font = _font(max(1, round(camera.scale(size))))
    image = font.render(text, True, color)
    left, baseline = camera.to_screen(x, y)
    surface.blit(image, (left, baseline - font.get_ascent()))


def _fill_rect(
    surface: pygame.Surface,
    camera: Camera,
    x: float,
    y: float,
    w: float,
    h: float,
    color: tuple[int, int, int],
) -> None:
    left, top = camera.to_screen(x, y)
    right, bottom = camera.to_screen(x + w, y + h)
    pygame.draw.rect(surface, color, pygame.Rect(left, top, right - left, bottom - top))


def render_game(surface: pygame.Surface, engine: BreakoutEngine, camera: Camera) -> None:
    """Draw the whole game state: wall, texts, ball and platform."""
    surface.fill(SKY_BLUE)

    for j, row in enumerate(engine.blocks):
        for i, present in enumerate(row):
            if present:
                x, y, w, h = engine.block_rect(j, i)
                _fill_rect(surface, camera, x, y, w - 0.1, h - 0.1, DARK_BLUE)

    _draw_text(surface, camera, f"Score: {engine.score}", 0.5, 1.0)
    _draw_text(surface, camera, f"Elapsed time: {engine.elapsed_time:.1f}", 4.5, 1.0)

    if engine.stick:
        _draw_text(surface, camera, "Press space to start", engine.scr_w / 2.0 - 3.5, 2.0)

    radius = max(1, round(camera.scale(0.2)))
    pygame.draw.circle(surface, RED, camera.to_screen(engine.ball_x, engine.ball_y), radius)

    _fill_rect(
        surface,
        camera,
        engine.platform_x - engine.platform_width / 2.0,
        engine.scr_h - engine.platform_height,
        engine.platform_width,
        engine.platform_height,
        DARK_PURPLE,
    )

    if engine.game_over:
        _draw_text(
            surface, camera, "Game Over!", engine.scr_w / 2.0 - 2.0, engine.scr_h / 2.0
        )