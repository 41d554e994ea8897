"""Breakout for a human player."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from .engine import Action, BreakoutEngine
from .render import Camera, render_game

_WINDOW = (800, 800)
_FPS = 60


def action_from_keys(stick, keys) -> Action:
    """Choose an action from pressed keys; keys is indexed by pygame key codes."""
    if stick:
        return Action.START if keys[pygame.K_SPACE] else Action.STAY
    if keys[pygame.K_RIGHT]:
        return Action.RIGHT
    if keys[pygame.K_LEFT]:
        return Action.LEFT
    return Action.STAY


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until it is closed. R restarts after game over."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(_WINDOW)
        pygame.display.set_caption("Arkanoid")
        engine = BreakoutEngine()
        camera = Camera(engine.scr_w, engine.scr_h, *_WINDOW)
        clock = pygame.time.Clock()

        while True:
            delta = clock.tick(_FPS) / 1000.0
            restart = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    restart = True

            engine.step(action_from_keys(engine.stick, pygame.key.get_pressed()), delta)
            render_game(screen, engine, camera)

            if engine.game_over and restart:
                engine.reset()

            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())