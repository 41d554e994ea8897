"""Watch a trained genome play Breakout."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .engine import BreakoutEngine
from .nn import FeedForwardNetwork
from .render import DARK_GRAY, RED, WHITE, YELLOW, Camera, _draw_text, render_game
from .serialization import load_genome
from .training import choose_action

CHAMPION_FILE = "best_of_the_best.pb"
LATEST_FILE = "best_genome.pb"

_WINDOW = (800, 800)
_FPS = 60


def genome_path(argv: Sequence[str]) -> str:
    """Return the genome file to load: the champion with --champion, else the latest."""
    return CHAMPION_FILE if "--champion" in argv else LATEST_FILE


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = genome_path(args)
    try:
        genome = load_genome(path)
    except (OSError, ValueError) as exc:
        print(f"Failed to load genome: {exc}", file=sys.stderr)
        print("Please run training first: breakout-train", file=sys.stderr)
        return 1

    if path == CHAMPION_FILE:
        print("Successfully loaded **CHAMPION** genome!")
    else:
        print("Successfully loaded best last trained genome!")

    pygame.init()
    try:
        screen = pygame.display.set_mode(_WINDOW)
        pygame.display.set_caption("Arkanoid - AI Playing")
        engine = BreakoutEngine()
        network = FeedForwardNetwork.from_genome(genome)
        camera = Camera(engine.scr_w, engine.scr_h, *_WINDOW)
        clock = pygame.time.Clock()
        engine.stick = False

        while True:
            delta = clock.tick(_FPS) / 1000.0
            restart = False
            speed_change = 0.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    restart = True
                elif event.type == pygame.KEYUP and event.key == pygame.K_UP:
                    speed_change = 0.1
                elif event.type == pygame.KEYUP and event.key == pygame.K_DOWN:
                    speed_change = -0.1

            if not engine.game_over:
                render_game(screen, engine, camera)
                state = engine.get_state()
                outputs = network.activate(state)
                engine.global_speed += speed_change
                action = choose_action(outputs)

                lines = (
                    f"Ball: ({state[0] * engine.scr_w:.1f}, {state[1] * engine.scr_h:.1f})",
                    f"NN Out: L:{outputs[0]:.2f} S:{outputs[1]:.2f} R:{outputs[2]:.2f}",
                    f"Action: {action.name.capitalize()}",
                    f"global speed: {engine.global_speed:.1f}",
                )
                for row, text in enumerate(lines):
                    _draw_text(screen, camera, text, 0.5, 13.0 + row, DARK_GRAY)

                engine.step(action, delta)

            _draw_text(screen, camera, "AI PLAYING", 15.0, 1.0, DARK_GRAY)

            if engine.game_over:
                x = engine.scr_w / 2.0 - 4.0
                y = engine.scr_h / 2.0
                _draw_text(screen, camera, "GAME OVER", x, y, RED, size=1.5)
                _draw_text(screen, camera, "Press R to restart", x, y + 1.5, WHITE)
                _draw_text(screen, camera, f"Final Score: {engine.score}", x, y + 2.5, WHITE)
                _draw_text(
                    screen,
                    camera,
                    f"Fitness: {engine.calculate_fitness():.0f}",
                    x,
                    y + 3.5,
                    YELLOW,
                )

            if engine.game_over and restart:
                engine.reset()
                network = FeedForwardNetwork.from_genome(genome)
                engine.stick = False

            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())