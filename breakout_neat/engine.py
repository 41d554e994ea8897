"""Breakout game engine shared by human play, AI play and training."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import Enum, auto

BLOCKS_W = 10
BLOCKS_H = 10
SCREEN_W = 20.0
SCREEN_H = 20.0


class Action(Enum):
    LEFT = auto()
    RIGHT = auto()
    STAY = auto()
    START = auto()


def _full_wall() -> list[list[bool]]:
    return [[True] * BLOCKS_W for _ in range(BLOCKS_H)]


@dataclass
class BreakoutEngine:
    """State and rules of one Breakout game in world units."""

    blocks: list[list[bool]] = field(default_factory=_full_wall)
    ball_x: float = 12.0
    ball_y: float = 12.0
    ball_rad: float = 0.15
    ball_speed: float = 10.0
    ball_min_shoot_angle: float = 30.0
    dx: float = 6.5
    dy: float = -6.5
    platform_x: float = 10.0
    stick: bool = True
    score: int = 0
    elapsed_time: float = 0.0

    blocks_w: int = BLOCKS_W
    blocks_h: int = BLOCKS_H
    scr_w: float = SCREEN_W
    scr_h: float = SCREEN_H
    platform_width: float = 5.0
    platform_height: float = 0.2
    player_speed: float = 8.0
    global_speed: float = 1.0

    game_over: bool = False
    frames_alive: int = 0

    def reset(self) -> None:
        """Return the game to its initial state."""
        fresh = type(self)()
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))

    def blocks_remaining(self) -> int:
        return sum(row.count(True) for row in self.blocks)

    def block_rect(self, row: int, col: int) -> tuple[float, float, float, float]:
        """Return (x, y, width, height) of the block cell at row, col."""
        block_w = self.scr_w / self.blocks_w
        block_h = 7.0 / self.blocks_h
        return col * block_w + 0.05, row * block_h + 0.05 + 3.0, block_w, block_h

    def get_state(self) -> list[float]:
        """Normalised network inputs: ball x, ball y and platform x."""
        return [
            self.ball_x / self.scr_w,
            self.ball_y / self.scr_h,
            self.platform_x / self.scr_w,
        ]

    def bounce_ball(self) -> None:
        """Send the ball off the platform at an angle set by where it hit."""
        left_edge = self.platform_x - self.platform_width / 2.0
        scale = (self.platform_width - (self.ball_x - left_edge)) / self.platform_width
        min_angle = self.ball_min_shoot_angle
        angle_deg = scale * 180.0 * (180.0 - 2.0 * min_angle) / 180.0 + min_angle
        angle_rad = math.pi * angle_deg / 180.0

        self.dx = self.ball_speed * math.cos(angle_rad)
        self.dy = -self.ball_speed * math.sin(angle_rad)
        self.resolve_collision()

    def resolve_collision(self) -> None:
        self.ball_y = self.scr_h - self.platform_height - self.ball_rad

    def step(self, action: Action, delta: float) -> None:
        """Advance the game by one frame of length delta."""
        if self.game_over:
            return

        self.frames_alive += 1
        half_platform = self.platform_width / 2.0
        move = self.player_speed * delta * self.global_speed

        if action is Action.LEFT:
            if self.platform_x > half_platform:
                self.platform_x -= move
            else:
                self.platform_x = half_platform
        elif action is Action.RIGHT:
            if self.platform_x < self.scr_w - half_platform:
                self.platform_x += move
            else:
                self.platform_x = self.scr_w - half_platform
        elif action is Action.START:
            self.stick = False

        if not self.stick:
            self.ball_x += self.dx * delta * self.global_speed
            self.ball_y += self.dy * delta * self.global_speed
            self.elapsed_time += delta * self.global_speed
        else:
            self.ball_x = self.platform_x
            self.ball_y = self.scr_h - 0.5

        if self.ball_x <= 0.0:
            self.dx = -self.dx
            self.ball_x = 0.0
        elif self.ball_x + self.ball_rad > self.scr_w:
            self.dx = -self.dx
            self.ball_x = self.scr_w - self.ball_rad

        if (
            self.ball_y > self.scr_h - self.platform_height - self.ball_rad / 2.0
            and self.platform_x - half_platform <= self.ball_x <= self.platform_x + half_platform
        ):
            self.bounce_ball()

        if self.ball_y <= 0.0:
            self.dy = -self.dy

        if self.ball_y >= self.scr_h:
            self.game_over = True
            return

        for j, row in enumerate(self.blocks):
            for i, present in enumerate(row):
                if not present:
                    continue
                x, y, w, h = self.block_rect(j, i)
                if x <= self.ball_x < x + w and y <= self.ball_y < y + h:
                    self.dy = -self.dy
                    row[i] = False
                    self.score += 10

        if self.blocks_remaining() == 0:
            self.game_over = True

    def calculate_fitness(self) -> float:
        """Frames survived plus a bonus of 50 per destroyed block."""
        destroyed = self.blocks_w * self.blocks_h - self.blocks_remaining()
        return float(self.frames_alive) + destroyed * 50.0