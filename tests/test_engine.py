import math

import pytest

from breakout_neat.engine import Action, BreakoutEngine


def test_initial_state():
    engine = BreakoutEngine()
    assert engine.ball_x == 12.0
    assert engine.ball_y == 12.0
    assert engine.stick is True
    assert engine.blocks_remaining() == engine.blocks_w * engine.blocks_h
    assert engine.calculate_fitness() == 0.0


def test_get_state_is_normalised():
    engine = BreakoutEngine()
    assert engine.get_state() == pytest.approx([0.6, 0.6, 0.5])


def test_stuck_ball_follows_platform():
    engine = BreakoutEngine()
    engine.platform_x = 7.0
    engine.step(Action.STAY, 1 / 60)
    assert engine.ball_x == 7.0
    assert engine.ball_y == engine.scr_h - 0.5
    assert engine.frames_alive == 1


def test_start_releases_ball():
    engine = BreakoutEngine()
    engine.step(Action.START, 1 / 60)
    assert engine.stick is False
    assert engine.elapsed_time > 0.0


def test_left_at_edge_clamps_platform():
    engine = BreakoutEngine()
    engine.platform_x = 1.0
    engine.step(Action.LEFT, 1 / 60)
    assert engine.platform_x == engine.platform_width / 2.0


def test_right_at_edge_clamps_platform():
    engine = BreakoutEngine()
    engine.platform_x = engine.scr_w
    engine.step(Action.RIGHT, 1 / 60)
    assert engine.platform_x == engine.scr_w - engine.platform_width / 2.0


def test_right_moves_platform():
    engine = BreakoutEngine()
    start = engine.platform_x
    engine.step(Action.RIGHT, 1 / 60)
    assert engine.platform_x > start


def test_game_over_stops_stepping():
    engine = BreakoutEngine()
    engine.game_over = True
    engine.step(Action.RIGHT, 1 / 60)
    assert engine.frames_alive == 0
    assert engine.platform_x == 10.0


def test_ball_falls_through_bottom():
    engine = BreakoutEngine(stick=False, ball_x=15.0, ball_y=19.9, dx=0.0, dy=10.0)
    engine.platform_x = 2.5
    engine.step(Action.STAY, 0.1)
    assert engine.game_over is True
    assert engine.calculate_fitness() == 1.0


def test_left_wall_reflects():
    engine = BreakoutEngine(stick=False, ball_x=-0.1, ball_y=10.0, dx=-1.0, dy=0.0)
    engine.step(Action.STAY, 0.1)
    assert engine.ball_x == 0.0
    assert engine.dx == 1.0


def test_right_wall_reflects():
    engine = BreakoutEngine(stick=False, ball_x=19.95, ball_y=10.0, dx=1.0, dy=0.0)
    engine.step(Action.STAY, 0.1)
    assert engine.ball_x == engine.scr_w - engine.ball_rad
    assert engine.dx == -1.0


def test_bounce_from_platform_centre_goes_straight_up():
    engine = BreakoutEngine()
    engine.ball_x = engine.platform_x
    engine.bounce_ball()
    assert engine.dx == pytest.approx(0.0, abs=1e-9)
    assert engine.dy == pytest.approx(-engine.ball_speed)
    assert engine.ball_y == engine.scr_h - engine.platform_height - engine.ball_rad


@pytest.mark.parametrize("offset, sign", [(2.5, 1.0), (-2.5, -1.0)])
def test_bounce_from_platform_edges(offset, sign):
    engine = BreakoutEngine()
    engine.ball_x = engine.platform_x + offset
    engine.bounce_ball()
    assert math.copysign(1.0, engine.dx) == sign
    assert engine.dy < 0
    assert math.hypot(engine.dx, engine.dy) == pytest.approx(engine.ball_speed)


def test_block_hit_scores_and_removes_block():
    engine = BreakoutEngine(stick=False, ball_x=1.0, ball_y=3.3, dx=0.0, dy=-1.0)
    engine.step(Action.STAY, 0.001)
    assert engine.blocks[0][0] is False
    assert engine.score == 10
    assert engine.dy == 1.0
    assert engine.blocks_remaining() == 99


def test_block_destruction_raises_fitness():
    engine = BreakoutEngine(stick=False, ball_x=1.0, ball_y=3.3, dx=0.0, dy=-1.0)
    before = engine.calculate_fitness()
    engine.step(Action.STAY, 0.001)
    assert engine.calculate_fitness() - before == 1.0 + 50.0


def test_clearing_all_blocks_ends_game():
    engine = BreakoutEngine(stick=False, ball_y=15.0)
    engine.blocks = [[False] * engine.blocks_w for _ in range(engine.blocks_h)]
    engine.step(Action.STAY, 1 / 60)
    assert engine.game_over is True


def test_reset_restores_initial_state():
    engine = BreakoutEngine(stick=False, ball_x=1.0, ball_y=3.3, dx=0.0, dy=-1.0)
    engine.step(Action.STAY, 0.001)
    engine.reset()
    assert engine == BreakoutEngine()