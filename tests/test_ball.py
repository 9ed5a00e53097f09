import pytest

from brickbreak.ball import Ball, PlayerStatus, Velocity
from brickbreak.geometry import Rect, Vec2

WIDTH = 800
HEIGHT = 600
PADDLE = Rect(0, 580, 100, 10)


def step(ball, velocity, status, spin=0.0, difficulty=1, paddle=PADDLE):
    ball.update(velocity, paddle, status, spin, difficulty, WIDTH, HEIGHT)


def test_free_ball_moves_by_velocity():
    ball = Ball(Vec2(400, 300))
    velocity = Velocity(3, -3)
    step(ball, velocity, PlayerStatus(launched=True))
    assert ball.position == Vec2(403, 297)
    assert (velocity.x, velocity.y) == (3, -3)


def test_bounces_off_top():
    ball = Ball(Vec2(400, 8))
    velocity = Velocity(0, -3)
    step(ball, velocity, PlayerStatus())
    assert velocity.y == 3


@pytest.mark.parametrize("start_x, vx", [(8, -3), (792, 3)])
def test_bounces_off_side_walls(start_x, vx):
    ball = Ball(Vec2(start_x, 300))
    velocity = Velocity(vx, 1)
    step(ball, velocity, PlayerStatus())
    assert velocity.x == -vx


def test_resting_on_centres_ball_above_paddle():
    ball = Ball.resting_on(PADDLE)
    assert ball.position.x == PADDLE.center.x
    assert ball.position.y == PADDLE.y - ball.radius


def test_losing_a_life_resets_ball_onto_paddle():
    ball = Ball(Vec2(400, 598))
    velocity = Velocity(1, 5)
    status = PlayerStatus(lives=3, launched=True)
    step(ball, velocity, status, difficulty=1)
    assert status.lives == 2
    assert status.launched is False
    assert status.game_over is False
    assert ball.position.y < PADDLE.y
    assert ball.position.x == PADDLE.center.x
    assert velocity.x == 0.5
    assert velocity.y == -3.0


def test_serve_speed_grows_with_difficulty():
    speeds = []
    for difficulty in (1, 2, 3):
        ball = Ball(Vec2(400, 598))
        velocity = Velocity(1, 5)
        step(ball, velocity, PlayerStatus(lives=3, launched=True), difficulty=difficulty)
        speeds.append(velocity.y)
    assert all(s < 0 for s in speeds)
    assert speeds == sorted(speeds, reverse=True)
    assert len(set(speeds)) == 3


def test_losing_last_life_ends_game():
    ball = Ball(Vec2(400, 598))
    status = PlayerStatus(lives=1, launched=True)
    step(ball, Velocity(1, 5), status)
    assert status.lives == 0
    assert status.game_over is True
    assert status.launched is False


def test_paddle_hit_places_ball_on_top_and_adds_spin():
    ball = Ball(Vec2(50, 570))
    velocity = Velocity(2, 4)
    step(ball, velocity, PlayerStatus(launched=True), spin=0.5)
    assert ball.position.y == PADDLE.y - ball.radius
    assert velocity.y == -4
    assert velocity.x == 2.5


def test_protector_bounces_ball_off_floor():
    ball = Ball(Vec2(400, 592))
    velocity = Velocity(0, 3)
    step(ball, velocity, PlayerStatus(platform_protected=True, launched=True))
    assert ball.position.y < 595
    assert velocity.y == -3


def test_without_protector_ball_keeps_falling():
    ball = Ball(Vec2(400, 592))
    velocity = Velocity(0, 3)
    status = PlayerStatus(launched=True)
    step(ball, velocity, status)
    assert ball.position.y == 595
    assert velocity.y == 3
    assert status.lives == 3