"""Game state and the per-frame rules that tie the pieces together."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

from brickbreak.ball import Ball, PlayerStatus, Velocity
from brickbreak.brick import Hit
from brickbreak.geometry import Rect
from brickbreak.level import all_breakable_destroyed, build_bricks, level_layout
from brickbreak.paddle import Paddle
from brickbreak.powerup import PowerUp

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PADDLE_SPEED = 5.0
PADDLE_WIDTH = 100.0
PADDLE_HEIGHT = 10.0
PADDLE_Y = 580.0
SPAWN_INTERVAL = 30.0
BRICK_POINTS = 10
START_LIVES = 3

_BALL_SPEEDS = {1: 3.0, 2: 4.5, 3: 6.0}


class Difficulty(IntEnum):
    """Difficulty chosen at start; it also selects the starting level."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def ball_speed(self) -> float:
        """Ball speed per frame along each axis when served."""
        return _BALL_SPEEDS[self.value]


@dataclass(frozen=True)
class Controls:
    """Player input for one frame: held arrows and pressed keys."""

    left: bool = False
    right: bool = False
    launch: bool = False
    pause: bool = False
    restart: bool = False


class Game:
    """A running game: paddle, ball, bricks, power-up, score and lives."""

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        high_score: int = 0,
        rng: random.Random | None = None,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
    ) -> None:
        self.difficulty = Difficulty(difficulty)
        self.high_score = high_score
        self.rng = rng if rng is not None else random.Random()
        self.screen_width = screen_width
        self.screen_height = screen_height

        self.level = int(self.difficulty)
        speed = self.difficulty.ball_speed
        self.velocity = Velocity(speed, -speed)
        self.paddle = Paddle(
            Rect(screen_width / 2 - PADDLE_WIDTH / 2, PADDLE_Y, PADDLE_WIDTH, PADDLE_HEIGHT),
            field_width=screen_width,
        )
        self.ball = Ball.resting_on(self.paddle.rect)
        self.status = PlayerStatus(lives=START_LIVES)
        self.powerup = PowerUp()
        self.spawn_timer = 0.0
        self.score = 0
        self.paused = False
        self.bricks = build_bricks(level_layout(self.level, self.rng))

    def toggle_pause(self) -> None:
        """Pause a running game or resume a paused one."""
        self.paused = not self.paused

    def restart(self) -> None:
        """Start the current level again with full lives and no score."""
        self.status.lives = START_LIVES
        self.score = 0
        self.status.game_over = False
        self.ball = Ball.resting_on(self.paddle.rect)
        self.status.launched = False
        speed = self.difficulty.ball_speed
        self.velocity = Velocity(speed, -speed)
        self.bricks = build_bricks(level_layout(self.level, self.rng))

    def update(self, dt: float, controls: Controls) -> None:
        """Advance the game by one frame lasting ``dt`` seconds."""
        if controls.pause:
            self.toggle_pause()

        if self.status.game_over or self.paused:
            if controls.restart:
                self.restart()
            return

        self.paddle.move(PADDLE_SPEED, left=controls.left, right=controls.right)

        if not self.status.launched:
            self.ball = Ball.resting_on(self.paddle.rect, self.ball.radius)
        if controls.launch:
            self.status.launched = True
        if self.status.launched:
            self.ball.update(
                self.velocity,
                self.paddle.rect,
                self.status,
                self.paddle.spin,
                int(self.difficulty),
                self.screen_width,
                self.screen_height,
            )

        self.powerup.update(dt, self.paddle, self.status, self.screen_height)
        self.spawn_timer += dt
        if self.spawn_timer >= SPAWN_INTERVAL:
            self.spawn_timer = 0.0
            if not self.powerup.active:
                self.powerup.spawn(self.screen_width, self.rng)

        self._strike_bricks()

        if all_breakable_destroyed(self.bricks):
            self.level += 1
            self.bricks = build_bricks(level_layout(self.level, self.rng))
            self.status.launched = False

    def _strike_bricks(self) -> None:
        for brick in self.bricks:
            hit = brick.check_collision(self.ball.position, self.ball.radius)
            if hit is Hit.NONE:
                continue
            if brick.breakable:
                brick.destroy()
                self.bricks.remove(brick)
                self.score += BRICK_POINTS
            self.velocity.y = -self.velocity.y
            if hit is Hit.SIDE:
                self.velocity.x = -self.velocity.x
            break