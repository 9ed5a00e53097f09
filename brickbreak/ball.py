"""The ball, its velocity, and the player state it changes."""

from __future__ import annotations

from dataclasses import dataclass

from brickbreak.geometry import Rect, Vec2, check_collision_circle_rect

SERVE_DRIFT = 0.5
PROTECTOR_HEIGHT = 10


def _serve_speed(difficulty: int) -> float:
    if difficulty == 1:
        return -3.0
    if difficulty == 2:
        return -4.5
    return -6.0


@dataclass
class Velocity:
    """Ball speed in pixels per frame."""

    x: float
    y: float


@dataclass
class PlayerStatus:
    """Lives and flags shared between the ball, power-ups and the game."""

    lives: int = 3
    game_over: bool = False
    launched: bool = False
    platform_protected: bool = False


@dataclass
class Ball:
    """A round ball moving across the field."""

    position: Vec2
    radius: float = 7.0

    @classmethod
    def resting_on(cls, paddle_rect: Rect, radius: float = 7.0) -> Ball:
        """A ball sitting on the middle of the paddle's top edge."""
        return cls(Vec2(paddle_rect.x + paddle_rect.width / 2, paddle_rect.y - radius), radius)

    def update(
        self,
        velocity: Velocity,
        paddle_rect: Rect,
        status: PlayerStatus,
        spin: float,
        difficulty: int,
        screen_width: float,
        screen_height: float,
    ) -> None:
        """Advance one frame, bouncing off walls and the paddle."""
        x = self.position.x + velocity.x
        y = self.position.y + velocity.y

        if y > screen_height:
            status.launched = False
            status.lives -= 1
            if status.lives == 0:
                status.game_over = True
            else:
                x = paddle_rect.x + paddle_rect.width / 2
                y = paddle_rect.y - self.radius
                velocity.x = SERVE_DRIFT
                velocity.y = _serve_speed(difficulty)
        elif y - self.radius < 0:
            velocity.y = -velocity.y

        if x - self.radius < 0 or x + self.radius > screen_width:
            velocity.x = -velocity.x

        if check_collision_circle_rect(Vec2(x, y), self.radius, paddle_rect):
            y = paddle_rect.y - self.radius
            velocity.y = -velocity.y
            velocity.x += spin

        floor = screen_height - PROTECTOR_HEIGHT
        if status.platform_protected and y > floor:
            y = floor
            velocity.y = -velocity.y

        self.position = Vec2(x, y)