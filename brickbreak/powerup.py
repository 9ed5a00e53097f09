"""Falling power-ups and the timed effects they grant."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

from brickbreak.ball import PlayerStatus
from brickbreak.geometry import Rect, check_collision_rects
from brickbreak.paddle import Paddle

POWERUP_SIZE = 20.0
FALL_SPEED = 100.0
EFFECT_DURATION = 12.0
DEFAULT_PADDLE_WIDTH = 100.0
SPAWN_MARGIN = 50

Color = tuple[int, int, int]

_COLORS: dict[int, Color] = {
    0: (0, 121, 241),
    1: (0, 228, 48),
    2: (230, 41, 55),
}


class PowerUpKind(IntEnum):
    """What a caught power-up does."""

    EXPAND_PADDLE = 0
    EXTRA_LIFE = 1
    PLATFORM_PROTECTOR = 2

    @property
    def color(self) -> Color:
        """The colour the power-up is drawn in."""
        return _COLORS[self.value]


@dataclass
class PowerUp:
    """A single power-up slot: it falls, may be caught, then runs its effect."""

    rect: Rect = Rect(0.0, 0.0, POWERUP_SIZE, POWERUP_SIZE)
    kind: PowerUpKind | None = None
    active: bool = False
    effect_active: bool = False
    active_time: float = 0.0
    fall_speed: float = FALL_SPEED

    def spawn(self, screen_width: float, rng: random.Random | None = None) -> None:
        """Drop a power-up of a random kind from a random spot on the top edge."""
        source = rng if rng is not None else random
        x = source.randint(SPAWN_MARGIN, int(screen_width) - SPAWN_MARGIN)
        self.rect = Rect(float(x), 0.0, self.rect.width, self.rect.height)
        self.kind = PowerUpKind(source.randint(0, len(PowerUpKind) - 1))
        self.active = True

    def update(
        self,
        dt: float,
        paddle: Paddle,
        status: PlayerStatus,
        screen_height: float,
    ) -> None:
        """Advance by ``dt`` seconds: fall, get caught, and expire effects."""
        width = paddle.rect.width

        if self.active:
            self.rect = self.rect.moved_to(y=self.rect.y + self.fall_speed * dt)
            if check_collision_rects(self.rect, paddle.rect):
                self.active = False
                self.effect_active = True
                if self.kind is PowerUpKind.EXPAND_PADDLE:
                    width *= 2.0
                elif self.kind is PowerUpKind.EXTRA_LIFE:
                    status.lives += 1
                elif self.kind is PowerUpKind.PLATFORM_PROTECTOR:
                    status.platform_protected = True
            if self.rect.y > screen_height:
                self.active = False

        if self.effect_active:
            self.active_time += dt
            if self.active_time >= EFFECT_DURATION:
                self.effect_active = False
                self.active_time = 0.0
                status.platform_protected = False
                if self.kind is PowerUpKind.EXPAND_PADDLE:
                    width = DEFAULT_PADDLE_WIDTH

        paddle.set_width(width)