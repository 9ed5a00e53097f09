"""The player's paddle."""

from __future__ import annotations

from dataclasses import dataclass, replace

from brickbreak.geometry import Rect

SPIN = 0.5


@dataclass
class Paddle:
    """The paddle; ``spin`` is the sideways kick it gives the ball."""

    rect: Rect
    spin: float = 0.0
    field_width: float = 800.0

    def move(self, speed: float, left: bool = False, right: bool = False) -> None:
        """Move by ``speed`` in the pressed directions, staying on the field."""
        x = self.rect.x
        if right:
            x += speed
            self.spin = SPIN
        if left:
            x -= speed
            self.spin = -SPIN
        if x < 0:
            x = 0
        if x + self.rect.width > self.field_width:
            x = self.field_width - self.rect.width
        self.rect = replace(self.rect, x=x)

    def set_width(self, width: float) -> None:
        """Change the paddle's width, keeping its left edge."""
        self.rect = replace(self.rect, width=width)