"""Bricks and how a ball strikes them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from brickbreak.geometry import Rect, Vec2, check_collision_circle_rect


class Hit(IntEnum):
    """Which way a ball struck a brick."""

    NONE = 0
    VERTICAL = 1  # from above or below: reverse the vertical speed
    SIDE = 2  # from a side: reverse both speeds


@dataclass
class Brick:
    """A brick in the wall; unbreakable bricks cannot be destroyed."""

    rect: Rect
    breakable: bool = True
    active: bool = True

    def check_collision(self, ball_pos: Vec2, radius: float) -> Hit:
        """Classify how a ball at ``ball_pos`` touches this brick."""
        if not self.active or not check_collision_circle_rect(ball_pos, radius, self.rect):
            return Hit.NONE
        top = int(self.rect.y)
        bottom = top + int(self.rect.height)
        if ball_pos.y > bottom or ball_pos.y < top:
            return Hit.VERTICAL
        return Hit.SIDE

    def destroy(self) -> None:
        """Remove the brick from play if it is breakable."""
        if self.breakable:
            self.active = False