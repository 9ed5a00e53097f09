"""Plain 2D value types and the collision tests the game relies on."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Vec2:
    """A point or displacement in screen coordinates."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def moved_to(self, x: float | None = None, y: float | None = None) -> Rect:
        """Return a copy with the given corner coordinates replaced."""
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
        )


def check_collision_circle_rect(center: Vec2, radius: float, rect: Rect) -> bool:
    """Whether a circle touches or overlaps a rectangle."""
    half_w = rect.width / 2
    half_h = rect.height / 2
    rect_center = rect.center
    dx = abs(center.x - rect_center.x)
    dy = abs(center.y - rect_center.y)

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


def check_collision_rects(a: Rect, b: Rect) -> bool:
    """Whether two rectangles overlap; rectangles that only share an edge do not."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def check_collision_point_rect(point: Vec2, rect: Rect) -> bool:
    """Whether a point lies inside a rectangle (left/top edges inclusive)."""
    return rect.x <= point.x < rect.right and rect.y <= point.y < rect.bottom