"""Level layouts and the bricks built from them."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from brickbreak.brick import Brick
from brickbreak.geometry import Rect

ROWS = 6
COLS = 10

EMPTY = 0
BREAKABLE = 1
SOLID = 2

BRICK_WIDTH = 70.0
BRICK_HEIGHT = 20.0
BRICK_GAP = 5.0
START_X = 50.0
START_Y = 50.0

Layout = tuple[tuple[int, ...], ...]

_LAYOUTS: dict[int, Layout] = {
    1: (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 1, 1, 0, 1, 1, 0, 1, 0),
        (1, 0, 1, 1, 0, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 1, 0, 0, 1),
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (2, 2, 2, 2, 2, 2, 2, 2, 2, 2),
    ),
    2: (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 1, 0, 1, 0, 1, 0, 1, 0),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (0, 1, 0, 0, 0, 1, 0, 0, 0, 1),
        (1, 1, 0, 1, 1, 1, 0, 1, 1, 1),
        (1, 0, 1, 0, 1, 0, 0, 0, 1, 0),
    ),
    3: (
        (2, 2, 2, 2, 2, 2, 2, 2, 2, 2),
        (2, 1, 1, 1, 1, 1, 1, 1, 1, 2),
        (2, 1, 0, 0, 0, 0, 0, 0, 1, 2),
        (2, 1, 0, 2, 2, 2, 2, 0, 1, 2),
        (2, 1, 1, 1, 1, 1, 1, 1, 1, 2),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
}


def level_layout(level: int, rng: random.Random | None = None) -> Layout:
    """The brick grid for ``level``: fixed for 1-3, random beyond, empty below."""
    if level in _LAYOUTS:
        return _LAYOUTS[level]
    if level > len(_LAYOUTS):
        rng = rng or random.Random()
        return tuple(
            tuple(rng.randint(EMPTY, SOLID) for _ in range(COLS)) for _ in range(ROWS)
        )
    return tuple((EMPTY,) * COLS for _ in range(ROWS))


def build_bricks(matrix: Sequence[Sequence[int]]) -> list[Brick]:
    """Create a brick for every non-empty cell of the grid."""
    return [
        Brick(
            Rect(
                START_X + col * BRICK_WIDTH,
                START_Y + row * BRICK_HEIGHT,
                BRICK_WIDTH - BRICK_GAP,
                BRICK_HEIGHT - BRICK_GAP,
            ),
            breakable=cell == BREAKABLE,
        )
        for row, cells in enumerate(matrix)
        for col, cell in enumerate(cells)
        if cell > EMPTY
    ]


def all_breakable_destroyed(bricks: Iterable[Brick]) -> bool:
    """True when no breakable brick is left standing."""
    return not any(brick.breakable and brick.active for brick in bricks)