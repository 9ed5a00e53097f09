import itertools
import random

import pytest

from brickbreak.brick import Brick
from brickbreak.geometry import Rect, check_collision_rects
from brickbreak.level import (
    COLS,
    ROWS,
    START_X,
    START_Y,
    all_breakable_destroyed,
    build_bricks,
    level_layout,
)


@pytest.mark.parametrize("level", [0, 1, 2, 3, 4, 7])
def test_layout_shape(level):
    layout = level_layout(level, random.Random(1))
    assert len(layout) == ROWS
    assert all(len(row) == COLS for row in layout)


def test_level_one_rows_from_layout():
    layout = level_layout(1)
    assert layout[0] == (1,) * COLS
    assert layout[5] == (2,) * COLS
    assert layout[4] == (0,) * COLS


def test_level_three_is_framed_by_solid_bricks():
    layout = level_layout(3)
    assert layout[0] == (2,) * COLS
    assert all(row[0] == 2 and row[-1] == 2 for row in layout[:5])


def test_level_below_one_is_empty():
    assert all(cell == 0 for row in level_layout(0) for cell in row)
    assert build_bricks(level_layout(-1)) == []


def test_random_levels_use_valid_cells_and_are_seeded():
    first = level_layout(5, random.Random(42))
    second = level_layout(5, random.Random(42))
    assert first == second
    assert {cell for row in first for cell in row} <= {0, 1, 2}


@pytest.mark.parametrize("level", [1, 2, 3])
def test_build_bricks_matches_layout(level):
    layout = level_layout(level)
    bricks = build_bricks(layout)
    cells = [cell for row in layout for cell in row]
    assert len(bricks) == sum(1 for c in cells if c > 0)
    assert sum(b.breakable for b in bricks) == cells.count(1)
    assert all(b.active for b in bricks)


def test_first_brick_at_origin_of_wall():
    bricks = build_bricks(level_layout(1))
    assert (bricks[0].rect.x, bricks[0].rect.y) == (START_X, START_Y)


def test_bricks_do_not_overlap():
    bricks = build_bricks(level_layout(2))
    for a, b in itertools.combinations(bricks, 2):
        assert not check_collision_rects(a.rect, b.rect)


def test_fresh_level_is_not_cleared():
    assert all_breakable_destroyed(build_bricks(level_layout(1))) is False


def test_level_cleared_after_breaking_all():
    bricks = build_bricks(level_layout(1))
    for brick in bricks:
        brick.destroy()
    assert all_breakable_destroyed(bricks) is True
    assert any(b.active for b in bricks)


def test_only_solid_bricks_count_as_cleared():
    solid = [Brick(Rect(0, 0, 10, 10), breakable=False)]
    assert all_breakable_destroyed(solid) is True
    assert all_breakable_destroyed([]) is True