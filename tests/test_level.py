import numpy as np
import pytest

from grapple2d.layout import compute_layout
from grapple2d.level import Level, build_default_level
from grapple2d.primitives import Platform, Vector2


def test_add_platform_defaults_height():
    level = Level(800)
    platform = level.add_platform(10, 20, 30)
    assert platform == Platform(10, 20, 30, 12)
    assert list(level) == [platform]


def test_row_from_explicit_positions():
    level = Level(800)
    row = level.add_row(300, [100, 200, 300])
    assert [p.x for p in row] == [100, 200, 300]
    assert all(p.y == 300 and p.w == 80 and p.h == 12 for p in row)
    assert len(level) == 3


def test_row_from_count_is_evenly_spaced():
    level = Level(800)
    row = level.add_row(200, 5)
    assert [p.x for p in row] == [0, 180, 360, 540, 720]
    assert all(p.y == 200 and p.w == 80 and p.h == 12 for p in row)


def test_single_ledge_row_sits_at_origin():
    level = Level(800)
    row = level.add_row(50, 1)
    assert len(row) == 1
    assert row[0].x == 0
    assert np.isfinite(level.as_array()).all()


@pytest.mark.parametrize('count', [0, -3])
def test_row_count_must_be_positive(count):
    with pytest.raises(ValueError):
        Level(800).add_row(50, count)


def test_row_rejects_bool_count():
    with pytest.raises(ValueError):
        Level(800).add_row(50, True)


def test_insertion_order_is_preserved():
    level = Level(800)
    level.add_platform(0, 500, 800, 100)
    level.add_row(100, [10, 20])
    assert [p.y for p in level] == [500, 100, 100]
    assert level.spawn_height == 500
    assert level[1].x == 10


def test_first_containing_platform_wins():
    level = Level(800)
    first = level.add_platform(0, 0, 100, 50)
    level.add_platform(50, 0, 100, 50)
    assert level.platform_containing(Vector2(75, 25)) is first
    assert level.platform_containing(Vector2(125, 25)) is level[1]
    assert level.platform_containing(Vector2(500, 25)) is None


def test_boundary_points_are_not_contained():
    level = Level(800)
    level.add_platform(0, 0, 100, 50)
    assert level.platform_containing(Vector2(100, 25)) is None
    assert level.platform_containing(Vector2(50, 0)) is None


def test_empty_level():
    level = Level(800)
    assert level.platform_containing(Vector2(0, 0)) is None
    assert level.as_array().shape == (0, 4)
    with pytest.raises(ValueError):
        level.spawn_height


def test_distances_to_platforms():
    level = Level(800)
    level.add_platform(0, 0, 100, 10)
    level.add_platform(200, 0, 100, 10)
    distances = level.distances_to(Vector2(50, 30))
    assert distances[0] == pytest.approx(20.0)
    assert distances[1] == pytest.approx(np.hypot(150, 20))


def test_default_level_matches_lane():
    layout = compute_layout(1280, 720)
    level = build_default_level(layout)
    assert len(level) == 14
    assert level[0] == Platform(0, 620, 800, 100)
    assert level[1] == Platform(220, 460, 80, 12)
    assert [p.x for p in level if p.y == 40] == [150, 350, 550]
