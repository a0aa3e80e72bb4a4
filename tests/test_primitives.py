import math

import numpy as np
import pytest

from grapple2d.primitives import Vector2, Platform, clamp


def test_vector_arithmetic_returns_new_values():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -1.0)

    assert a + b == Vector2(4.0, 1.0)
    assert a - b == Vector2(-2.0, 3.0)
    assert a * 2 == Vector2(2.0, 4.0)
    assert 2 * a == Vector2(2.0, 4.0)
    assert -a == Vector2(-1.0, -2.0)
    assert a == Vector2(1.0, 2.0)


def test_vector_is_immutable():
    v = Vector2(1.0, 1.0)
    with pytest.raises(AttributeError):
        v.x = 5.0


def test_magnitude_and_normalization():
    v = Vector2(3.0, 4.0)
    assert v.magnitude == pytest.approx(5.0)
    assert v.normalized() == Vector2(0.6, 0.8)
    assert v.with_magnitude(10).magnitude == pytest.approx(10.0)


def test_zero_vector_cannot_be_normalized():
    with pytest.raises(ZeroDivisionError):
        Vector2().normalized()


def test_angles_round_trip():
    v = Vector2.from_angle(math.pi / 2, 3.0)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(3.0)
    assert v.angle() == pytest.approx(math.pi / 2)


def test_numpy_conversion():
    v = Vector2(1.5, -2.5)
    arr = v.as_array()
    assert arr.dtype == np.float64
    assert Vector2.from_array(arr) == v
    with pytest.raises(ValueError):
        Vector2.from_array([1.0, 2.0, 3.0])


def test_distance_and_dot():
    assert Vector2(0, 0).distance_to(Vector2(6, 8)) == pytest.approx(10.0)
    assert Vector2(1, 0).dot(Vector2(0, 1)) == 0


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_platform_strict_containment():
    p = Platform(0, 0, 100, 12)
    assert p.contains_point(Vector2(50, 6))
    assert not p.contains_point(Vector2(0, 6))
    assert not p.contains_point(Vector2(50, 12))
    assert not p.contains_point(Vector2(150, 6))


def test_platform_closest_point():
    p = Platform(0, 0, 100, 12)
    assert p.closest_point(Vector2(-10, -10)) == Vector2(0, 0)
    assert p.closest_point(Vector2(50, 30)) == Vector2(50, 12)
    assert p.closest_point(Vector2(50, 6)) == Vector2(50, 6)


def test_platform_rejects_empty_size():
    with pytest.raises(ValueError):
        Platform(0, 0, 0, 12)
    with pytest.raises(ValueError):
        Platform(0, 0, 10, -1)
