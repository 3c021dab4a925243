"""Tests for geometry primitives."""

import math

import pytest

from spawnfield.core.geometry import PlayfieldBounds, Vec2, clamp


def test_vector_arithmetic():
    a = Vec2(3, 4)

    assert a + Vec2(1, 1) == Vec2(4, 5)
    assert a - Vec2(1, 1) == Vec2(2, 3)
    assert a.scaled(2) == Vec2(6, 8)
    assert a.magnitude == 5
    assert a.distance_to(Vec2()) == 5


def test_normalized_zero_vector_is_zero():
    assert Vec2().normalized() == Vec2()
    assert math.isclose(Vec2(10, 0).normalized().x, 1.0)


def test_lerp_clamps_factor():
    a, b = Vec2(0, 0), Vec2(10, 20)

    assert a.lerp(b, 0.5) == Vec2(5, 10)
    assert a.lerp(b, 2.0) == b
    assert a.lerp(b, -1.0) == a


def test_clamp_inverted_range_prefers_limit_on_side():
    """With lo > hi, values below lo give lo and values above hi give hi."""
    assert clamp(-5, 3, 1) == 3
    assert clamp(10, 3, 1) == 1


def test_centered_bounds():
    bounds = PlayfieldBounds.centered(50.0)

    assert bounds.min == Vec2(-50, -50)
    assert bounds.max == Vec2(50, 50)
    assert bounds.center == Vec2(0, 0)
    assert bounds.width == bounds.height == 100


def test_from_corners_orders_axes():
    bounds = PlayfieldBounds.from_corners(Vec2(5, -1), Vec2(-2, 4))

    assert bounds == PlayfieldBounds(Vec2(-2, -1), Vec2(5, 4))


@pytest.mark.parametrize(
    "bounds,degenerate",
    [
        (PlayfieldBounds(Vec2(0, 0), Vec2(1, 1)), False),
        (PlayfieldBounds(Vec2(0, 0), Vec2(0, 1)), True),
        (PlayfieldBounds(Vec2(0, 0), Vec2(1, 0)), True),
        (PlayfieldBounds(Vec2(2, 2), Vec2(1, 1)), True),
    ],
)
def test_degenerate_detection(bounds, degenerate):
    assert bounds.is_degenerate is degenerate


def test_union_shrink_and_clamp_return_new_bounds():
    a = PlayfieldBounds(Vec2(0, 0), Vec2(10, 10))
    b = PlayfieldBounds(Vec2(5, -5), Vec2(20, 5))

    assert a.union(b) == PlayfieldBounds(Vec2(0, -5), Vec2(20, 10))
    assert a.shrink(1) == PlayfieldBounds(Vec2(1, 1), Vec2(9, 9))
    assert a.clamp(Vec2(-3, 30)) == Vec2(0, 10)
    assert a == PlayfieldBounds(Vec2(0, 0), Vec2(10, 10))


def test_bounds_are_frozen():
    bounds = PlayfieldBounds.centered(1.0)

    with pytest.raises(AttributeError):
        bounds.min = Vec2(5, 5)  # type: ignore[misc]
