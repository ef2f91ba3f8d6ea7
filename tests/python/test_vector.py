from __future__ import annotations

import math

import pytest
from pytest import approx

from flocking.errors import DegenerateVectorError, EmptyNeighborSetError
from flocking.vector import ZERO, Vec2


def test_arithmetic_returns_new_values():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, 5.0)

    assert a + b == Vec2(4.0, 7.0)
    assert b - a == Vec2(2.0, 3.0)
    assert a * 3 == Vec2(3.0, 6.0)
    assert b / 2 == Vec2(1.5, 2.5)
    assert a == Vec2(1.0, 2.0)
    assert b == Vec2(3.0, 5.0)


def test_vectors_are_immutable():
    a = Vec2(1.0, 2.0)
    with pytest.raises(AttributeError):
        a.x = 5.0  # type: ignore[misc]


def test_distance_and_length():
    assert Vec2(3.0, 4.0).length() == approx(5.0)
    assert Vec2(1.0, 1.0).distance(Vec2(4.0, 5.0)) == approx(5.0)
    assert ZERO.length() == 0.0


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / 0


def test_normalized_zero_vector_is_degenerate():
    assert Vec2(0.0, 2.0).normalized() == Vec2(0.0, 1.0)
    with pytest.raises(DegenerateVectorError):
        ZERO.normalized()


def test_heading_uses_atan2():
    assert Vec2(-1.0, 0.0).heading() == approx(math.pi)
    assert Vec2(1.0, 1.0).heading() == approx(math.pi / 4)


def test_mean():
    assert Vec2.mean([Vec2(0.0, 0.0), Vec2(2.0, 4.0)]) == Vec2(1.0, 2.0)
    with pytest.raises(EmptyNeighborSetError):
        Vec2.mean([])
