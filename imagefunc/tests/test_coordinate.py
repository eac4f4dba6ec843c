# tests/test_coordinate.py
"""
Tests for imagefunc/coordinate.py - point variants and conversions.
"""
import dataclasses
import math

import pytest

from imagefunc.coordinate import (
    ORIGIN,
    CartesianPoint,
    PolarPoint,
    Vector,
    distance,
    from_polar,
    to_polar,
)


def test_to_polar_axes():
    p = to_polar(CartesianPoint(0.0, 2.0))
    assert p.rho == pytest.approx(2.0)
    assert p.phi == pytest.approx(math.pi / 2)


def test_to_polar_negative_x_axis_angle():
    """atan2 range is (-pi, pi]."""
    assert to_polar(CartesianPoint(-1.0, 0.0)).phi == pytest.approx(math.pi)
    assert to_polar(CartesianPoint(0.0, -1.0)).phi == pytest.approx(-math.pi / 2)


def test_from_polar():
    p = from_polar(PolarPoint(2.0, math.pi / 3))
    assert p.x == pytest.approx(1.0)
    assert p.y == pytest.approx(math.sqrt(3.0))


@pytest.mark.parametrize("x,y", [(3.0, 4.0), (-2.5, 0.5), (0.0, 0.0), (-7.0, -1.0)])
def test_polar_round_trip(x, y):
    back = from_polar(to_polar(CartesianPoint(x, y)))
    assert back.x == pytest.approx(x, abs=1e-9)
    assert back.y == pytest.approx(y, abs=1e-9)


def test_distance_defaults_to_origin():
    assert distance(CartesianPoint(3.0, 4.0)) == 5.0
    assert distance(ORIGIN) == 0.0


def test_distance_between_points():
    assert distance(CartesianPoint(1.0, 1.0), CartesianPoint(4.0, 5.0)) == 5.0


def test_points_are_immutable():
    p = CartesianPoint(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_variants_never_compare_equal():
    """Same pair, different meaning."""
    assert CartesianPoint(1.0, 0.0) != PolarPoint(1.0, 0.0)


def test_vector_negation():
    v = Vector(3.0, -2.0)
    assert -v == Vector(-3.0, 2.0)
    assert -(-v) == v
