"""
imagefunc/coordinate.py
2-D coordinates: cartesian and polar points, offset vectors.

A point is either a CartesianPoint(x, y) or a PolarPoint(rho, phi). The two
are distinct types, so a polar pair can never be read as (x, y) by accident.
Conversions here are typed to one variant each and never branch on the
variant; images.make_polar / images.make_cartesian do that.
"""

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CartesianPoint:
    x: float
    y: float


@dataclass(frozen=True)
class PolarPoint:
    rho: float
    phi: float      # radians, (-pi, pi] when produced by to_polar


Point = Union[CartesianPoint, PolarPoint]


@dataclass(frozen=True)
class Vector:
    """Translation offset."""
    dx: float
    dy: float

    def __neg__(self) -> "Vector":
        return Vector(-self.dx, -self.dy)


ORIGIN = CartesianPoint(0.0, 0.0)


def to_polar(p: CartesianPoint) -> PolarPoint:
    return PolarPoint(math.hypot(p.x, p.y), math.atan2(p.y, p.x))


def from_polar(p: PolarPoint) -> CartesianPoint:
    return CartesianPoint(p.rho * math.cos(p.phi), p.rho * math.sin(p.phi))


def distance(p: CartesianPoint, q: CartesianPoint = ORIGIN) -> float:
    """Euclidean distance between two cartesian points (q defaults to origin)."""
    return math.hypot(p.x - q.x, p.y - q.y)
