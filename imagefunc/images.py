"""
imagefunc/images.py
Procedural images as functions from a point to a value.

An image is never a pixel buffer. It is a callable taking a Point and
returning a Color (Image), a bool (Region) or a fraction in [0, 1] (Blend).
Generators and transforms below return new callables immediately; nothing is
sampled until a caller evaluates the result at a point.

Transforms are pull-backs: they move the sampling coordinate, not the
picture. Each one normalizes the incoming point once, applies the inverse
transform, then samples the wrapped image.

Degenerate geometry (zero cell size, zero ring width, zero scale) is not an
error. Arithmetic goes through numpy float64 so it produces inf/NaN, every
comparison against those fails, and sampling returns the "that_way" value.
"""

import copy
import math
import operator
from functools import partial
from operator import attrgetter
from typing import Callable, TypeVar

import numpy as np

from .color import BLACK, WHITE, Color
from .coordinate import (
    CartesianPoint,
    Point,
    PolarPoint,
    Vector,
    distance,
    from_polar,
    to_polar,
)
from .functional import compose, lift

T = TypeVar("T")

Fraction = float

BaseImage = Callable[[Point], T]
Region = Callable[[Point], bool]
Image = Callable[[Point], Color]
Blend = Callable[[Point], Fraction]


# =============================================================================
# Coordinate normalization
# =============================================================================

def make_polar(p: Point) -> PolarPoint:
    return p if isinstance(p, PolarPoint) else to_polar(p)


def make_cartesian(p: Point) -> CartesianPoint:
    return from_polar(p) if isinstance(p, PolarPoint) else p


# =============================================================================
# IEEE-754 helpers (numpy float64: x/0 -> inf, fmod(x, 0) -> nan)
# =============================================================================

def _divide(a: float, b: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(a, b))


def _mod(x: float, y: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.fmod(x, y))


def _checker_parity(p: CartesianPoint, d: float) -> float:
    # 0.0 on even cells, +-1.0 on odd cells, nan when d is degenerate
    with np.errstate(divide="ignore", invalid="ignore"):
        cells = np.floor(np.true_divide(p.x, d)) + np.floor(np.true_divide(p.y, d))
        return float(np.fmod(cells, 2.0))


def _shift(p: CartesianPoint, v: Vector) -> CartesianPoint:
    return CartesianPoint(p.x - v.dx, p.y - v.dy)


def _shrink(p: CartesianPoint, s: float) -> CartesianPoint:
    return CartesianPoint(_divide(p.x, s), _divide(p.y, s))


# =============================================================================
# Combinators
# =============================================================================

def cond(region: Region, this_way: BaseImage[T], that_way: BaseImage[T]) -> BaseImage[T]:
    """Sample `this_way` where `region` holds, `that_way` elsewhere."""
    def image(p: Point) -> T:
        return this_way(p) if region(p) else that_way(p)
    return image


def lerp(blend: Blend, this_way: Image, that_way: Image) -> Image:
    """
    Per-point mix of two images driven by a third.

    blend(p) is how much of `this_way` shows at p: 1.0 gives this_way,
    0.0 gives that_way, the same sense in which a true Region selects
    this_way in cond(). Hence the receiver is that_way: weighted_mean moves
    from that_way toward this_way by blend(p).
    """
    def image(p: Point) -> Color:
        return that_way(p).weighted_mean(this_way(p), blend(p))
    return image


def darken(image: Image, blend: Blend) -> Image:
    """Pull each point toward black by blend(p)."""
    def darkened(p: Point) -> Color:
        return image(p).weighted_mean(BLACK, blend(p))
    return darkened


def lighten(image: Image, blend: Blend) -> Image:
    """Pull each point toward white by blend(p)."""
    def lightened(p: Point) -> Color:
        return image(p).weighted_mean(WHITE, blend(p))
    return lightened


# =============================================================================
# Generators
# =============================================================================

def constant(t: T) -> BaseImage[T]:
    value = copy.deepcopy(t)

    def image(p: Point) -> T:
        return value
    return image


def circle(q: Point, r: float, inner: T, outer: T) -> BaseImage[T]:
    """`inner` within distance r of q (boundary included), `outer` beyond."""
    dist_q = compose(make_cartesian, partial(distance, q=make_cartesian(q)))
    within_r = lift(operator.le, dist_q, constant(r))

    return cond(within_r, constant(inner), constant(outer))


def checker(d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """
    Chessboard of d x d cells; the cell [0, d) x [0, d) is `this_way`.

    Floor division flips parity exactly at multiples of d, on both sides of
    the axes.
    """
    parity = compose(make_cartesian, partial(_checker_parity, d=d))
    even = lift(operator.eq, parity, constant(0.0))

    return cond(even, constant(this_way), constant(that_way))


def polar_checker(d: float, n: int, this_way: T, that_way: T) -> BaseImage[T]:
    """
    Checker laid over polar coordinates: n angular wedges crossed with
    rings of width d.

    The point is unrolled to (rho, phi * n * d / 2pi) and fed to checker(d).
    """
    def unrolled_angle(p: PolarPoint) -> float:
        return d * n * p.phi / (2.0 * math.pi)

    unroll = lift(CartesianPoint, attrgetter("rho"), unrolled_angle)

    return compose(make_polar, unroll, checker(d, this_way, that_way))


def rings(q: Point, d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """Concentric bands of width d around q, starting with `this_way` at q."""
    band = compose(
        make_cartesian,
        partial(distance, q=make_cartesian(q)),
        abs,
        partial(_mod, y=2 * d),
    )
    in_band = lift(operator.le, band, constant(d))

    return cond(in_band, constant(this_way), constant(that_way))


def vertical_stripe(d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """Stripe of width d centred on the y axis."""
    offset = compose(make_cartesian, attrgetter("x"), abs)
    within = lift(operator.le, offset, constant(d / 2.0))

    return cond(within, constant(this_way), constant(that_way))


# =============================================================================
# Geometric transforms
# =============================================================================

def rotate(image: BaseImage[T], phi: float) -> BaseImage[T]:
    """Image appears rotated by +phi radians about the origin."""
    def turn_back(p: PolarPoint) -> PolarPoint:
        return PolarPoint(p.rho, p.phi - phi)

    return compose(make_polar, turn_back, make_cartesian, image)


def translate(image: BaseImage[T], v: Vector) -> BaseImage[T]:
    """Image appears shifted by +v."""
    return compose(make_cartesian, partial(_shift, v=v), image)


def scale(image: BaseImage[T], s: float) -> BaseImage[T]:
    """Image appears magnified by s about the origin."""
    return compose(make_cartesian, partial(_shrink, s=s), image)
