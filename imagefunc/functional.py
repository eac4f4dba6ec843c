"""
imagefunc/functional.py
Variadic function combinators: pipeline composition and fan-out lifting.

Nothing here knows about points or colours. Image generators in images.py are
assembled from these two helpers.

Usage:
    inc_then_double = compose(lambda x: x + 1, lambda x: x * 2)
    inc_then_double(3)  # -> 8 (left-to-right: f2(f1(x)))

    hyp = lift(math.hypot, attrgetter("x"), attrgetter("y"))
"""

from typing import Any, Callable


def identity(x: Any) -> Any:
    """Return the argument unchanged."""
    return x


def compose(*fs: Callable) -> Callable[[Any], Any]:
    """
    Build a unary function applying each of `fs` in the listed order.

    compose()          -> identity
    compose(f)         -> x -> f(x)
    compose(f, g, h)   -> x -> h(g(f(x)))

    The first function listed runs first. Transforms rely on this, e.g.
    normalizing a point to polar form before rotating it.
    """
    if not fs:
        return identity

    stages = tuple(fs)

    def composed(x):
        for stage in stages:
            x = stage(x)
        return x

    return composed


def lift(h: Callable, *fs: Callable) -> Callable[[Any], Any]:
    """
    Fan the same input out to every function in `fs`, combine with `h`.

    lift(h)            -> h
    lift(h, f1, f2)    -> x -> h(f1(x), f2(x))

    Turns plain operators (operator.le, operator.eq, ...) into comparisons
    between two image-functions.
    """
    if not fs:
        return h

    branches = tuple(fs)

    def lifted(x):
        return h(*(branch(x) for branch in branches))

    return lifted
