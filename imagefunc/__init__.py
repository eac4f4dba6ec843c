"""
imagefunc - procedural images as functions from points to values

An image is a pure callable Point -> Color; regions return bool and blends
return a fraction. Generators, transforms and combinators build new
callables without ever materializing pixels; render.py samples them.

Usage:
    python -m imagefunc list-presets
    python -m imagefunc render --preset rings -o rings.png
"""

__version__ = "0.1.0"

from .functional import compose, lift, identity
from .coordinate import CartesianPoint, PolarPoint, Point, Vector, ORIGIN, to_polar, from_polar, distance
from .color import Color, BLACK, WHITE, parse_color
from .images import (
    Fraction,
    Region,
    Image,
    Blend,
    make_polar,
    make_cartesian,
    constant,
    circle,
    checker,
    polar_checker,
    rings,
    vertical_stripe,
    rotate,
    translate,
    scale,
    cond,
    lerp,
    darken,
    lighten,
)
from .render import rasterize, rasterize_region, rasterize_blend, save_image

__all__ = [
    "__version__",
    # Composition
    "compose",
    "lift",
    "identity",
    # Coordinates
    "CartesianPoint",
    "PolarPoint",
    "Point",
    "Vector",
    "ORIGIN",
    "to_polar",
    "from_polar",
    "distance",
    # Colour
    "Color",
    "BLACK",
    "WHITE",
    "parse_color",
    # Image algebra
    "Fraction",
    "Region",
    "Image",
    "Blend",
    "make_polar",
    "make_cartesian",
    "constant",
    "circle",
    "checker",
    "polar_checker",
    "rings",
    "vertical_stripe",
    "rotate",
    "translate",
    "scale",
    "cond",
    "lerp",
    "darken",
    "lighten",
    # Rendering
    "rasterize",
    "rasterize_region",
    "rasterize_blend",
    "save_image",
]
