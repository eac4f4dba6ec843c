"""
imagefunc/gallery.py
Named demonstration images, one per generator, transform and combinator.

Usage:
    from imagefunc.gallery import build_preset, list_presets
    img = build_preset("polar_checker")
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from . import color
from .config import GALLERY, RENDER_CONFIG
from .coordinate import ORIGIN, CartesianPoint, Vector
from .images import (
    Image,
    checker,
    circle,
    cond,
    constant,
    darken,
    lerp,
    lighten,
    polar_checker,
    rings,
    rotate,
    scale,
    translate,
    vertical_stripe,
)
from .render import save_image

log = logging.getLogger(__name__)

g = GALLERY


def _constant() -> Image:
    return constant(color.CARAMEL)


def _circle() -> Image:
    return circle(ORIGIN, g.radius, color.RED, color.WHITE)


def _checker() -> Image:
    return checker(g.cell_size, color.BLACK, color.WHITE)


def _polar_checker() -> Image:
    return polar_checker(g.cell_size, g.sectors, color.NAVY, color.YELLOW)


def _rings() -> Image:
    return rings(ORIGIN, g.ring_width, color.BLUE, color.WHITE)


def _vertical_stripe() -> Image:
    return vertical_stripe(g.stripe_width, color.GREEN, color.WHITE)


def _rotate() -> Image:
    return rotate(_checker(), g.rotation)


def _translate() -> Image:
    return translate(_circle(), Vector(g.offset_x, g.offset_y))


def _scale() -> Image:
    return scale(_polar_checker(), g.zoom)


def _cond() -> Image:
    disc = circle(CartesianPoint(g.offset_x, 0.0), g.radius, True, False)
    return cond(disc, _polar_checker(), _rings())


def _lerp() -> Image:
    fade = rings(ORIGIN, g.ring_width * 2, g.strong, g.weak)
    return lerp(fade, _checker(), _vertical_stripe())


def _darken() -> Image:
    shade = vertical_stripe(g.stripe_width * 2, 0.0, g.strong)
    return darken(_polar_checker(), shade)


def _lighten() -> Image:
    glow = circle(ORIGIN, g.radius, g.strong, g.weak)
    return lighten(_rings(), glow)


PRESETS: Dict[str, Callable[[], Image]] = {
    "constant": _constant,
    "circle": _circle,
    "checker": _checker,
    "polar_checker": _polar_checker,
    "rings": _rings,
    "vertical_stripe": _vertical_stripe,
    "rotate": _rotate,
    "translate": _translate,
    "scale": _scale,
    "cond": _cond,
    "lerp": _lerp,
    "darken": _darken,
    "lighten": _lighten,
}


def list_presets() -> List[str]:
    return list(PRESETS.keys())


def build_preset(name: str) -> Image:
    """Build the named demo image. Raises KeyError for unknown names."""
    try:
        builder = PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(PRESETS)}") from None
    return builder()


def render_gallery(output_dir: Union[str, Path], size: Optional[int] = None,
                   names: Optional[List[str]] = None) -> List[Path]:
    """Render presets (all by default) as <output_dir>/<name>.<format>."""
    output_dir = Path(output_dir)
    size = size or RENDER_CONFIG.width
    names = names or list_presets()

    written = []
    for name in names:
        out = output_dir / f"{name}.{RENDER_CONFIG.image_format}"
        written.append(save_image(build_preset(name), out, size, size))

    log.info(f"Gallery: {len(written)} image(s) in {output_dir}")
    return written
