"""
imagefunc/render.py
Rasterize image-functions into pixel buffers and image files.

The pixel grid is centred on the origin with y pointing up:
    col 0 .. width-1   ->  x = col - width // 2
    row 0 .. height-1  ->  y = height // 2 - row

Sampling is one image(p) call per pixel; no caching.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage

from .color import BLACK, WHITE, Color
from .coordinate import CartesianPoint
from .images import Blend, Image, Region, cond, constant, lerp

logger = logging.getLogger(__name__)


def _check_size(width: int, height: int):
    if width <= 0 or height <= 0:
        raise ValueError(f"Render size must be positive, got {width}x{height}")


def pixel_to_point(col: int, row: int, width: int, height: int) -> CartesianPoint:
    """Map a pixel index to the point it samples."""
    return CartesianPoint(float(col - width // 2), float(height // 2 - row))


def rasterize(image: Image, width: int, height: int) -> np.ndarray:
    """
    Sample `image` at every pixel.

    Returns:
        uint8 array [height, width, 3] in RGB
    """
    _check_size(width, height)
    logger.debug(f"Rasterizing {width}x{height}")

    out = np.empty((height, width, 3), dtype=np.uint8)
    for row in range(height):
        for col in range(width):
            out[row, col] = image(pixel_to_point(col, row, width, height)).rgb
    return out


def rasterize_region(region: Region, width: int, height: int,
                     inside: Color = WHITE, outside: Color = BLACK) -> np.ndarray:
    """Rasterize a Region as a two-colour mask."""
    return rasterize(cond(region, constant(inside), constant(outside)), width, height)


def rasterize_blend(blend: Blend, width: int, height: int,
                    low: Color = BLACK, high: Color = WHITE) -> np.ndarray:
    """Rasterize a Blend as a ramp from `low` (0.0) to `high` (1.0)."""
    return rasterize(lerp(blend, constant(high), constant(low)), width, height)


def to_pil(pixels: np.ndarray) -> PILImage.Image:
    """Wrap an RGB uint8 array as a Pillow image."""
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected RGB array [H,W,3], got {pixels.shape}")
    return PILImage.fromarray(pixels.astype(np.uint8, copy=False))


def save_image(image: Image, path: Union[str, Path], width: int, height: int) -> Path:
    """
    Render `image` and write it to `path`.

    The encoder is chosen by Pillow from the file suffix. Parent directories
    are created as needed.
    """
    path = Path(path)
    pixels = rasterize(image, width, height)

    path.parent.mkdir(parents=True, exist_ok=True)
    to_pil(pixels).save(path)

    logger.info(f"Wrote {path} ({width}x{height})")
    return path
