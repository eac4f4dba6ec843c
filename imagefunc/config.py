"""
imagefunc/config.py
Configuration constants for rendering and the demo gallery.

CLI flags override these per invocation; nothing here is read from disk.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path

# =============================================================================
# Rendering
# =============================================================================

@dataclass
class RenderConfig:
    """Raster output defaults."""
    width: int = 512
    height: int = 512
    output_dir: Path = field(default_factory=lambda: Path("renders"))
    image_format: str = "png"


RENDER_CONFIG = RenderConfig()

# =============================================================================
# Gallery geometry (pixel units, origin at image centre)
# =============================================================================

@dataclass
class GalleryConfig:
    """Parameters shared by the demonstration presets."""
    cell_size: float = 40.0
    sectors: int = 12
    radius: float = 120.0
    ring_width: float = 20.0
    stripe_width: float = 80.0

    rotation: float = math.pi / 6
    offset_x: float = 90.0
    offset_y: float = 60.0
    zoom: float = 2.5

    # Blend weights (fraction of the effect applied)
    strong: float = 0.8
    weak: float = 0.25


GALLERY = GalleryConfig()
