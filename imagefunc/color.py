"""
imagefunc/color.py
8-bit RGB colour value with linear blending.

Colors are immutable values; weighted_mean returns a new Color.
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def weighted_mean(self, other: "Color", fraction: float) -> "Color":
        """
        Move `fraction` of the way from this colour toward `other`.

        fraction=0 gives self, fraction=1 gives other. Channels are rounded
        half-to-even (Python round) and clamped to 0-255.
        """
        keep = 1.0 - fraction
        return Color(
            _channel(self.red * keep + other.red * fraction),
            _channel(self.green * keep + other.green * fraction),
            _channel(self.blue * keep + other.blue * fraction),
        )


# =============================================================================
# Named colours
# =============================================================================

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
YELLOW = Color(255, 255, 0)
GRAY = Color(128, 128, 128)
CARAMEL = Color(255, 193, 37)
NAVY = Color(0, 0, 128)

NAMED_COLORS: Dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "cyan": CYAN,
    "magenta": MAGENTA,
    "yellow": YELLOW,
    "gray": GRAY,
    "caramel": CARAMEL,
    "navy": NAVY,
}


def parse_color(text: str) -> Color:
    """
    Parse a colour name ("caramel") or hex triplet ("#ffc125").

    Raises ValueError for anything else.
    """
    key = text.strip().lower()
    if key in NAMED_COLORS:
        return NAMED_COLORS[key]

    match = _HEX_RE.match(key)
    if match is None:
        raise ValueError(
            f"Unknown colour '{text}': expected one of {sorted(NAMED_COLORS)} or #rrggbb"
        )
    digits = match.group(1)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
