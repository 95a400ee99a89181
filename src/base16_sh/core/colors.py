"""
Color math for scheme palettes.

Plain RGB arithmetic: hex parsing, Euclidean distance and HSV saturation.
No perceptual correction is applied anywhere.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence

RGB = tuple[int, int, int]

_HEX6 = re.compile(r"[0-9A-Fa-f]{6}")

# Syntax-highlighting slots, as opposed to background/foreground shades
ACCENT_SLOTS: tuple[str, ...] = (
    "base08",
    "base09",
    "base0A",
    "base0B",
    "base0C",
    "base0D",
    "base0E",
    "base0F",
)

# Empirical thresholds
GREYSCALE_SATURATION = 0.2
GREYSCALE_MIN_SLOTS = 5


def strip_hash(value: str) -> str:
    """Remove a single leading '#' from a color string."""
    return value[1:] if value.startswith("#") else value


def is_hex6(value: str) -> bool:
    """Whether ``value`` (without '#') is exactly six hex digits."""
    return _HEX6.fullmatch(value) is not None


def hex_to_rgb(value: str) -> RGB:
    """Convert ``#rrggbb`` or ``rrggbb`` to an RGB triple.

    Anything that is not exactly six hex digits yields black rather than
    raising.
    """
    digits = strip_hash(value.strip()) if isinstance(value, str) else ""
    if not is_hex6(digits):
        return (0, 0, 0)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Format an RGB triple as lowercase ``rrggbb``."""
    r, g, b = rgb
    return f"{r:02x}{g:02x}{b:02x}"


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two equal-length color vectors."""
    return math.dist(a, b)


def saturation(rgb: Sequence[int]) -> float:
    """HSV saturation of an RGB triple, in [0, 1]."""
    high = max(rgb)
    if high == 0:
        return 0.0
    return (high - min(rgb)) / high


def is_greyscale(palette: Mapping[str, str]) -> bool:
    """Whether most accent colors of a palette are (nearly) unsaturated."""
    desaturated = sum(
        1
        for slot in ACCENT_SLOTS
        if saturation(hex_to_rgb(palette.get(slot, ""))) < GREYSCALE_SATURATION
    )
    return desaturated >= GREYSCALE_MIN_SLOTS
