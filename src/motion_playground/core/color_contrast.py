"""Foreground color derivation for the preview button."""

import logging
from functools import lru_cache
from typing import Tuple

from wcag_contrast_ratio.contrast import rgb as wcag_rgb

logger = logging.getLogger(__name__)

BLACK = "#000"
WHITE = "#fff"

# Perceptual luminance above which dark text reads better
LUMINANCE_THRESHOLD = 0.6


def parse_hex_color(color: str) -> Tuple[int, int, int]:
    """
    Decode a #RGB or #RRGGBB string.

    Args:
        color: Hex color string with leading '#'

    Returns:
        Tuple[int, int, int]: RGB channels in 0-255
    """
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    value = int(digits[:6], 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255


def perceived_luminance(color: str) -> float:
    r, g, b = parse_hex_color(color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


@lru_cache(maxsize=256)
def contrast_color(background: str) -> str:
    """
    Pick black or white text for a background color.

    Total and pure: the result depends only on the perceived luminance of
    the background.

    Args:
        background: Background color as #RRGGBB

    Returns:
        str: "#000" for light backgrounds, "#fff" otherwise
    """
    return BLACK if perceived_luminance(background) > LUMINANCE_THRESHOLD else WHITE


def contrast_ratio(foreground: str, background: str) -> float:
    """WCAG 2.x contrast ratio between two hex colors (1.0 to 21.0)."""
    fg = tuple(c / 255.0 for c in parse_hex_color(foreground))
    bg = tuple(c / 255.0 for c in parse_hex_color(background))
    return wcag_rgb(fg, bg)
