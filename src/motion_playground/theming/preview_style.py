"""
QStyleSheet generator for the preview button.

Translates a StyleDescriptor into what Qt can draw: a QSS rule for the
button body and a drop-shadow color for QGraphicsDropShadowEffect. Qt reads
#AARRGGBB where CSS reads #RRGGBBAA, so colors with alpha are emitted as
rgba() with 0-255 channels.
"""

import logging
import re
from typing import Optional, Tuple

from PyQt6.QtGui import QColor

from motion_playground.core.color_contrast import parse_hex_color
from motion_playground.core.literals import NUMBER_PATTERN
from motion_playground.core.style import StyleDescriptor

logger = logging.getLogger(__name__)

SHADOW_OFFSET_Y = 4
SHADOW_BLUR_RADIUS = 10
BUTTON_PADDING = "12px 32px"

_RGBA_RE = re.compile(rf"rgba\((\d+),(\d+),(\d+),({NUMBER_PATTERN})\)")
_BORDER_RE = re.compile(r"^(\d+)px solid (rgba\(.*\))$")
_PERCENT_RE = re.compile(rf"^({NUMBER_PATTERN})%$")


def css_color_to_rgba(color: str) -> Tuple[int, int, int, int]:
    """
    Convert #RGB, #RRGGBB, #RRGGBBAA or rgba(r,g,b,a<=1) to 0-255 channels.
    """
    match = _RGBA_RE.fullmatch(color.replace(" ", ""))
    if match:
        r, g, b = (int(match.group(i)) for i in range(1, 4))
        return r, g, b, int(round(float(match.group(4)) * 255))
    digits = color[1:]
    alpha = 255
    if len(digits) == 8:
        alpha = int(digits[6:], 16)
    r, g, b = parse_hex_color(color)
    return r, g, b, alpha


def qss_color(color: str) -> str:
    r, g, b, a = css_color_to_rgba(color)
    return f"rgba({r}, {g}, {b}, {a})"


class PreviewStyleGenerator:
    """
    Generates QStyleSheet strings and effect colors from a StyleDescriptor.
    """

    def __init__(self, style: StyleDescriptor):
        """
        Initialize the generator with a style descriptor.

        Args:
            style: StyleDescriptor to render
        """
        self.style = style

    def update_style(self, style: StyleDescriptor):
        self.style = style

    def resolve_radius(self, radius: Optional[str], height: int) -> float:
        """
        Border radius in pixels; a percentage frame value overrides the style.

        Args:
            radius: Animated borderRadius value such as "50%", or None
            height: Current button height in pixels
        """
        if radius is None:
            return float(self.style.border_radius_px)
        match = _PERCENT_RE.match(str(radius))
        if match:
            # Qt cannot exceed half the height
            return min(float(match.group(1)) / 100.0 * height, height / 2.0)
        return float(str(radius).rstrip("px"))

    def generate_button_style(self, radius: Optional[str] = None, height: int = 44) -> str:
        """
        Generate QStyleSheet for the preview button.

        Returns:
            str: Complete QStyleSheet for QPushButton
        """
        s = self.style
        border = "none"
        if s.border is not None:
            match = _BORDER_RE.match(s.border)
            if match:
                border = f"{match.group(1)}px solid {qss_color(match.group(2))}"
            else:
                logger.warning(f"Unrecognized border declaration: {s.border}")
        return f"""
            QPushButton {{
                background-color: {qss_color(s.background)};
                color: {qss_color(s.color)};
                border-radius: {self.resolve_radius(radius, height):.1f}px;
                border: {border};
                font-size: {s.font_size_px}px;
                font-weight: 500;
                padding: {BUTTON_PADDING};
            }}
        """

    def shadow_color(self) -> QColor:
        """Color for the drop-shadow effect (black with the style's alpha)."""
        return QColor(0, 0, 0, int(round(self.style.shadow_alpha * 255)))
