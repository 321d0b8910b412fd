"""
Style composer: visual parameters + derived foreground -> StyleDescriptor.

The descriptor holds typed values. to_css() is the one place that turns them
into declaration strings, and from_css() reverses it, so the preview stage
and the snippet both read from the same descriptor.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .exceptions import OutOfDomainValue
from .literals import NUMBER_PATTERN, format_number
from .parameters import ParameterSet

logger = logging.getLogger(__name__)

# Appended to the #RRGGBB background in glass mode (0x30 alpha byte)
GLASS_ALPHA_SUFFIX = "30"
GLASS_BORDER = "1px solid rgba(255,255,255,0.4)"
CSS_TRANSITION = "all 0.3s ease"
NONE = "none"

_PX_RE = re.compile(rf"^({NUMBER_PATTERN})px$")
_BLUR_RE = re.compile(rf"^blur\(({NUMBER_PATTERN})px\)$")
_SHADOW_RE = re.compile(rf"^0 4px 10px rgba\(0,0,0,({NUMBER_PATTERN})\)$")


@dataclass(frozen=True)
class StyleDescriptor:
    """Resolved visual style of the preview button."""

    background: str
    color: str
    border_radius_px: int
    backdrop_blur_px: Optional[int]
    shadow_alpha: float
    font_size_px: int
    border: Optional[str]
    css_transition: str = CSS_TRANSITION

    @property
    def is_glass(self) -> bool:
        return self.backdrop_blur_px is not None

    def to_css(self) -> Dict[str, str]:
        """Declarations in snippet order, keyed by camelCase property."""
        return {
            "backgroundColor": self.background,
            "color": self.color,
            "borderRadius": f"{format_number(self.border_radius_px)}px",
            "backdropFilter": NONE if self.backdrop_blur_px is None else f"blur({format_number(self.backdrop_blur_px)}px)",
            "boxShadow": f"0 4px 10px rgba(0,0,0,{format_number(self.shadow_alpha)})",
            "fontSize": f"{format_number(self.font_size_px)}px",
            "border": NONE if self.border is None else self.border,
            "transition": self.css_transition,
        }

    @classmethod
    def from_css(cls, css: Mapping[str, str]) -> "StyleDescriptor":
        """
        Parse declarations produced by to_css() back into a descriptor.

        Raises:
            OutOfDomainValue: If a declaration does not have the expected shape
        """
        blur = css["backdropFilter"]
        border = css["border"]
        return cls(
            background=css["backgroundColor"],
            color=css["color"],
            border_radius_px=_parse_number(_PX_RE, "borderRadius", css["borderRadius"]),
            backdrop_blur_px=None if blur == NONE else _parse_number(_BLUR_RE, "backdropFilter", blur),
            shadow_alpha=_parse_number(_SHADOW_RE, "boxShadow", css["boxShadow"]),
            font_size_px=_parse_number(_PX_RE, "fontSize", css["fontSize"]),
            border=None if border == NONE else border,
            css_transition=css.get("transition", CSS_TRANSITION),
        )


def _parse_number(pattern: re.Pattern, name: str, text: str):
    match = pattern.match(text)
    if not match:
        raise OutOfDomainValue(name, text, pattern.pattern)
    number = float(match.group(1))
    digits = match.group(1)
    return int(number) if number.is_integer() and "." not in digits and "e" not in digits else number


def style_for(params: ParameterSet, foreground: str) -> StyleDescriptor:
    """Combine visual parameters and the derived foreground color."""
    glass = params.glass_mode
    return StyleDescriptor(
        background=f"{params.background_color}{GLASS_ALPHA_SUFFIX}" if glass else params.background_color,
        color=foreground,
        border_radius_px=params.border_radius_px,
        backdrop_blur_px=params.blur_px if glass else None,
        shadow_alpha=params.shadow_alpha,
        font_size_px=params.font_size_px,
        border=GLASS_BORDER if glass else None,
    )
