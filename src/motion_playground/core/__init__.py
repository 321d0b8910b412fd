"""
Parameter-to-animation configuration engine.

Pure Python with no Qt imports: parameters in, descriptors and snippet text
out. Everything the preview and the snippet show is derived here.
"""

from .exceptions import PlaygroundError, UnknownPreset, OutOfDomainValue, SnippetParseError
from .parameters import (
    Category,
    Preset,
    Easing,
    RepeatMode,
    IconId,
    ParameterSet,
    PRESETS_BY_CATEGORY,
    DEFAULT_PRESETS,
    NUMERIC_DOMAINS,
)
from .color_contrast import contrast_color, contrast_ratio, parse_hex_color
from .variants import VariantDescriptor, variants_for
from .transitions import TransitionDescriptor, Tween, Spring, EASING_CURVES, transition_for
from .style import StyleDescriptor, style_for
from .icon_motion import IconMotion, Interaction, ICON_COMPONENTS
from .configuration import PlaygroundConfiguration, build_configuration
from .snippet import ParsedSnippet, render, render_snippet, parse_snippet

__all__ = [
    "PlaygroundError",
    "UnknownPreset",
    "OutOfDomainValue",
    "SnippetParseError",
    "Category",
    "Preset",
    "Easing",
    "RepeatMode",
    "IconId",
    "ParameterSet",
    "PRESETS_BY_CATEGORY",
    "DEFAULT_PRESETS",
    "NUMERIC_DOMAINS",
    "contrast_color",
    "contrast_ratio",
    "parse_hex_color",
    "VariantDescriptor",
    "variants_for",
    "TransitionDescriptor",
    "Tween",
    "Spring",
    "EASING_CURVES",
    "transition_for",
    "StyleDescriptor",
    "style_for",
    "IconMotion",
    "Interaction",
    "ICON_COMPONENTS",
    "PlaygroundConfiguration",
    "build_configuration",
    "ParsedSnippet",
    "render",
    "render_snippet",
    "parse_snippet",
]
