"""
Preview styling.

Turns StyleDescriptors into Qt stylesheets and effect colors.
"""

from .preview_style import PreviewStyleGenerator, css_color_to_rgba, qss_color

__all__ = [
    "PreviewStyleGenerator",
    "css_color_to_rgba",
    "qss_color",
]
