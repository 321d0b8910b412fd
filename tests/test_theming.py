"""Tests for the preview stylesheet generator."""

from motion_playground.core import ParameterSet, build_configuration
from motion_playground.theming import PreviewStyleGenerator, css_color_to_rgba, qss_color


def _generator(**overrides):
    return PreviewStyleGenerator(build_configuration(ParameterSet(**overrides)).style)


def test_css_colors_to_qt_channels():
    assert css_color_to_rgba("#fff") == (255, 255, 255, 255)
    assert css_color_to_rgba("#11223330") == (0x11, 0x22, 0x33, 0x30)
    assert css_color_to_rgba("rgba(255,255,255,0.4)") == (255, 255, 255, 102)
    assert qss_color("#EFFF4F") == "rgba(239, 255, 79, 255)"


def test_default_button_style():
    qss = _generator().generate_button_style()
    assert "background-color: rgba(239, 255, 79, 255);" in qss
    assert "color: rgba(0, 0, 0, 255);" in qss
    assert "border-radius: 20.0px;" in qss
    assert "border: none;" in qss
    assert "font-size: 16px;" in qss


def test_glass_button_style():
    qss = _generator(glass_mode=True, background_color="#112233").generate_button_style()
    assert "background-color: rgba(17, 34, 51, 48);" in qss
    assert "border: 1px solid rgba(255, 255, 255, 102);" in qss


def test_percentage_radius_is_capped_at_half_height():
    generator = _generator()
    assert generator.resolve_radius(None, 44) == 20.0
    assert generator.resolve_radius("50%", 44) == 22.0
    assert generator.resolve_radius("25%", 40) == 10.0


def test_shadow_color_alpha(qapp):
    assert _generator(shadow_alpha=0.2).shadow_color().alpha() == 51
