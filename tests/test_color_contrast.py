"""Tests for foreground color derivation."""

import pytest

from motion_playground.core import contrast_color, contrast_ratio, parse_hex_color
from motion_playground.core.color_contrast import BLACK, WHITE, perceived_luminance


def test_default_background_gets_black_text():
    """#EFFF4F is light enough for black text."""
    assert perceived_luminance("#EFFF4F") > 0.6
    assert contrast_color("#EFFF4F") == BLACK


def test_dark_background_gets_white_text():
    assert contrast_color("#112233") == WHITE
    assert contrast_color("#000000") == WHITE


def test_result_is_black_or_white_for_every_color():
    """Sweep a grid of colors; the result is always one of two values."""
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                color = f"#{r:02x}{g:02x}{b:02x}"
                assert contrast_color(color) in (BLACK, WHITE)


def test_same_input_same_output():
    first = contrast_color("#9a9a9a")
    assert all(contrast_color("#9a9a9a") == first for _ in range(5))
    assert first == BLACK


def test_parse_hex_color_short_and_long_forms():
    assert parse_hex_color("#fff") == (255, 255, 255)
    assert parse_hex_color("#EFFF4F") == (239, 255, 79)
    # Alpha suffix is ignored
    assert parse_hex_color("#11223330") == (0x11, 0x22, 0x33)


def test_contrast_ratio_extremes():
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)
    assert contrast_ratio("#EFFF4F", "#EFFF4F") == pytest.approx(1.0)
