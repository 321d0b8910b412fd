"""Tests for literal formatting."""

import pytest

from motion_playground.core.literals import format_number, to_literal_text, to_object_literal


@pytest.mark.parametrize("value,expected", [
    (1.0, "1"),
    (0.8, "0.8"),
    (-30, "-30"),
    (0.00001, "0.00001"),
    (0.000015, "0.000015"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (1.5e-7, "1.5e-7"),
    (1e16, "10000000000000000"),
    (1e21, "1e+21"),
])
def test_numbers_print_like_javascript(value, expected):
    assert format_number(value) == expected


def test_non_finite_and_bool_are_refused():
    with pytest.raises(ValueError):
        format_number(float("nan"))
    with pytest.raises(TypeError):
        format_number(True)


def test_literal_text_is_compact():
    assert to_literal_text({"y": (0, -30, 0.5)}) == '{"y":[0,-30,0.5]}'
    assert to_object_literal({"scale": 1.05}) == "{ scale: 1.05 }"
