"""Tests for the parameter set and its reject policy."""

import pytest

from motion_playground.core import (
    Category,
    DEFAULT_PRESETS,
    Easing,
    OutOfDomainValue,
    ParameterSet,
    Preset,
    RepeatMode,
    UnknownPreset,
)


def test_defaults():
    params = ParameterSet()
    assert params.category is Category.BASICS
    assert params.preset is Preset.FADE
    assert params.duration == 0.8
    assert params.delay == 0.0
    assert params.easing is Easing.EASE_IN_OUT
    assert params.repeat_mode is RepeatMode.LOOP
    assert params.background_color == "#EFFF4F"
    assert params.play_token == 0


def test_enum_fields_accept_string_values():
    params = ParameterSet()
    params.update_field("easing", "anticipate")
    assert params.easing is Easing.ANTICIPATE


@pytest.mark.parametrize("name,value", [
    ("duration", 5.0),
    ("duration", 0.0),
    ("delay", -0.1),
    ("spring_stiffness", 10),
    ("border_radius_px", 51),
    ("shadow_alpha", 0.9),
    ("font_size_px", 9),
    ("repeat_count", -1),
    ("repeat_count", 1.5),
    ("duration", True),
    ("background_color", "yellow"),
    ("glass_mode", "yes"),
    ("easing", "bouncy"),
])
def test_out_of_domain_values_are_rejected(name, value):
    """Rejected values raise and leave the set untouched."""
    params = ParameterSet()
    before = getattr(params, name)
    with pytest.raises(OutOfDomainValue) as excinfo:
        params.update_field(name, value)
    assert excinfo.value.field_name == name
    assert getattr(params, name) == before


def test_out_of_domain_is_a_value_error():
    with pytest.raises(ValueError):
        ParameterSet(duration=9.0)


def test_unknown_preset():
    params = ParameterSet()
    with pytest.raises(UnknownPreset) as excinfo:
        params.update_field("preset", "wobble")
    assert excinfo.value.preset == "wobble"
    assert params.preset is Preset.FADE


def test_preset_must_belong_to_current_category():
    params = ParameterSet()
    with pytest.raises(OutOfDomainValue):
        params.update_field("preset", Preset.SPRING)


def test_integral_fields_are_normalized():
    params = ParameterSet()
    params.update_field("repeat_count", 2.0)
    assert params.repeat_count == 2
    assert isinstance(params.repeat_count, int)
    params.update_field("duration", 1)
    assert isinstance(params.duration, float)


def test_play_token_is_read_only():
    params = ParameterSet()
    with pytest.raises(OutOfDomainValue):
        params.update_field("play_token", 3)
    assert params.advance_play_token() == 1


def test_category_change_resets_preset():
    params = ParameterSet()
    for category, default in DEFAULT_PRESETS.items():
        params.update_field("category", category)
        assert params.preset is default


def test_category_reselect_still_resets_preset():
    """Re-selecting the current category resets a valid, non-default preset."""
    params = ParameterSet(category=Category.PHYSICS, preset=Preset.BOUNCE)
    previous = params.update_field("category", "physics")
    assert previous is Category.PHYSICS
    assert params.preset is Preset.SPRING


def test_unknown_field_name():
    with pytest.raises(OutOfDomainValue):
        ParameterSet().update_field("wobble", 1)


@pytest.mark.parametrize("category", list(Category))
def test_category_only_construction_uses_category_default(category):
    params = ParameterSet(category=category)
    assert params.preset is DEFAULT_PRESETS[category]


def test_explicit_preset_outside_category_is_rejected():
    with pytest.raises(OutOfDomainValue):
        ParameterSet(category=Category.ADVANCED, preset=Preset.FADE)
