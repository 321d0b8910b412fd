"""Tests for easing, spring physics and keyframe timelines."""

import pytest

from motion_playground.animation import (
    KeyframePlayer,
    PlayerConfig,
    SpringModel,
    Timeline,
    anticipate,
    cubic_bezier,
    icon_timeline,
    linear,
    resolve_easing,
)
from motion_playground.core import (
    Category,
    ParameterSet,
    Preset,
    RepeatMode,
    Tween,
    build_configuration,
    variants_for,
)
from motion_playground.core.icon_motion import DEFAULT_ICON_MOTION

LINEAR_CURVE = (0.25, 0.25, 0.75, 0.75)


def _tween(duration=1.0, delay=0.0, curve=LINEAR_CURVE, repeat=0, mode=RepeatMode.LOOP):
    return Tween(duration=duration, delay=delay, easing_curve=curve, repeat_count=repeat, repeat_mode=mode)


def test_bezier_endpoints_and_symmetry():
    ease_in_out = resolve_easing("easeInOut")
    assert ease_in_out(0.0) == 0.0
    assert ease_in_out(1.0) == 1.0
    assert ease_in_out(0.5) == pytest.approx(0.5, abs=1e-4)
    assert ease_in_out(0.25) < 0.25


def test_degenerate_bezier_is_linear():
    assert cubic_bezier(*LINEAR_CURVE) is linear


def test_anticipate_pulls_back_first():
    assert anticipate(0.0) == 0.0
    assert anticipate(1.0) == 1.0
    assert anticipate(0.2) < 0.0
    assert anticipate(0.9) > 0.9


def test_resolve_easing_rejects_unknown_names():
    with pytest.raises(ValueError):
        resolve_easing("wobbly")
    with pytest.raises(ValueError):
        resolve_easing((0.1, 0.2))


def test_underdamped_spring_overshoots_then_settles():
    spring = SpringModel(stiffness=120)
    assert spring.damping_ratio < 1.0
    assert spring.progress(0.0) == 0.0
    peak = max(spring.progress(i / 100.0) for i in range(100))
    assert peak > 1.0
    settle = spring.settling_time()
    assert 0.0 < settle < 5.0
    assert abs(1.0 - spring.progress(settle + 0.5)) < spring.rest_delta


def test_overdamped_spring_never_overshoots():
    spring = SpringModel(stiffness=20)
    assert spring.damping_ratio > 1.0
    assert all(spring.progress(i / 50.0) <= 1.0 for i in range(200))
    assert 1.0 - spring.progress(spring.settling_time()) < spring.rest_delta


def test_fade_timeline():
    timeline = Timeline(variants_for(Preset.FADE), _tween(duration=0.8))
    assert timeline.sample(0.0) == {"opacity": 0.0}
    assert timeline.sample(0.4)["opacity"] == pytest.approx(0.5)
    assert timeline.sample(0.8) == {"opacity": 1.0}
    assert timeline.is_finished(0.8)
    assert not timeline.is_finished(0.79)


def test_delay_holds_initial_frame():
    timeline = Timeline(variants_for(Preset.SLIDE), _tween(delay=0.5))
    assert timeline.total_duration == pytest.approx(1.5)
    assert timeline.sample(0.2) == timeline.initial_frame() == {"x": -100, "opacity": 0}


def test_bounce_steps_through_keyframes():
    timeline = Timeline(variants_for(Preset.BOUNCE), _tween(curve=(0.42, 0, 0.58, 1)))
    assert timeline.initial_frame() == {"y": -100}
    assert timeline.sample(0.5)["y"] == pytest.approx(-30.0)
    assert timeline.sample(1.0)["y"] == pytest.approx(0.0)


@pytest.mark.parametrize("mode,expected", [
    (RepeatMode.LOOP, 0.25),
    (RepeatMode.REVERSE, 0.75),
    (RepeatMode.MIRROR, 0.75),
])
def test_repeat_modes(mode, expected):
    timeline = Timeline(variants_for(Preset.FADE), _tween(repeat=1, mode=mode))
    assert timeline.total_duration == pytest.approx(2.0)
    assert timeline.sample(0.25)["opacity"] == pytest.approx(0.25)
    assert timeline.sample(1.25)["opacity"] == pytest.approx(expected)


def test_morph_keeps_units():
    timeline = Timeline(variants_for(Preset.MORPH), _tween())
    assert timeline.initial_frame() == {"borderRadius": "0%"}
    assert timeline.sample(0.5) == {"borderRadius": "25%"}
    assert timeline.sample(1.0) == {"borderRadius": "50%"}


def test_stagger_timeline_is_empty():
    timeline = Timeline(variants_for(Preset.STAGGER), _tween())
    assert timeline.initial_frame() == {}
    assert timeline.sample(0.5) == {}


def test_spring_timeline_settles_on_target():
    configuration = build_configuration(ParameterSet(category=Category.PHYSICS))
    timeline = Timeline(configuration.variant, configuration.transition)
    assert timeline.sample(0.0)["scale"] == pytest.approx(0.8)
    assert timeline.sample(timeline.total_duration)["scale"] == pytest.approx(1.0)
    assert timeline.is_finished(timeline.total_duration)


def test_icon_wiggle_timeline():
    timeline = icon_timeline(DEFAULT_ICON_MOTION)
    assert timeline.total_duration == pytest.approx(1.5)
    assert timeline.initial_frame() == {"rotate": 0}
    assert timeline.sample(1.5)["rotate"] == pytest.approx(0.0)


def test_player_config_caps_fps():
    assert PlayerConfig(target_fps=30).frame_ms == 33
    assert PlayerConfig(target_fps=144).frame_ms == 16
    assert PlayerConfig(frame_ms=10).frame_ms == 10


def test_player_emits_initial_frame(qapp, player_config):
    now = [100.0]
    player = KeyframePlayer(
        Timeline(variants_for(Preset.FADE), _tween()),
        config=player_config,
        clock=lambda: now[0],
    )
    frames = []
    player.frame.connect(frames.append)

    player.start()
    assert frames == [{"opacity": 0}]
    assert player.is_running

    now[0] += 0.5
    assert player.sample_now()["opacity"] == pytest.approx(0.5)

    player.stop()
    assert not player.is_running


def test_split_unit_accepts_exponents():
    from motion_playground.animation import split_unit

    assert split_unit("50%") == (50.0, "%")
    assert split_unit("1e-7px") == (1e-7, "px")
    assert split_unit(12) == (12.0, "")
