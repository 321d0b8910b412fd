"""Tests for widget adapters, the highlighter and the Qt surfaces."""

import pytest

from motion_playground.core import Category, Easing, Preset, build_configuration, ParameterSet
from motion_playground.protocols import (
    CheckBoxAdapter,
    ColorButtonAdapter,
    ComboBoxAdapter,
    LineEditAdapter,
    PlaygroundConfig,
    SliderAdapter,
    ValueGettable,
    ValueSettable,
)
from motion_playground.services import PlaygroundController, get_snippet_lexer, highlight_snippet


def test_slider_adapter_maps_float_steps(qapp):
    """Test SliderAdapter maps step indices back to rounded floats."""
    slider = SliderAdapter(step=0.1)
    slider.configure_range(0.1, 3.0)
    assert isinstance(slider, ValueGettable)
    assert isinstance(slider, ValueSettable)

    slider.set_value(0.8)
    assert slider.get_value() == 0.8
    slider.set_value(99)
    assert slider.get_value() == 3.0


def test_integral_slider_returns_ints(qapp):
    slider = SliderAdapter(step=1, integral=True)
    slider.configure_range(0, 50)
    slider.set_value(20)
    assert slider.get_value() == 20
    assert isinstance(slider.get_value(), int)


def test_combo_box_adapter_enum_values(qapp):
    combo = ComboBoxAdapter()
    combo.populate_enum(Easing)
    assert combo.count() == len(Easing)
    combo.set_value(Easing.ANTICIPATE)
    assert combo.get_value() is Easing.ANTICIPATE
    assert combo.currentText() == "anticipate"


def test_change_signal_passes_value(qapp):
    line_edit = LineEditAdapter()
    seen = []
    line_edit.connect_change_signal(seen.append)
    line_edit.set_value("Go")
    assert seen == ["Go"]

    line_edit.disconnect_change_signal(seen.append)
    line_edit.set_value("Stop")
    assert seen == ["Go"]


def test_check_box_and_color_button(qapp):
    check = CheckBoxAdapter("Glass Mode")
    check.set_value(True)
    assert check.get_value() is True

    button = ColorButtonAdapter("#EFFF4F")
    seen = []
    button.connect_change_signal(seen.append)
    button.set_value("#112233")
    assert button.get_value() == "#112233"
    assert seen == ["#112233"]


def test_highlight_snippet_returns_inline_styled_html():
    html = highlight_snippet("<motion.div animate={{ x: 1 }} />")
    assert "<pre" in html
    assert "class=" not in html.split("<pre", 1)[1]


def test_missing_lexer_falls_back():
    lexer = get_snippet_lexer(PlaygroundConfig(snippet_lexer="no-such-lexer"))
    assert lexer.name == "TypeScript"


def test_control_panel_emits_changes(qapp):
    from motion_playground.widgets import ControlPanel

    panel = ControlPanel(ParameterSet())
    changes = []
    panel.parameter_changed.connect(lambda name, value: changes.append((name, value)))

    panel.widgets["duration"].set_value(1.5)
    panel.widgets["glass_mode"].set_value(True)
    panel.category_tabs.setCurrentIndex(1)

    assert changes == [("duration", 1.5), ("glass_mode", True), ("category", Category.PHYSICS)]


def test_control_panel_sync_is_silent(qapp):
    from motion_playground.widgets import ControlPanel

    panel = ControlPanel(ParameterSet())
    assert panel.widgets["spring_stiffness"].isHidden()
    changes = []
    panel.parameter_changed.connect(lambda name, value: changes.append((name, value)))

    panel.sync_from(ParameterSet(category=Category.PHYSICS, button_label="Hi"))

    assert changes == []
    assert panel.widgets["button_label"].get_value() == "Hi"
    assert panel.preset_combos[Category.PHYSICS].get_value() is Preset.SPRING
    assert not panel.widgets["spring_stiffness"].isHidden()


def test_preview_stage_remounts_on_new_key(qapp, player_config, monkeypatch):
    from motion_playground.animation import player
    from motion_playground.widgets import PreviewStage

    monkeypatch.setattr(player, "get_player_config", lambda: player_config)
    stage = PreviewStage()
    params = ParameterSet()

    stage.apply(build_configuration(params))
    first = stage.player
    assert stage.mount_key == ("fade", 0)
    assert first.is_running
    assert stage.button.text() == "Click Me"

    # Style-only change keeps the running animation
    params.update_field("button_label", "Go")
    stage.apply(build_configuration(params))
    assert stage.player is first
    assert stage.button.text() == "Go"

    params.advance_play_token()
    stage.apply(build_configuration(params))
    assert stage.mount_key == ("fade", 1)
    assert stage.player is not first
    assert not first.is_running


def test_snippet_view_shows_text(qapp):
    from motion_playground.widgets import SnippetView

    view = SnippetView()
    controller = PlaygroundController()
    view.set_snippet(controller.snippet)
    assert view.text == controller.snippet
    assert "<motion.button" in view.editor.toPlainText()


def test_playground_window_flow(qapp, clipboard):
    from motion_playground.widgets import PlaygroundWindow

    controller = PlaygroundController()
    window = PlaygroundWindow(controller)

    window.control_panel.widgets["button_label"].set_value("Launch")
    assert controller.params.button_label == "Launch"
    assert "    Launch" in window.snippet_view.text

    # Rejected values leave parameters unchanged
    window.control_panel.parameter_changed.emit("duration", 9.0)
    assert controller.params.duration == 0.8

    window.control_panel.category_tabs.setCurrentIndex(2)
    assert controller.params.preset is Preset.STAGGER
    assert window.control_panel.preset_combos[Category.ADVANCED].get_value() is Preset.STAGGER

    window.play_button.click()
    assert window.preview_stage.mount_key == ("stagger", 1)

    window.snippet_view.copy_button.click()
    assert clipboard.text == controller.snippet
    window.close()


def test_preview_stage_is_a_preview_renderer(qapp):
    from motion_playground.protocols import PreviewRenderer
    from motion_playground.widgets import PreviewStage

    assert isinstance(PreviewStage(), PreviewRenderer)
