"""
Parameter control panel: the playground's input surface.

Emits one parameter_changed(name, value) per user edit. Widget ranges come
from the engine's numeric domains, so every emitted number is already
clamped. sync_from() pushes controller state back into the widgets without
echoing change events.
"""

import logging
from typing import Any, Dict, Tuple

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFormLayout, QLabel, QTabWidget, QVBoxLayout, QWidget

from motion_playground.core import (
    Category,
    Easing,
    IconId,
    NUMERIC_DOMAINS,
    PRESETS_BY_CATEGORY,
    ParameterSet,
    Preset,
    RepeatMode,
)
from motion_playground.protocols import (
    CheckBoxAdapter,
    ColorButtonAdapter,
    ComboBoxAdapter,
    LineEditAdapter,
    SliderAdapter,
    SpinBoxAdapter,
    ValueSettable,
)

logger = logging.getLogger(__name__)

# Widget-side cap for the unbounded repeat count
MAX_REPEAT_COUNT = 99

# field -> (label, step, integral, value format)
ANIMATION_SLIDERS: Dict[str, Tuple[str, float, bool, str]] = {
    "duration": ("Duration", 0.1, False, "{:.1f}s"),
    "delay": ("Delay", 0.1, False, "{:.1f}s"),
    "spring_stiffness": ("Stiffness", 10, False, "{:g}"),
}

STYLE_SLIDERS: Dict[str, Tuple[str, float, bool, str]] = {
    "border_radius_px": ("Border Radius", 1, True, "{}px"),
    "blur_px": ("Blur", 1, True, "{}px"),
    "shadow_alpha": ("Shadow", 0.05, False, "{:.2f}"),
    "font_size_px": ("Font Size", 1, True, "{}px"),
}

CATEGORY_ORDER = (Category.BASICS, Category.PHYSICS, Category.ADVANCED)


def _title(member) -> str:
    return member.value[:1].upper() + member.value[1:]


class ControlPanel(QWidget):
    """Input widgets for every ParameterSet field except the play token."""

    parameter_changed = pyqtSignal(str, object)

    def __init__(self, params: ParameterSet, parent=None):
        super().__init__(parent)
        self.widgets: Dict[str, ValueSettable] = {}
        self._value_labels: Dict[str, Tuple[QLabel, str, str]] = {}
        self.preset_combos: Dict[Category, ComboBoxAdapter] = {}
        self._syncing = False

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("<b>Controls</b>"))
        layout.addWidget(self._build_category_tabs())

        animation_form = QFormLayout()
        layout.addLayout(animation_form)

        easing = ComboBoxAdapter()
        easing.populate_enum(Easing)
        self._register("easing", easing)
        animation_form.addRow("Ease", easing)

        for name, row in ANIMATION_SLIDERS.items():
            self._add_slider(animation_form, name, *row)

        repeat = SpinBoxAdapter()
        repeat.configure_range(NUMERIC_DOMAINS["repeat_count"].minimum, MAX_REPEAT_COUNT)
        self._register("repeat_count", repeat)
        animation_form.addRow("Repeat", repeat)

        repeat_mode = ComboBoxAdapter()
        repeat_mode.populate_enum(RepeatMode)
        self._register("repeat_mode", repeat_mode)
        animation_form.addRow("Repeat Type", repeat_mode)

        layout.addWidget(QLabel("<b>Style Controls</b>"))
        style_form = QFormLayout()
        layout.addLayout(style_form)

        label = LineEditAdapter()
        self._register("button_label", label)
        style_form.addRow("Button Label", label)

        icon = ComboBoxAdapter()
        icon.populate_enum(IconId, labels={member: _title(member) for member in IconId})
        self._register("icon_id", icon)
        style_form.addRow("Icon", icon)

        color = ColorButtonAdapter(params.background_color)
        self._register("background_color", color)
        style_form.addRow("Button Color", color)

        for name, row in STYLE_SLIDERS.items():
            self._add_slider(style_form, name, *row)

        glass = CheckBoxAdapter("Glass Mode")
        self._register("glass_mode", glass)
        style_form.addRow(glass)

        layout.addStretch()
        self.sync_from(params)

    def sync_from(self, params: ParameterSet) -> None:
        """Show params in the widgets without emitting parameter_changed."""
        self._syncing = True
        try:
            self.category_tabs.setCurrentIndex(CATEGORY_ORDER.index(params.category))
            combo = self.preset_combos[params.category]
            combo.set_value(params.preset)
            for name, widget in self.widgets.items():
                widget.set_value(getattr(params, name))
            for name in self._value_labels:
                self._update_value_label(name, getattr(params, name))
            self._set_stiffness_visible(params.preset is Preset.SPRING)
        finally:
            self._syncing = False

    def _build_category_tabs(self) -> QTabWidget:
        self.category_tabs = QTabWidget()
        for category in CATEGORY_ORDER:
            combo = ComboBoxAdapter()
            combo.populate_enum(PRESETS_BY_CATEGORY[category], labels={p: _title(p) for p in Preset})
            combo.connect_change_signal(lambda value, c=category: self._on_preset_changed(c, value))
            self.preset_combos[category] = combo
            page = QWidget()
            page_layout = QVBoxLayout(page)
            page_layout.addWidget(combo)
            self.category_tabs.addTab(page, _title(category))
        self.category_tabs.currentChanged.connect(self._on_tab_changed)
        return self.category_tabs

    def _add_slider(self, form: QFormLayout, name: str, title: str, step: float, integral: bool, fmt: str) -> None:
        domain = NUMERIC_DOMAINS[name]
        slider = SliderAdapter(step=step, integral=integral)
        slider.configure_range(domain.minimum, domain.maximum)
        value_label = QLabel()
        self._value_labels[name] = (value_label, title, fmt)
        self._register(name, slider)
        form.addRow(value_label, slider)

    def _register(self, name: str, widget) -> None:
        self.widgets[name] = widget
        widget.connect_change_signal(lambda value, n=name: self._on_widget_changed(n, value))

    def _on_widget_changed(self, name: str, value: Any) -> None:
        if name in self._value_labels:
            self._update_value_label(name, value)
        if self._syncing or value is None:
            return
        self.parameter_changed.emit(name, value)

    def _on_tab_changed(self, index: int) -> None:
        if self._syncing:
            return
        self.parameter_changed.emit("category", CATEGORY_ORDER[index])

    def _on_preset_changed(self, category: Category, value: Any) -> None:
        if self._syncing or value is None:
            return
        if CATEGORY_ORDER[self.category_tabs.currentIndex()] is not category:
            return
        self._set_stiffness_visible(value is Preset.SPRING)
        self.parameter_changed.emit("preset", value)

    def _update_value_label(self, name: str, value: Any) -> None:
        label, title, fmt = self._value_labels[name]
        label.setText(f"{title}: {fmt.format(value)}")

    def _set_stiffness_visible(self, visible: bool) -> None:
        label, _, _ = self._value_labels["spring_stiffness"]
        label.setVisible(visible)
        self.widgets["spring_stiffness"].setVisible(visible)
