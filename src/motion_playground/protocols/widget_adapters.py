"""
Widget adapters that wrap Qt widgets to implement the playground ABCs.

Normalizes Qt's inconsistent APIs:
- QSlider.value() is an int step index, the parameter is a float
- QComboBox.currentData() vs QLineEdit.text() vs QCheckBox.isChecked()
- valueChanged vs textChanged vs currentIndexChanged vs stateChanged

All adapters expose get_value() / set_value() / connect_change_signal().
"""

import logging
from abc import ABCMeta
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QCheckBox, QColorDialog, QComboBox, QLineEdit, QPushButton, QSlider, QSpinBox

from .widget_protocols import ChangeSignalEmitter, RangeConfigurable, ValueGettable, ValueSettable

logger = logging.getLogger(__name__)

# Order matters: Qt's metaclass first so sip can build the type, ABCMeta for abstract checks
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


def _decimals_for(step: float) -> int:
    text = f"{step:g}"
    return len(text.split(".", 1)[1]) if "." in text else 0


class _SignalBinding:
    """Keeps the wrapper slot per callback so disconnect removes the right one."""

    def _bind(self, signal, callback: Callable[[Any], None]) -> None:
        slots: Dict[Callable, Callable] = self.__dict__.setdefault("_bound_slots", {})
        slot = lambda *_: callback(self.get_value())
        slots[callback] = slot
        signal.connect(slot)

    def _unbind(self, signal, callback: Callable[[Any], None]) -> None:
        slot = self.__dict__.get("_bound_slots", {}).pop(callback, None)
        if slot is None:
            return
        try:
            signal.disconnect(slot)
        except TypeError:
            # Signal not connected - ignore
            pass


class SliderAdapter(QSlider, _SignalBinding, ValueGettable, ValueSettable, RangeConfigurable,
                    ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Horizontal slider over a stepped numeric range.

    The Qt slider works on integer step indices; the adapter maps them to
    minimum + index * step, rounded to the step's precision so a 0.1 step
    yields 0.8 and not 0.8000000000000002.
    """

    def __init__(self, step: float = 1.0, integral: bool = False, parent=None):
        super().__init__(Qt.Orientation.Horizontal, parent)
        self._minimum = 0.0
        self._step = step
        self._integral = integral
        self._decimals = _decimals_for(step)

    def configure_range(self, minimum: float, maximum: float) -> None:
        self._minimum = minimum
        steps = int(round((maximum - minimum) / self._step))
        self.setRange(0, steps)
        self.setSingleStep(1)
        self.setPageStep(max(1, steps // 10))

    def get_value(self) -> Any:
        value = round(self._minimum + self.value() * self._step, self._decimals)
        return int(value) if self._integral else float(value)

    def set_value(self, value: Any) -> None:
        # QSlider clamps out-of-range indices
        self.setValue(int(round((float(value) - self._minimum) / self._step)))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.valueChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.valueChanged, callback)


class SpinBoxAdapter(QSpinBox, _SignalBinding, ValueGettable, ValueSettable, RangeConfigurable,
                     ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Integer spin box (repeat count)."""

    def get_value(self) -> Any:
        return self.value()

    def set_value(self, value: Any) -> None:
        self.setValue(int(value))

    def configure_range(self, minimum: float, maximum: float) -> None:
        self.setRange(int(minimum), int(maximum))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.valueChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.valueChanged, callback)


class ComboBoxAdapter(QComboBox, _SignalBinding, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Combo box storing enum members in itemData.

    Display text comes from an optional label mapping, else the enum value.
    """

    def populate_enum(self, members, labels: Optional[Mapping[Enum, str]] = None) -> None:
        """
        Populate with enum members.

        Args:
            members: Enum class or iterable of members to offer
            labels: Optional display text per member
        """
        self.clear()
        for member in members:
            if not isinstance(member, Enum):
                raise TypeError(f"{member!r} is not an Enum member")
            text = labels.get(member, member.value) if labels else member.value
            self.addItem(text, member)

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not offered - clear selection
        self.setCurrentIndex(-1)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.currentIndexChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.currentIndexChanged, callback)


class LineEditAdapter(QLineEdit, _SignalBinding, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Line edit returning its text verbatim; an empty label is a valid label."""

    def get_value(self) -> Any:
        return self.text()

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.textChanged, callback)


class CheckBoxAdapter(QCheckBox, _SignalBinding, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Check box returning bool values."""

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.toggled, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.toggled, callback)


class ColorButtonAdapter(QPushButton, _SignalBinding, ValueGettable, ValueSettable,
                         ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Push button showing a color swatch; clicking opens QColorDialog.

    Values are #RRGGBB strings.
    """

    color_changed = pyqtSignal(str)

    def __init__(self, color: str = "#000000", parent=None):
        super().__init__(parent)
        self._color = color
        self._refresh_swatch()
        self.clicked.connect(self._pick_color)

    def get_value(self) -> Any:
        return self._color

    def set_value(self, value: Any) -> None:
        if value == self._color:
            return
        self._color = str(value)
        self._refresh_swatch()
        self.color_changed.emit(self._color)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._bind(self.color_changed, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._unbind(self.color_changed, callback)

    def _pick_color(self) -> None:
        chosen = QColorDialog.getColor(QColor(self._color), self, "Button Color")
        if chosen.isValid():
            self.set_value(chosen.name())

    def _refresh_swatch(self) -> None:
        self.setText(self._color.upper())
        self.setStyleSheet(f"background-color: {self._color}; border-radius: 4px; padding: 4px;")
