"""
Protocols, provider registries and widget contracts.

ABC-based widget contracts for the input surface, plus the seams through
which the application plugs in its preview renderer, clipboard and
configuration.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    RangeConfigurable,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    SliderAdapter,
    SpinBoxAdapter,
    ComboBoxAdapter,
    LineEditAdapter,
    CheckBoxAdapter,
    ColorButtonAdapter,
    PyQtWidgetMeta,
)
from .playground_config import PlaygroundConfig, set_playground_config, get_playground_config
from .clipboard import ClipboardProvider, register_clipboard_provider, get_clipboard_provider
from .preview_renderer import PreviewRenderer

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "RangeConfigurable",
    "ChangeSignalEmitter",
    "SliderAdapter",
    "SpinBoxAdapter",
    "ComboBoxAdapter",
    "LineEditAdapter",
    "CheckBoxAdapter",
    "ColorButtonAdapter",
    "PyQtWidgetMeta",
    "PlaygroundConfig",
    "set_playground_config",
    "get_playground_config",
    "ClipboardProvider",
    "register_clipboard_provider",
    "get_clipboard_provider",
    "PreviewRenderer",
]
