"""
Qt surfaces of the playground.

Control panel, animated preview stage, highlighted snippet view and the
main window that wires them to a PlaygroundController.
"""

from .qt_clipboard import QtClipboardProvider
from .control_panel import ControlPanel
from .preview_stage import PreviewStage, ICON_GLYPHS
from .snippet_view import SnippetView
from .playground_window import PlaygroundWindow

__all__ = [
    "QtClipboardProvider",
    "ControlPanel",
    "PreviewStage",
    "ICON_GLYPHS",
    "SnippetView",
    "PlaygroundWindow",
]
