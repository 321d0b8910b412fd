"""
Main playground window.

Wires the control panel, preview stage and snippet view to one
PlaygroundController. The controller is the only writer of parameters; the
window forwards input events to it and fans configurations back out.
"""

import logging
from typing import Any, Optional

from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QSplitter, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt

from motion_playground.core import OutOfDomainValue, PlaygroundConfiguration, UnknownPreset
from motion_playground.protocols import PreviewRenderer, get_playground_config
from motion_playground.services import PlaygroundController

from .control_panel import ControlPanel
from .preview_stage import PreviewStage
from .snippet_view import SnippetView

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 2000


class PlaygroundWindow(QMainWindow):
    """Controls on the left; preview and generated code on the right."""

    def __init__(self, controller: Optional[PlaygroundController] = None, parent=None):
        super().__init__(parent)
        self.controller = controller or PlaygroundController()
        self.setWindowTitle(get_playground_config().window_title)
        self.setup_ui()
        self.setup_connections()
        # First mount plays immediately
        self._on_configuration(self.controller.configuration)

    def setup_ui(self) -> None:
        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.control_panel = ControlPanel(self.controller.params)
        splitter.addWidget(self.control_panel)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        self.preview_stage: PreviewRenderer = PreviewStage()
        right_layout.addWidget(self.preview_stage)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.play_button = QPushButton("Play Animation")
        buttons.addWidget(self.play_button)
        right_layout.addLayout(buttons)

        self.snippet_view = SnippetView()
        right_layout.addWidget(self.snippet_view)
        splitter.addWidget(right)
        splitter.setStretchFactor(1, 2)

        self.setCentralWidget(splitter)

    def setup_connections(self) -> None:
        self.controller.add_listener(self._on_configuration)
        self.control_panel.parameter_changed.connect(self._on_parameter_changed)
        self.play_button.clicked.connect(lambda: self.controller.play())
        self.snippet_view.copy_requested.connect(self._on_copy_requested)

    def _on_parameter_changed(self, name: str, value: Any) -> None:
        try:
            self.controller.set_parameter(name, value)
        except (OutOfDomainValue, UnknownPreset) as e:
            logger.warning(f"Rejected change to {name}: {e}")
            self.statusBar().showMessage(str(e), STATUS_TIMEOUT_MS * 2)
            self.control_panel.sync_from(self.controller.params)
            return
        if name == "category":
            # Preset was reset to the category default
            self.control_panel.sync_from(self.controller.params)

    def _on_configuration(self, configuration: PlaygroundConfiguration) -> None:
        self.preview_stage.apply(configuration)
        self.snippet_view.set_snippet(self.controller.snippet)

    def _on_copy_requested(self) -> None:
        try:
            self.controller.copy_snippet()
        except RuntimeError as e:
            logger.error(f"Copy failed: {e}")
            self.statusBar().showMessage(f"Copy failed: {e}", STATUS_TIMEOUT_MS)
            return
        self.statusBar().showMessage("Copied to clipboard!", STATUS_TIMEOUT_MS)

    def closeEvent(self, event):
        self.controller.remove_listener(self._on_configuration)
        super().closeEvent(event)
