"""Read-only, syntax-highlighted view of the generated snippet."""

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QTextEdit, QVBoxLayout, QWidget

from motion_playground.services import highlight_snippet

logger = logging.getLogger(__name__)


class SnippetView(QWidget):
    """
    Shows snippet text highlighted by Pygments, with a Copy button.

    The plain text is kept alongside the HTML so tests and the copy action
    never have to read it back out of the document.
    """

    copy_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._text = ""

        layout = QVBoxLayout(self)
        header = QHBoxLayout()
        header.addWidget(QLabel("<b>Generated Code</b>"))
        header.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(lambda: self.copy_requested.emit())
        header.addWidget(self.copy_button)
        layout.addLayout(header)

        self.editor = QTextEdit()
        self.editor.setReadOnly(True)
        self.editor.setLineWrapMode(QTextEdit.LineWrapMode.NoWrap)
        font = QFont("monospace")
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.editor.setFont(font)
        layout.addWidget(self.editor)

    @property
    def text(self) -> str:
        return self._text

    def set_snippet(self, text: str) -> None:
        if text == self._text:
            return
        self._text = text
        self.editor.setHtml(highlight_snippet(text))
