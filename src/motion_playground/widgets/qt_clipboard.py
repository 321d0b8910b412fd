"""Clipboard provider backed by the application's QClipboard."""

import logging

from PyQt6.QtWidgets import QApplication

logger = logging.getLogger(__name__)


class QtClipboardProvider:
    """Writes copied text to the system clipboard through QGuiApplication."""

    def set_text(self, text: str) -> None:
        clipboard = QApplication.clipboard()
        if clipboard is None:
            raise RuntimeError("No QApplication instance, clipboard unavailable")
        clipboard.setText(text)
