"""pytest configuration and fixtures for motion-playground tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from motion_playground.animation import PlayerConfig
from motion_playground.protocols import register_clipboard_provider


class FakeClipboard:
    """Clipboard provider that records the last copied text."""

    def __init__(self):
        self.text = None

    def set_text(self, text: str) -> None:
        self.text = text


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def clipboard():
    """Register a FakeClipboard for the duration of a test."""
    fake = FakeClipboard()
    register_clipboard_provider(fake)
    yield fake
    register_clipboard_provider(None)


@pytest.fixture
def player_config():
    """Fixed 60Hz frame loop, independent of the test machine's screen."""
    return PlayerConfig(frame_ms=16)
