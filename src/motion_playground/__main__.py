"""Entry point: python -m motion_playground."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from motion_playground.protocols import get_playground_config, register_clipboard_provider
from motion_playground.services import PlaygroundController
from motion_playground.widgets import PlaygroundWindow, QtClipboardProvider

logger = logging.getLogger(__name__)


def main() -> int:
    config = get_playground_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = QApplication.instance() or QApplication(sys.argv)
    register_clipboard_provider(QtClipboardProvider())

    window = PlaygroundWindow(PlaygroundController())
    window.resize(1100, 720)
    window.show()
    logger.info("Motion playground started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
