"""Copy action: hands snippet text to the registered clipboard provider."""

import logging

from motion_playground.protocols.clipboard import ClipboardProvider, get_clipboard_provider

logger = logging.getLogger(__name__)


def _require_provider() -> ClipboardProvider:
    provider = get_clipboard_provider()
    if provider is None:
        raise RuntimeError("No clipboard provider registered. Call register_clipboard_provider(...).")
    return provider


def copy_to_clipboard(text: str) -> None:
    """Copy text verbatim."""
    provider = _require_provider()
    provider.set_text(text)
    logger.info(f"Copied {len(text)} characters to clipboard")
