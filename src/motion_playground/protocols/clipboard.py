"""Clipboard provider protocol for the snippet copy action."""

from typing import Protocol, Optional


class ClipboardProvider(Protocol):
    """Protocol for anything that can receive copied snippet text."""

    def set_text(self, text: str) -> None:
        ...


_clipboard_provider: Optional[ClipboardProvider] = None


def register_clipboard_provider(provider: Optional[ClipboardProvider]) -> None:
    """Register a global clipboard provider (None unregisters)."""
    global _clipboard_provider
    _clipboard_provider = provider


def get_clipboard_provider() -> Optional[ClipboardProvider]:
    """Get the registered clipboard provider."""
    return _clipboard_provider
