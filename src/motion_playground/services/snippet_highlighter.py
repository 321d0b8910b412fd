"""Pygments rendering of snippet text for the read-only code view."""

import logging
from typing import Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from motion_playground.protocols.playground_config import PlaygroundConfig, get_playground_config

logger = logging.getLogger(__name__)


def get_snippet_lexer(config: Optional[PlaygroundConfig] = None) -> Lexer:
    """
    Resolve the lexer for snippet text.

    Older Pygments releases have no TSX lexer; the configured fallback alias
    is used then.
    """
    config = config or get_playground_config()
    try:
        return get_lexer_by_name(config.snippet_lexer)
    except ClassNotFound:
        logger.warning(f"Pygments lexer '{config.snippet_lexer}' not found, using '{config.fallback_lexer}'")
        return get_lexer_by_name(config.fallback_lexer)


def highlight_snippet(text: str, config: Optional[PlaygroundConfig] = None) -> str:
    """
    Render snippet text as self-contained HTML with inline styles.

    Args:
        text: Snippet text
        config: Playground config (global config if omitted)

    Returns:
        str: HTML fragment suitable for QTextEdit.setHtml()
    """
    config = config or get_playground_config()
    formatter = HtmlFormatter(style=config.highlight_style, noclasses=True)
    return highlight(text, get_snippet_lexer(config), formatter)
