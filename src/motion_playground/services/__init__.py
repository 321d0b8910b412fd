"""
Service layer.

The controller that owns the session's parameters, plus the copy and
syntax-highlighting services used by the snippet view.
"""

from .copy_service import copy_to_clipboard
from .snippet_highlighter import get_snippet_lexer, highlight_snippet
from .playground_controller import PlaygroundController, ParameterChangeEvent, ConfigurationListener

__all__ = [
    "copy_to_clipboard",
    "get_snippet_lexer",
    "highlight_snippet",
    "PlaygroundController",
    "ParameterChangeEvent",
    "ConfigurationListener",
]
