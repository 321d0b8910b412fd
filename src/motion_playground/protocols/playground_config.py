"""Application-level configuration for the playground.

Provides hooks for embedding applications to customize logging and snippet
presentation without touching the engine.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlaygroundConfig:
    """Base configuration for the playground application.

    Attributes:
        log_level: Level name passed to logging.basicConfig by the entry point
        highlight_style: Pygments style used to color the snippet
        snippet_lexer: Pygments lexer alias for the snippet language
        fallback_lexer: Lexer alias used when snippet_lexer is not installed
        window_title: Title of the main window
        aa_contrast_ratio: WCAG ratio below which a derived text color is logged
    """

    log_level: str = "INFO"
    highlight_style: str = "default"
    snippet_lexer: str = "tsx"
    fallback_lexer: str = "typescript"
    window_title: str = "Motion Playground"
    aa_contrast_ratio: float = 4.5


# Global config instance (set by application)
_playground_config: Optional[PlaygroundConfig] = None


def set_playground_config(config: PlaygroundConfig) -> None:
    """Set the global playground configuration.

    Args:
        config: PlaygroundConfig instance
    """
    global _playground_config
    _playground_config = config


def get_playground_config() -> PlaygroundConfig:
    """Get the current playground configuration.

    Returns:
        Current PlaygroundConfig or default if not set
    """
    if _playground_config is None:
        return PlaygroundConfig()
    return _playground_config
