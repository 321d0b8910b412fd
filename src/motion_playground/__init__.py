"""
motion-playground: interactive animation configurator for PyQt6.

Pick a preset, tune timing and button style, watch the result replay on a
live preview and copy the equivalent declarative component snippet.

Architecture:
- core: Pure-Python engine (parameters, variants, transitions, style, snippet)
- animation: Easing, spring physics and the QTimer keyframe player
- protocols: Widget ABCs, adapters and provider registries
- services: Controller, copy action and snippet highlighting
- theming: StyleDescriptor to QSS translation
- widgets: Control panel, preview stage, snippet view and main window
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
