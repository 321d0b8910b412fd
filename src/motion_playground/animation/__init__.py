"""
Preview animation runtime.

Easing curves, a damped spring model and a keyframe timeline in pure
Python, plus a QTimer frame loop that plays a timeline on the Qt event loop.
"""

from .easing import cubic_bezier, anticipate, linear, resolve_easing
from .spring import SpringModel
from .timeline import Timeline, Track, build_tracks, icon_timeline, split_unit
from .player_config import PlayerConfig, get_player_config
from .player import KeyframePlayer

__all__ = [
    "cubic_bezier",
    "anticipate",
    "linear",
    "resolve_easing",
    "SpringModel",
    "Timeline",
    "Track",
    "build_tracks",
    "icon_timeline",
    "split_unit",
    "PlayerConfig",
    "get_player_config",
    "KeyframePlayer",
]
