"""Declarative configuration for the preview frame loop."""

from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)

FALLBACK_FPS = 60


def detect_screen_refresh_rate() -> int:
    """Detect primary screen refresh rate.

    Returns:
        Detected refresh rate (Hz), or 60 if detection fails.
    """
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        logger.warning("[PlayerConfig] No QApplication instance, defaulting to 60Hz")
        return FALLBACK_FPS

    screen = app.primaryScreen()
    if screen is None:
        logger.warning("[PlayerConfig] No primary screen found, defaulting to 60Hz")
        return FALLBACK_FPS

    refresh_rate = screen.refreshRate()

    # Typical refresh rates are 60, 75, 120, 144, 165, 240
    if refresh_rate < 30 or refresh_rate > 500:
        logger.warning(f"[PlayerConfig] Unusual refresh rate detected: {refresh_rate}Hz, defaulting to 60Hz")
        return FALLBACK_FPS

    logger.info(f"[PlayerConfig] Detected screen refresh rate: {refresh_rate}Hz")
    return int(refresh_rate)


@dataclass
class PlayerConfig:
    """Frame loop tuning knobs with automatic screen refresh rate detection."""

    # Auto-calculated from target_fps if not specified
    frame_ms: Optional[int] = None

    # None = match the screen refresh rate
    target_fps: Optional[int] = None

    # Cap even if the screen supports more; None = no cap
    max_fps: Optional[int] = 60

    def __post_init__(self):
        """Calculate frame_ms from target_fps or the detected refresh rate."""
        if self.frame_ms is not None:
            return

        fps = self.target_fps
        if fps is None:
            fps = detect_screen_refresh_rate()

        if self.max_fps is not None and fps > self.max_fps:
            logger.info(f"[PlayerConfig] Capping FPS from {fps} to {self.max_fps} (max_fps limit)")
            fps = self.max_fps

        self.frame_ms = int(1000 / fps)
        logger.info(f"[PlayerConfig] Using {fps}Hz ({self.frame_ms}ms frame interval) for preview playback")


_config: Optional[PlayerConfig] = None


def get_player_config() -> PlayerConfig:
    """Return singleton player config."""
    global _config
    if _config is None:
        _config = PlayerConfig()
    return _config
