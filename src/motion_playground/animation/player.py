"""QTimer-driven playback of a Timeline."""

import logging
import time
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .player_config import PlayerConfig, get_player_config
from .timeline import Frame, Timeline

logger = logging.getLogger(__name__)


class KeyframePlayer(QObject):
    """
    Samples a timeline once per frame and emits the values.

    The player never outlives its mount: the preview stops it when the
    animated element is torn down, which is the only cancellation path.

    Usage:
        player = KeyframePlayer(timeline)
        player.frame.connect(apply_frame)
        player.start()
    """

    frame = pyqtSignal(object)
    finished = pyqtSignal()

    def __init__(self, timeline: Timeline, config: Optional[PlayerConfig] = None,
                 clock: Callable[[], float] = time.monotonic, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.timeline = timeline
        self._config = config or get_player_config()
        self._clock = clock
        self._started_at: Optional[float] = None
        self._timer = QTimer(self)
        self._timer.setInterval(self._config.frame_ms)
        self._timer.timeout.connect(self._tick)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Emit the initial frame and begin ticking."""
        self._started_at = self._clock()
        self.frame.emit(self.timeline.initial_frame())
        self._timer.start()
        logger.debug(f"Player started, total duration {self.timeline.total_duration:.3f}s")

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            logger.debug("Player stopped")

    def sample_now(self) -> Frame:
        if self._started_at is None:
            return self.timeline.initial_frame()
        return self.timeline.sample(self._clock() - self._started_at)

    def _tick(self) -> None:
        elapsed = self._clock() - self._started_at
        self.frame.emit(self.timeline.sample(elapsed))
        if self.timeline.is_finished(elapsed):
            self._timer.stop()
            self.finished.emit()
