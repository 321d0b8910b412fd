"""
Preview stage: plays a PlaygroundConfiguration on a Qt graphics scene.

The animated button is a QGraphicsProxyWidget so opacity, offsets, scale
and rotation (including the Y-axis flip) can be applied per frame. A new
mount_key tears the proxy down and mounts a fresh one, which restarts the
motion from the initial keyframe even when the previous run is mid-flight.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QPainter, QTransform
from PyQt6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGraphicsProxyWidget,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
    QGraphicsView,
    QPushButton,
)

from motion_playground.animation import KeyframePlayer, Timeline, icon_timeline
from motion_playground.animation.timeline import Frame
from motion_playground.core import IconId, PlaygroundConfiguration
from motion_playground.theming import PreviewStyleGenerator
from motion_playground.theming.preview_style import SHADOW_BLUR_RADIUS, SHADOW_OFFSET_Y

logger = logging.getLogger(__name__)

STAGE_SIZE = (480, 260)
ICON_INSET = 22
ICON_PADDING_LEFT = 52

ICON_GLYPHS: Mapping[IconId, str] = MappingProxyType({
    IconId.BELL: "\U0001F514",
    IconId.HEART: "♥",
    IconId.STAR: "★",
    IconId.CAMERA: "\U0001F4F7",
    IconId.ZAP: "⚡",
})


class _PreviewButton(QPushButton):
    """Push button reporting hover/press so the stage can apply interaction scales."""

    def __init__(self, stage: "PreviewStage"):
        super().__init__()
        self._stage = stage

    def enterEvent(self, event):
        self._stage.set_interaction_scale(self._stage.configuration.interaction.hover_scale)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self._stage.set_interaction_scale(1.0)
        super().leaveEvent(event)

    def mousePressEvent(self, event):
        self._stage.set_interaction_scale(self._stage.configuration.interaction.tap_scale)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        self._stage.set_interaction_scale(self._stage.configuration.interaction.hover_scale)
        super().mouseReleaseEvent(event)


class PreviewStage(QGraphicsView):
    """Preview renderer backed by QGraphicsScene."""

    def __init__(self, parent=None):
        super().__init__(parent)
        width, height = STAGE_SIZE
        self._scene = QGraphicsScene(QRectF(0, 0, width, height), self)
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setMinimumSize(width, height)

        self.configuration: Optional[PlaygroundConfiguration] = None
        self._mount_key: Optional[Tuple[str, int]] = None
        self._proxy: Optional[QGraphicsProxyWidget] = None
        self._button: Optional[_PreviewButton] = None
        self._icon_item: Optional[QGraphicsSimpleTextItem] = None
        self._player: Optional[KeyframePlayer] = None
        self._icon_player: Optional[KeyframePlayer] = None
        self._styler: Optional[PreviewStyleGenerator] = None
        self._frame: Frame = {}
        self._interaction_scale = 1.0

    @property
    def mount_key(self) -> Optional[Tuple[str, int]]:
        return self._mount_key

    @property
    def player(self) -> Optional[KeyframePlayer]:
        return self._player

    @property
    def button(self) -> Optional[QPushButton]:
        return self._button

    def apply(self, configuration: PlaygroundConfiguration) -> None:
        """Show a configuration; remount only when its mount_key changed."""
        self.configuration = configuration
        if configuration.mount_key != self._mount_key:
            self._remount(configuration)
        else:
            self._restyle(configuration)

    def set_interaction_scale(self, scale: float) -> None:
        self._interaction_scale = scale
        self._apply_frame(self._frame)

    def _unmount(self) -> None:
        for player in (self._player, self._icon_player):
            if player is not None:
                player.stop()
                player.deleteLater()
        self._player = self._icon_player = None
        if self._proxy is not None:
            self._scene.removeItem(self._proxy)
            self._proxy.deleteLater()
        self._proxy = self._button = self._icon_item = None

    def _remount(self, configuration: PlaygroundConfiguration) -> None:
        logger.debug(f"Remounting preview for key {configuration.mount_key}")
        self._unmount()
        self._mount_key = configuration.mount_key
        self._frame = {}
        self._interaction_scale = 1.0

        self._button = _PreviewButton(self)
        self._proxy = self._scene.addWidget(self._button)
        self._icon_item = QGraphicsSimpleTextItem(self._proxy)
        shadow = QGraphicsDropShadowEffect()
        shadow.setOffset(0, SHADOW_OFFSET_Y)
        shadow.setBlurRadius(SHADOW_BLUR_RADIUS)
        self._proxy.setGraphicsEffect(shadow)
        self._restyle(configuration)

        self._player = KeyframePlayer(Timeline(configuration.variant, configuration.transition), parent=self)
        self._player.frame.connect(self._apply_frame)
        self._icon_player = KeyframePlayer(icon_timeline(configuration.icon_motion), parent=self)
        self._icon_player.frame.connect(self._apply_icon_frame)
        self._player.start()
        self._icon_player.start()

    def _restyle(self, configuration: PlaygroundConfiguration) -> None:
        style = configuration.style
        if self._styler is None:
            self._styler = PreviewStyleGenerator(style)
        else:
            self._styler.update_style(style)

        self._button.setText(configuration.button_label)
        self._icon_item.setText(ICON_GLYPHS[configuration.icon_id])
        self._icon_item.setBrush(QColor(style.color))
        font = self._icon_item.font()
        font.setPixelSize(style.font_size_px + 2)
        self._icon_item.setFont(font)
        self._proxy.graphicsEffect().setColor(self._styler.shadow_color())
        self._apply_button_style()
        self._button.adjustSize()
        self._apply_frame(self._frame)

    def _apply_button_style(self) -> None:
        height = max(self._button.sizeHint().height(), 1)
        qss = self._styler.generate_button_style(self._frame.get("borderRadius"), height)
        self._button.setStyleSheet(qss + f"QPushButton {{ padding-left: {ICON_PADDING_LEFT}px; }}")

    def _apply_frame(self, frame: Frame) -> None:
        self._frame = dict(frame)
        if self._proxy is None:
            return
        proxy = self._proxy
        size = proxy.size()
        width, height = STAGE_SIZE
        base = QPointF((width - size.width()) / 2.0, (height - size.height()) / 2.0)
        center = QPointF(size.width() / 2.0, size.height() / 2.0)

        proxy.setOpacity(float(frame.get("opacity", 1.0)))
        proxy.setPos(base + QPointF(float(frame.get("x", 0.0)), float(frame.get("y", 0.0))))
        proxy.setTransformOriginPoint(center)
        proxy.setScale(float(frame.get("scale", 1.0)) * self._interaction_scale)
        proxy.setRotation(float(frame.get("rotate", 0.0)))

        flip = QTransform()
        flip.translate(center.x(), center.y())
        flip.rotate(float(frame.get("rotateY", 0.0)), Qt.Axis.YAxis)
        flip.translate(-center.x(), -center.y())
        proxy.setTransform(flip)

        if "borderRadius" in frame:
            self._apply_button_style()

        if self._icon_item is not None:
            icon_box = self._icon_item.boundingRect()
            self._icon_item.setPos(ICON_INSET - icon_box.width() / 2.0, (size.height() - icon_box.height()) / 2.0)

    def _apply_icon_frame(self, frame: Frame) -> None:
        if self._icon_item is None:
            return
        self._icon_item.setTransformOriginPoint(self._icon_item.boundingRect().center())
        self._icon_item.setRotation(float(frame.get("rotate", 0.0)))
