"""Fixed motion of the button icon and the hover/tap interaction scales."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .parameters import IconId


@dataclass(frozen=True)
class IconMotion:
    """Wiggle played once by the icon whenever the button mounts."""

    rotate_keyframes: Tuple[float, ...] = (0, -20, 20, -15, 15, -10, 10, -5, 5, 0)
    duration: float = 1.5
    ease: str = "easeInOut"
    repeat: int = 0

    def initial(self) -> Dict[str, Any]:
        return {"rotate": self.rotate_keyframes[0]}

    def animate(self) -> Dict[str, Any]:
        return {"rotate": list(self.rotate_keyframes)}

    def transition(self) -> Dict[str, Any]:
        return {"duration": self.duration, "ease": self.ease, "repeat": self.repeat}


@dataclass(frozen=True)
class Interaction:
    """Scale applied by the wrapper while hovered or pressed."""

    hover_scale: float = 1.05
    tap_scale: float = 0.97

    def while_hover(self) -> Dict[str, Any]:
        return {"scale": self.hover_scale}

    def while_tap(self) -> Dict[str, Any]:
        return {"scale": self.tap_scale}


# Component names exported by the icon library, one per icon choice
ICON_COMPONENTS: Mapping[IconId, str] = MappingProxyType({
    IconId.BELL: "Bell",
    IconId.HEART: "Heart",
    IconId.STAR: "Star",
    IconId.CAMERA: "Camera",
    IconId.ZAP: "Zap",
})

ICON_CLASS_NAME = "w-5 h-5"
DEFAULT_ICON_MOTION = IconMotion()
DEFAULT_INTERACTION = Interaction()
