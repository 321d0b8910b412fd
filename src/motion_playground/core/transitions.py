"""
Transition builder: preset + timing parameters -> tween or spring descriptor.

The spring descriptor carries duration and delay alongside stiffness. The
motion runtime times a stiffness-driven spring physically, but the values
are still passed through so the snippet reproduces exactly what the preview
was given.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union

from .exceptions import OutOfDomainValue
from .parameters import Easing, ParameterSet, Preset, RepeatMode

logger = logging.getLogger(__name__)

CubicBezier = Tuple[float, float, float, float]
EasingCurve = Union[CubicBezier, str]

ANTICIPATE = "anticipate"

EASING_CURVES: Dict[Easing, EasingCurve] = {
    Easing.EASE_IN: (0.42, 0, 1, 1),
    Easing.EASE_OUT: (0, 0, 0.58, 1),
    Easing.EASE_IN_OUT: (0.42, 0, 0.58, 1),
    Easing.ANTICIPATE: ANTICIPATE,
}


@dataclass(frozen=True)
class TransitionDescriptor(ABC):
    """Common base for the two transition kinds."""

    kind = "base"

    @abstractmethod
    def to_literal(self) -> Dict[str, Any]:
        """
        Literal form embedded in the snippet's transition attribute.

        Returns:
            Mapping with a "type" tag plus the kind's timing fields
        """
        pass


@dataclass(frozen=True)
class Tween(TransitionDescriptor):
    duration: float
    delay: float
    easing_curve: EasingCurve
    repeat_count: int
    repeat_mode: RepeatMode

    kind = "tween"

    def to_literal(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "duration": self.duration,
            "delay": self.delay,
            "ease": list(self.easing_curve) if isinstance(self.easing_curve, tuple) else self.easing_curve,
            "repeat": self.repeat_count,
            "repeatType": self.repeat_mode.value,
        }


@dataclass(frozen=True)
class Spring(TransitionDescriptor):
    stiffness: float
    delay: float
    duration: float

    kind = "spring"

    def to_literal(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "stiffness": self.stiffness,
            "delay": self.delay,
            "duration": self.duration,
        }


def transition_for(params: ParameterSet) -> TransitionDescriptor:
    """Build the transition descriptor for the current parameters."""
    if params.preset is Preset.SPRING:
        return Spring(stiffness=params.spring_stiffness, delay=params.delay, duration=params.duration)
    return Tween(
        duration=params.duration,
        delay=params.delay,
        easing_curve=EASING_CURVES[params.easing],
        repeat_count=params.repeat_count,
        repeat_mode=params.repeat_mode,
    )


def transition_from_literal(literal: Mapping[str, Any]) -> TransitionDescriptor:
    """
    Rebuild a descriptor from its literal form (inverse of to_literal).

    Raises:
        OutOfDomainValue: If the literal's type tag is not tween or spring
    """
    kind = literal.get("type")
    if kind == Spring.kind:
        return Spring(stiffness=literal["stiffness"], delay=literal["delay"], duration=literal["duration"])
    if kind == Tween.kind:
        ease = literal["ease"]
        return Tween(
            duration=literal["duration"],
            delay=literal["delay"],
            easing_curve=tuple(ease) if isinstance(ease, list) else ease,
            repeat_count=literal["repeat"],
            repeat_mode=RepeatMode(literal["repeatType"]),
        )
    raise OutOfDomainValue("transition.type", kind, "tween or spring")
