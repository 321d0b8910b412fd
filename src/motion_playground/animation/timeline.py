"""
Keyframe timeline: samples a variant + transition at an elapsed time.

A tween splits a multi-step keyframe into equal-duration segments and
applies the easing to each segment. Repeats restart (loop), play backwards
in time (reverse) or swap the keyframe order (mirror) on odd iterations.
A spring drives two-keyframe tracks by the spring's displacement and is
finished once the spring settles.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from motion_playground.core.literals import NUMBER_PATTERN, format_number
from motion_playground.core.parameters import RepeatMode
from motion_playground.core.transitions import Spring, TransitionDescriptor, Tween
from motion_playground.core.variants import VariantDescriptor

from .easing import EasingFunction, resolve_easing
from .spring import SpringModel

logger = logging.getLogger(__name__)

Frame = Dict[str, Any]

_UNIT_VALUE_RE = re.compile(rf"^({NUMBER_PATTERN})([a-z%]*)$")

# Resting value of a property that the initial keyframe leaves out
_PROPERTY_DEFAULTS: Dict[str, float] = {"opacity": 1.0, "scale": 1.0}

# Multi-step keyframes cannot be driven by a two-point spring
_SPRING_KEYFRAME_EASE = "easeInOut"


def split_unit(value: Any) -> Tuple[float, str]:
    """Split 50 -> (50.0, "") and "50%" -> (50.0, "%")."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value), ""
    match = _UNIT_VALUE_RE.match(str(value))
    if not match:
        raise ValueError(f"Cannot interpolate keyframe value {value!r}")
    return float(match.group(1)), match.group(2)


@dataclass(frozen=True)
class Track:
    """Numeric keyframes for one property."""

    prop: str
    keyframes: Tuple[float, ...]
    unit: str = ""

    def value_at(self, fraction: float, ease: EasingFunction) -> float:
        """Interpolate across equal-duration segments, easing each segment."""
        count = len(self.keyframes)
        if count == 1:
            return self.keyframes[0]
        segments = count - 1
        position = min(max(fraction, 0.0), 1.0) * segments
        index = min(int(position), segments - 1)
        local = position - index
        start, end = self.keyframes[index], self.keyframes[index + 1]
        return start + (end - start) * ease(local)

    def reversed(self) -> "Track":
        return Track(self.prop, tuple(reversed(self.keyframes)), self.unit)

    def render(self, value: float) -> Any:
        if self.unit:
            return f"{format_number(round(value, 4))}{self.unit}"
        return value


def build_tracks(variant: VariantDescriptor) -> List[Track]:
    tracks = []
    for prop, target in variant.animate.items():
        if isinstance(target, tuple):
            steps = [split_unit(v) for v in target]
        else:
            start = variant.initial.get(prop, _PROPERTY_DEFAULTS.get(prop, 0.0))
            steps = [split_unit(start), split_unit(target)]
        unit = next((u for _, u in steps if u), "")
        tracks.append(Track(prop, tuple(v for v, _ in steps), unit))
    return tracks


class Timeline:
    """Time-sampled view of one configuration's motion."""

    def __init__(self, variant: VariantDescriptor, transition: TransitionDescriptor):
        self.variant = variant
        self.transition = transition
        self.tracks = build_tracks(variant)
        self.delay = float(transition.delay)
        self._spring: Optional[SpringModel] = None

        if isinstance(transition, Spring):
            self._spring = SpringModel(stiffness=float(transition.stiffness))
            self.iteration_duration = float(transition.duration)
            self.iterations = 1
            self.repeat_mode = RepeatMode.LOOP
            self.ease = resolve_easing(_SPRING_KEYFRAME_EASE)
        elif isinstance(transition, Tween):
            self.iteration_duration = float(transition.duration)
            self.iterations = transition.repeat_count + 1
            self.repeat_mode = transition.repeat_mode
            self.ease = resolve_easing(transition.easing_curve)
        else:
            raise TypeError(f"Unsupported transition descriptor: {type(transition).__name__}")

    @property
    def active_duration(self) -> float:
        if self._spring is not None and all(len(t.keyframes) == 2 for t in self.tracks):
            return self._spring.settling_time()
        return self.iteration_duration * self.iterations

    @property
    def total_duration(self) -> float:
        return self.delay + self.active_duration

    def initial_frame(self) -> Frame:
        """Values shown before the animation starts (during the delay)."""
        frame: Frame = dict(self.variant.initial)
        for track in self.tracks:
            frame.setdefault(track.prop, track.render(track.keyframes[0]))
        return frame

    def is_finished(self, elapsed: float) -> bool:
        return elapsed >= self.total_duration

    def sample(self, elapsed: float) -> Frame:
        """Frame of property values at elapsed seconds since mount."""
        if elapsed < self.delay:
            return self.initial_frame()
        t = elapsed - self.delay
        if self._spring is not None:
            return self._sample_spring(t)
        return self._sample_tween(t)

    def _sample_tween(self, t: float) -> Frame:
        duration = self.iteration_duration
        iteration = math.floor(t / duration) if duration > 0 else self.iterations
        if iteration >= self.iterations:
            iteration = self.iterations - 1
            fraction = 1.0
        else:
            fraction = (t - iteration * duration) / duration

        odd = iteration % 2 == 1
        frame: Frame = {}
        for track in self.tracks:
            current = track
            local = fraction
            if odd and self.repeat_mode is RepeatMode.REVERSE:
                local = 1.0 - fraction
            elif odd and self.repeat_mode is RepeatMode.MIRROR:
                current = track.reversed()
            frame[track.prop] = track.render(current.value_at(local, self.ease))
        return frame

    def _sample_spring(self, t: float) -> Frame:
        spring = self._spring
        settled = t >= self.active_duration
        frame: Frame = {}
        for track in self.tracks:
            if len(track.keyframes) != 2:
                fraction = 1.0 if self.iteration_duration <= 0 else min(t / self.iteration_duration, 1.0)
                value = track.value_at(fraction, self.ease)
            else:
                start, end = track.keyframes
                progress = 1.0 if settled else spring.progress(t)
                value = start + (end - start) * progress
            frame[track.prop] = track.render(value)
        return frame


def icon_timeline(icon_motion) -> Timeline:
    """Timeline of the icon wiggle (an IconMotion)."""
    variant = VariantDescriptor.from_keyframes(icon_motion.initial(), icon_motion.animate())
    transition = Tween(
        duration=icon_motion.duration,
        delay=0.0,
        easing_curve=icon_motion.ease,
        repeat_count=icon_motion.repeat,
        repeat_mode=RepeatMode.LOOP,
    )
    return Timeline(variant, transition)
