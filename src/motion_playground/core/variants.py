"""
Variant catalog: preset -> (initial, animate) keyframe pair.

Keyframe values are either a single target or a tuple of consecutive steps
(bounce animates y through 0, -30, 0). Property names follow the motion
runtime's vocabulary: opacity, x, y, scale, rotate, rotateY, borderRadius.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from .exceptions import UnknownPreset
from .parameters import Preset

logger = logging.getLogger(__name__)

KeyframeValue = Union[float, int, str, Tuple[Any, ...]]


def _freeze(keyframes: Mapping[str, Any]) -> Mapping[str, KeyframeValue]:
    frozen = {}
    for prop, value in keyframes.items():
        frozen[prop] = tuple(value) if isinstance(value, (list, tuple)) else value
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class VariantDescriptor:
    """Start and end keyframes for one preset."""

    initial: Mapping[str, KeyframeValue]
    animate: Mapping[str, KeyframeValue]

    @classmethod
    def from_keyframes(cls, initial: Mapping[str, Any], animate: Mapping[str, Any]) -> "VariantDescriptor":
        """Build a descriptor, turning step lists into tuples."""
        return cls(initial=_freeze(initial), animate=_freeze(animate))

    @property
    def is_empty(self) -> bool:
        return not self.initial and not self.animate


_CATALOG: Dict[Preset, Tuple[Dict[str, Any], Dict[str, Any]]] = {
    Preset.FADE: ({"opacity": 0}, {"opacity": 1}),
    Preset.SLIDE: ({"x": -100, "opacity": 0}, {"x": 0, "opacity": 1}),
    Preset.SCALE: ({"scale": 0.5}, {"scale": 1}),
    Preset.ROTATE: ({"rotate": -90, "opacity": 0}, {"rotate": 0, "opacity": 1}),
    Preset.BOUNCE: ({"y": -100}, {"y": [0, -30, 0]}),
    Preset.FLIP: ({"rotateY": 180, "opacity": 0}, {"rotateY": 0, "opacity": 1}),
    Preset.SPRING: ({"scale": 0.8}, {"scale": 1}),
    # Placeholder preset: no motion defined yet
    Preset.STAGGER: ({}, {}),
    Preset.MORPH: ({"borderRadius": "0%"}, {"borderRadius": "50%"}),
}

VARIANT_CATALOG: Mapping[Preset, VariantDescriptor] = MappingProxyType({
    preset: VariantDescriptor.from_keyframes(initial, animate)
    for preset, (initial, animate) in _CATALOG.items()
})


def variants_for(preset: Union[Preset, str]) -> VariantDescriptor:
    """
    Look up the keyframe pair for a preset.

    Args:
        preset: Preset member or its string value

    Returns:
        VariantDescriptor: Shared immutable descriptor

    Raises:
        UnknownPreset: If the preset has no catalog entry
    """
    if not isinstance(preset, Preset):
        try:
            preset = Preset(preset)
        except ValueError:
            raise UnknownPreset(preset) from None
    try:
        return VARIANT_CATALOG[preset]
    except KeyError:
        raise UnknownPreset(preset) from None
