"""
Derived configuration bundle.

build_configuration() is the only place the four derivations run. The
resulting object is handed unchanged to both the preview renderer and the
snippet renderer, so the two can never disagree.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .color_contrast import contrast_color
from .icon_motion import DEFAULT_ICON_MOTION, DEFAULT_INTERACTION, IconMotion, Interaction
from .parameters import IconId, ParameterSet, Preset
from .style import StyleDescriptor, style_for
from .transitions import TransitionDescriptor, transition_for
from .variants import VariantDescriptor, variants_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaygroundConfiguration:
    """Everything a renderer needs to show one animated button."""

    preset: Preset
    variant: VariantDescriptor
    transition: TransitionDescriptor
    style: StyleDescriptor
    icon_id: IconId
    button_label: str
    play_token: int
    icon_motion: IconMotion = DEFAULT_ICON_MOTION
    interaction: Interaction = DEFAULT_INTERACTION

    @property
    def mount_key(self) -> Tuple[str, int]:
        """Identity of the animated element; a new key means remount."""
        return self.preset.value, self.play_token


def build_configuration(params: ParameterSet) -> PlaygroundConfiguration:
    """Derive variant, transition and style from the current parameters."""
    foreground = contrast_color(params.background_color)
    return PlaygroundConfiguration(
        preset=params.preset,
        variant=variants_for(params.preset),
        transition=transition_for(params),
        style=style_for(params, foreground),
        icon_id=params.icon_id,
        button_label=params.button_label,
        play_token=params.play_token,
    )
