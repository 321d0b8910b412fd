"""Preview renderer protocol.

The preview renderer receives every configuration the controller derives.
It owns the animated element's lifecycle: when the configuration's
mount_key changes it must tear the element down and mount a fresh one that
starts from the initial keyframe.
"""

from typing import Protocol, runtime_checkable

from motion_playground.core import PlaygroundConfiguration


@runtime_checkable
class PreviewRenderer(Protocol):
    """Consumer of derived configurations."""

    def apply(self, configuration: PlaygroundConfiguration) -> None:
        ...
