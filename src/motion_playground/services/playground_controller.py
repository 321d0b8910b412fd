"""
Playground controller.

Owns the session's ParameterSet and is its only writer. Each input event is
handled to completion: validate, mutate, derive one PlaygroundConfiguration,
notify listeners. The snippet is rendered from that same configuration
object, so the preview and the copied text always describe one animation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from motion_playground.core import (
    Category,
    ParameterSet,
    PlaygroundConfiguration,
    build_configuration,
    contrast_color,
    contrast_ratio,
    render_snippet,
)
from motion_playground.protocols.playground_config import get_playground_config
from motion_playground.services.copy_service import copy_to_clipboard

logger = logging.getLogger(__name__)

ConfigurationListener = Callable[[PlaygroundConfiguration], None]


@dataclass(frozen=True)
class ParameterChangeEvent:
    """Record of one applied parameter change."""
    field_name: str
    value: Any
    previous: Any


class PlaygroundController:
    """Single writer of the ParameterSet; fans configurations out to listeners."""

    def __init__(self, params: Optional[ParameterSet] = None):
        self._params = params if params is not None else ParameterSet()
        self._listeners: List[ConfigurationListener] = []
        self._dispatching = False
        self._last_event: Optional[ParameterChangeEvent] = None
        self._configuration = build_configuration(self._params)
        self._snippet: Optional[str] = None

    @property
    def params(self) -> ParameterSet:
        """Current parameters. Treat as read-only; mutate through set_parameter()."""
        return self._params

    @property
    def configuration(self) -> PlaygroundConfiguration:
        return self._configuration

    @property
    def last_event(self) -> Optional[ParameterChangeEvent]:
        return self._last_event

    @property
    def snippet(self) -> str:
        """Snippet text for the current configuration, rendered on first access."""
        if self._snippet is None:
            self._snippet = render_snippet(self._configuration)
        return self._snippet

    def add_listener(self, listener: ConfigurationListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ConfigurationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_parameter(self, name: str, value: Any) -> PlaygroundConfiguration:
        """
        Apply one input-surface change event.

        Args:
            name: ParameterSet field name
            value: New value, already clamped by the input surface

        Returns:
            The recomputed configuration

        Raises:
            OutOfDomainValue: Value rejected; parameters unchanged
            UnknownPreset: Preset name not in the catalog; parameters unchanged
        """
        self._guard_reentrancy(name)
        previous = self._params.update_field(name, value)
        event = ParameterChangeEvent(field_name=name, value=getattr(self._params, name), previous=previous)
        self._last_event = event
        logger.debug(f"Parameter change: {name} = {event.value!r} (was {previous!r})")
        if name == "background_color":
            self._check_contrast()
        return self._recompute()

    def set_category(self, category: Union[Category, str]) -> PlaygroundConfiguration:
        """Switch category; the preset always resets to the category default."""
        return self.set_parameter("category", category)

    def play(self) -> PlaygroundConfiguration:
        """Request a replay: bump the play token, leave every other field alone."""
        self._guard_reentrancy("play_token")
        token = self._params.advance_play_token()
        logger.debug(f"Play requested, token={token}")
        return self._recompute()

    def copy_snippet(self) -> str:
        """Copy the current snippet through the clipboard provider and return it."""
        text = self.snippet
        copy_to_clipboard(text)
        return text

    def _guard_reentrancy(self, name: str) -> None:
        if self._dispatching:
            raise RuntimeError(f"Parameter change '{name}' issued while listeners are being notified")

    def _check_contrast(self) -> None:
        background = self._params.background_color
        foreground = contrast_color(background)
        ratio = contrast_ratio(foreground, background)
        threshold = get_playground_config().aa_contrast_ratio
        if ratio < threshold:
            logger.warning(
                f"Derived text color {foreground} on {background} has contrast {ratio:.2f}:1 "
                f"(below {threshold}:1)"
            )

    def _recompute(self) -> PlaygroundConfiguration:
        self._configuration = build_configuration(self._params)
        self._snippet = None
        self._dispatching = True
        try:
            for listener in list(self._listeners):
                listener(self._configuration)
        finally:
            self._dispatching = False
        return self._configuration
