"""Engine exceptions."""

from typing import Any


class PlaygroundError(Exception):
    """Base class for configuration engine errors."""


class UnknownPreset(PlaygroundError, KeyError):
    """Raised when a preset name has no entry in the variant catalog."""

    def __init__(self, preset: Any):
        self.preset = preset
        super().__init__(f"Unknown animation preset: {preset!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class OutOfDomainValue(PlaygroundError, ValueError):
    """Raised when a parameter value falls outside its declared domain."""

    def __init__(self, field_name: str, value: Any, domain: str):
        self.field_name = field_name
        self.value = value
        self.domain = domain
        super().__init__(f"{field_name}={value!r} is outside its domain {domain}")


class SnippetParseError(PlaygroundError, ValueError):
    """Raised when snippet text does not have the layout the renderer emits."""
