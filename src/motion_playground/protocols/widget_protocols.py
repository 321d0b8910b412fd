"""
Widget ABC contracts for the playground input surface.

Every control in the parameter panel implements these so the panel can read,
write and observe values without knowing which Qt widget backs a field.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """ABC for widgets that can return a value."""

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value, already converted to the parameter's type.
        """
        pass


class ValueSettable(ABC):
    """ABC for widgets that can accept a value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to show. Numeric widgets clamp to their range.
        """
        pass


class RangeConfigurable(ABC):
    """
    ABC for widgets that support numeric range configuration.

    The range is how the input surface keeps values inside their domains.
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float) -> None:
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Hides the differences between valueChanged, textChanged,
    currentIndexChanged and friends behind one callback contract.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        Args:
            callback: Called with the new value, signature callback(new_value)
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        pass
