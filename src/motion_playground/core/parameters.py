"""
User-editable parameter set for the motion playground.

The ParameterSet is the only mutable state in the engine. It is owned by the
PlaygroundController and changed one field at a time; every change goes
through validate_field(), which enforces the reject policy: a value outside
its declared domain raises OutOfDomainValue and leaves the set untouched.
"""

import logging
import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from .exceptions import OutOfDomainValue, UnknownPreset

logger = logging.getLogger(__name__)


class Category(Enum):
    """Preset groups offered by the category tabs."""
    BASICS = "basics"
    PHYSICS = "physics"
    ADVANCED = "advanced"


class Preset(Enum):
    """Named animation archetypes."""
    FADE = "fade"
    SLIDE = "slide"
    SCALE = "scale"
    ROTATE = "rotate"
    BOUNCE = "bounce"
    FLIP = "flip"
    SPRING = "spring"
    STAGGER = "stagger"
    MORPH = "morph"


class Easing(Enum):
    """Tween easing choices."""
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"
    ANTICIPATE = "anticipate"


class RepeatMode(Enum):
    """How a repeating tween restarts."""
    LOOP = "loop"
    REVERSE = "reverse"
    MIRROR = "mirror"


class IconId(Enum):
    """Icons available for the preview button."""
    BELL = "bell"
    HEART = "heart"
    STAR = "star"
    CAMERA = "camera"
    ZAP = "zap"


PRESETS_BY_CATEGORY: Dict[Category, Tuple[Preset, ...]] = {
    Category.BASICS: (Preset.FADE, Preset.SLIDE, Preset.SCALE, Preset.ROTATE),
    Category.PHYSICS: (Preset.BOUNCE, Preset.SPRING, Preset.FLIP),
    Category.ADVANCED: (Preset.STAGGER, Preset.MORPH),
}

DEFAULT_PRESETS: Dict[Category, Preset] = {
    Category.BASICS: Preset.FADE,
    Category.PHYSICS: Preset.SPRING,
    Category.ADVANCED: Preset.STAGGER,
}

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class NumericDomain:
    """Closed numeric range; maximum None means unbounded above."""

    minimum: float
    maximum: Optional[float] = None
    integral: bool = False

    def contains(self, value: float) -> bool:
        if not self.minimum <= value:
            return False
        return self.maximum is None or value <= self.maximum

    def describe(self) -> str:
        upper = "inf)" if self.maximum is None else f"{self.maximum:g}]"
        kind = "int" if self.integral else "float"
        return f"{kind} [{self.minimum:g}, {upper}"


NUMERIC_DOMAINS: Dict[str, NumericDomain] = {
    "duration": NumericDomain(0.1, 3.0),
    "delay": NumericDomain(0.0, 2.0),
    "repeat_count": NumericDomain(0, None, integral=True),
    "spring_stiffness": NumericDomain(50, 400),
    "border_radius_px": NumericDomain(0, 50, integral=True),
    "blur_px": NumericDomain(0, 30, integral=True),
    "shadow_alpha": NumericDomain(0.0, 0.5),
    "font_size_px": NumericDomain(10, 24, integral=True),
}

ENUM_FIELDS: Dict[str, Type[Enum]] = {
    "category": Category,
    "preset": Preset,
    "easing": Easing,
    "repeat_mode": RepeatMode,
    "icon_id": IconId,
}

# Fields the controller manages itself
READ_ONLY_FIELDS = frozenset({"play_token"})


@dataclass
class ParameterSet:
    """Current playground parameters. Defaults are the session start values."""

    category: Category = Category.BASICS
    # None resolves to the category default
    preset: Optional[Preset] = None
    duration: float = 0.8
    delay: float = 0.0
    easing: Easing = Easing.EASE_IN_OUT
    repeat_count: int = 0
    repeat_mode: RepeatMode = RepeatMode.LOOP
    spring_stiffness: float = 120
    button_label: str = "Click Me"
    icon_id: IconId = IconId.BELL
    background_color: str = "#EFFF4F"
    border_radius_px: int = 20
    blur_px: int = 12
    shadow_alpha: float = 0.2
    font_size_px: int = 16
    glass_mode: bool = False
    play_token: int = 0

    def __post_init__(self):
        # Run every field through the same checks as a change event would
        for f in fields(self):
            if f.name in READ_ONLY_FIELDS:
                continue
            if f.name == "preset" and self.preset is None:
                self.preset = DEFAULT_PRESETS[self.category]
            object.__setattr__(self, f.name, self.validate_field(f.name, getattr(self, f.name)))

    def validate_field(self, name: str, value: Any) -> Any:
        """
        Check a candidate value for a field and return it in canonical form.

        Enum fields accept either the member or its string value. Numeric
        fields reject booleans, NaN and anything outside their domain.

        Raises:
            UnknownPreset: preset name not in the catalog
            OutOfDomainValue: any other domain violation
        """
        if name in ENUM_FIELDS:
            return self._validate_enum(name, value)
        if name in NUMERIC_DOMAINS:
            return self._validate_number(name, value, NUMERIC_DOMAINS[name])
        if name == "background_color":
            if not isinstance(value, str) or not HEX_COLOR_RE.match(value):
                raise OutOfDomainValue(name, value, "hex color #RRGGBB")
            return value
        if name == "button_label":
            if not isinstance(value, str):
                raise OutOfDomainValue(name, value, "str")
            return value
        if name == "glass_mode":
            if not isinstance(value, bool):
                raise OutOfDomainValue(name, value, "bool")
            return value
        if name in READ_ONLY_FIELDS:
            raise OutOfDomainValue(name, value, "read-only")
        raise OutOfDomainValue(name, value, "known parameter name")

    def update_field(self, name: str, value: Any) -> Any:
        """
        Validate and apply a single field change.

        Changing the category always resets the preset to that category's
        default, even when the current preset name also exists there.

        Returns:
            The previous value of the field.
        """
        canonical = self.validate_field(name, value)
        previous = getattr(self, name)
        setattr(self, name, canonical)
        if name == "category":
            self.preset = DEFAULT_PRESETS[canonical]
            logger.debug(f"Category -> {canonical.value}, preset reset to {self.preset.value}")
        return previous

    def advance_play_token(self) -> int:
        self.play_token += 1
        return self.play_token

    def _validate_enum(self, name: str, value: Any) -> Enum:
        enum_type = ENUM_FIELDS[name]
        if isinstance(value, enum_type):
            member = value
        else:
            try:
                member = enum_type(value)
            except ValueError:
                if enum_type is Preset:
                    raise UnknownPreset(value) from None
                allowed = ", ".join(m.value for m in enum_type)
                raise OutOfDomainValue(name, value, f"one of {{{allowed}}}") from None

        if name == "preset":
            valid = PRESETS_BY_CATEGORY[self.category]
            if member not in valid:
                allowed = ", ".join(p.value for p in valid)
                raise OutOfDomainValue(name, member.value, f"{self.category.value} presets {{{allowed}}}")
        return member

    @staticmethod
    def _validate_number(name: str, value: Any, domain: NumericDomain) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise OutOfDomainValue(name, value, domain.describe())
        if domain.integral:
            if isinstance(value, float):
                if not value.is_integer():
                    raise OutOfDomainValue(name, value, domain.describe())
                value = int(value)
        elif isinstance(value, int):
            value = float(value)
        if not domain.contains(value):
            raise OutOfDomainValue(name, value, domain.describe())
        return value
