"""
Literal formatting shared by the style composer and the snippet renderer.

Numbers are printed the way a JavaScript runtime prints them, so a float
that holds an integral value renders as ``1`` rather than ``1.0``. Objects
and arrays use compact JSON (no spaces after separators), which keeps the
embedded literals parseable with json.loads.
"""

import json
import math
from decimal import Decimal
from typing import Any, Mapping

# Decimal number as printed by format_number, exponent included
NUMBER_PATTERN = r"-?\d+(?:\.\d+)?(?:e[+-]?\d+)?"

# String(number) switches to exponent notation outside this range
_PLAIN_MIN = 1e-6
_PLAIN_MAX = 1e21


def format_number(value: Any) -> str:
    """Format an int or float the way JavaScript's String(number) does."""
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got bool {value!r}")
    if isinstance(value, int):
        return str(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"Cannot format non-finite number {value!r}")
    if value.is_integer() and abs(value) < _PLAIN_MAX:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if _PLAIN_MIN <= abs(value) < _PLAIN_MAX:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def to_literal_text(value: Any) -> str:
    """Serialize a literal tree (mappings, sequences, strings, numbers) compactly."""
    if isinstance(value, Mapping):
        items = ",".join(f"{json.dumps(str(k), ensure_ascii=False)}:{to_literal_text(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(to_literal_text(v) for v in value) + "]"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return format_number(value)


def to_object_literal(value: Any) -> str:
    """Serialize as a hand-written object literal: bare keys, spaced separators."""
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = ", ".join(f"{k}: {to_object_literal(v)}" for k, v in value.items())
        return "{ " + items + " }"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_object_literal(v) for v in value) + "]"
    return to_literal_text(value)
