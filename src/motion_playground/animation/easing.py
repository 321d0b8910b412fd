"""Easing functions for tween timelines."""

import logging
from typing import Callable, Tuple, Union

from motion_playground.core.parameters import Easing
from motion_playground.core.transitions import ANTICIPATE, EASING_CURVES

logger = logging.getLogger(__name__)

EasingFunction = Callable[[float], float]

SUBDIVISION_PRECISION = 1e-7
SUBDIVISION_MAX_ITERATIONS = 24


def linear(p: float) -> float:
    return p


def _bezier(t: float, a1: float, a2: float) -> float:
    return (((1.0 - 3.0 * a2 + 3.0 * a1) * t + (3.0 * a2 - 6.0 * a1)) * t + 3.0 * a1) * t


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """
    Build a CSS-style cubic-bezier easing.

    x(t) is inverted by binary subdivision; the control points keep x
    monotonic on [0, 1] so the search always converges.
    """
    if x1 == y1 and x2 == y2:
        return linear

    def solve_t(x: float) -> float:
        lower, upper = 0.0, 1.0
        t = x
        for _ in range(SUBDIVISION_MAX_ITERATIONS):
            t = lower + (upper - lower) / 2.0
            delta = _bezier(t, x1, x2) - x
            if abs(delta) <= SUBDIVISION_PRECISION:
                break
            if delta > 0:
                upper = t
            else:
                lower = t
        return t

    def ease(p: float) -> float:
        if p <= 0.0:
            return 0.0
        if p >= 1.0:
            return 1.0
        return _bezier(solve_t(p), y1, y2)

    return ease


def reverse_easing(ease: EasingFunction) -> EasingFunction:
    return lambda p: 1.0 - ease(1.0 - p)


back_out = cubic_bezier(0.33, 1.53, 0.69, 0.99)
back_in = reverse_easing(back_out)


def anticipate(p: float) -> float:
    """Pull back first (back-in over the first half), then shoot out exponentially."""
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return 1.0
    p *= 2.0
    if p < 1.0:
        return 0.5 * back_in(p)
    return 0.5 * (2.0 - 2.0 ** (-10.0 * (p - 1.0)))


def resolve_easing(curve: Union[Tuple[float, float, float, float], str]) -> EasingFunction:
    """
    Turn an easing curve value into a function.

    Accepts a 4-tuple of bezier control points, the "anticipate" token, an
    Easing name such as "easeInOut", or "linear".
    """
    if isinstance(curve, (tuple, list)):
        if len(curve) != 4:
            raise ValueError(f"Cubic bezier needs 4 control values, got {len(curve)}")
        return cubic_bezier(*curve)
    if curve == ANTICIPATE:
        return anticipate
    if curve == "linear":
        return linear
    try:
        named = EASING_CURVES[Easing(curve)]
    except ValueError:
        raise ValueError(f"Unknown easing curve: {curve!r}") from None
    return resolve_easing(named)
