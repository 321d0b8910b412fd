"""Damped spring model used to time spring transitions in the preview."""

import math
from dataclasses import dataclass

# Step used when searching for the settling time of non-oscillating springs
_SETTLE_SEARCH_STEP = 1.0 / 240.0
_SETTLE_SEARCH_LIMIT = 20.0


@dataclass(frozen=True)
class SpringModel:
    """
    Mass-spring-damper released from rest at 0 and pulled toward 1.

    Defaults match the motion runtime's spring (mass 1, damping 10), so a
    stiffness of 120 overshoots slightly before settling.
    """

    stiffness: float
    damping: float = 10.0
    mass: float = 1.0
    rest_delta: float = 0.01

    @property
    def natural_frequency(self) -> float:
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self) -> float:
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))

    def progress(self, t: float) -> float:
        """Displacement toward the target at time t (may exceed 1 while overshooting)."""
        if t <= 0.0:
            return 0.0
        w0 = self.natural_frequency
        zeta = self.damping_ratio
        if zeta < 1.0:
            wd = w0 * math.sqrt(1.0 - zeta * zeta)
            envelope = math.exp(-zeta * w0 * t)
            return 1.0 - envelope * (math.cos(wd * t) + (zeta * w0 / wd) * math.sin(wd * t))
        if zeta == 1.0:
            return 1.0 - math.exp(-w0 * t) * (1.0 + w0 * t)
        wh = w0 * math.sqrt(zeta * zeta - 1.0)
        envelope = math.exp(-zeta * w0 * t)
        return 1.0 - envelope * (math.cosh(wh * t) + (zeta * w0 / wh) * math.sinh(wh * t))

    def settling_time(self) -> float:
        """Time after which the displacement stays within rest_delta of the target."""
        w0 = self.natural_frequency
        zeta = self.damping_ratio
        if zeta < 1.0:
            wd = w0 * math.sqrt(1.0 - zeta * zeta)
            amplitude = math.sqrt(1.0 + (zeta * w0 / wd) ** 2)
            return max(0.0, math.log(amplitude / self.rest_delta) / (zeta * w0))
        t = 0.0
        while t < _SETTLE_SEARCH_LIMIT:
            if 1.0 - self.progress(t) < self.rest_delta:
                return t
            t += _SETTLE_SEARCH_STEP
        return _SETTLE_SEARCH_LIMIT
