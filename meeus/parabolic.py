"""Motion in a parabolic orbit about the Sun."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Gaussian gravitational constant
_K = 0.01720209895


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1 / 3), v)


@dataclass
class Elements:
    """Parabolic elements: time of perihelion (JD) and perihelion distance (AU)."""

    time_p: float
    p_dis: float

    def anomaly_distance(self, jde: float) -> tuple[float, float]:
        """Return (true anomaly in radians, distance in AU) at jde."""
        w = 3 * _K / math.sqrt(2) * (jde - self.time_p) / self.p_dis / math.sqrt(self.p_dis)
        g = w * 0.5
        y = _cbrt(g + math.sqrt(g * g + 1))
        s = y - 1 / y
        nu = 2 * math.atan(s)
        r = self.p_dis * (1 + s * s)
        return nu, r