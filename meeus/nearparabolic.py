"""Motion in near-parabolic orbits about the Sun."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Gaussian gravitational constant
_K = 0.01720209895


class NoConvergenceError(ArithmeticError):
    """The near-parabolic solution failed to converge."""


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1 / 3), v)


@dataclass
class Elements:
    """Near-parabolic elements: time of perihelion, perihelion distance, eccentricity."""

    time_p: float
    p_dis: float
    ecc: float

    def anomaly_distance(self, jde: float) -> tuple[float, float]:
        """Return (true anomaly in radians, distance in AU) at jde.

        Raises NoConvergenceError when the method fails to converge.
        """
        q, ecc = self.p_dis, self.ecc
        q1 = _K * math.sqrt((1 + ecc) / q) / (2 * q)
        g = (1 - ecc) / (1 + ecc)
        t = jde - self.time_p
        if t == 0:
            return 0.0, q
        d1, d = 10000.0, 1e-9
        q2 = q1 * t
        s = 2.0 / (3 * abs(q2))
        s = 2 / math.tan(2 * math.atan(_cbrt(math.tan(math.atan(s) / 2))))
        if t < 0:
            s = -s
        if ecc != 1:
            outer = 0
            while True:
                s0 = s
                z = 1.0
                y = s * s
                g1 = -y * s
                q3 = q2 + 2 * g * s * y / 3
                while True:
                    z += 1
                    g1 = -g1 * g * y
                    z1 = (z - (z + 1) * g) / (2 * z + 1)
                    f = z1 * g1
                    q3 += f
                    if z > 50 or abs(f) > d1:
                        raise NoConvergenceError("No convergence")
                    if abs(f) <= d:
                        break
                outer += 1
                if outer > 50:
                    raise NoConvergenceError("No convergence")
                while True:
                    s1 = s
                    s = (2 * s * s * s / 3 + q3) / (s * s + 1)
                    if abs(s - s1) <= d:
                        break
                if abs(s - s0) <= d:
                    break
        nu = 2 * math.atan(s)
        r = q * (1 + ecc) / (1 + ecc * math.cos(nu))
        if nu < 0:
            nu += 2 * math.pi
        return nu, r