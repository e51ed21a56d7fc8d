# reference/parabolic.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.angles import K_GAUSS


@dataclass(frozen=True)
class Elements:
    """Parabolic orbit of the Sun (Meeus chapter 34)."""
    time_p: float  # time of perihelion T, JDE
    p_dis: float   # perihelion distance q, AU

    def anomaly_distance(self, jde: float) -> Tuple[float, float]:
        """
        True anomaly ν (radians) and radius vector r (AU) at jde.

        Solves Barker's equation s^3 + 3s - W = 0 for s = tan(ν/2)
        in closed form.
        """
        q = self.p_dis
        W = 3 * K_GAUSS / math.sqrt(2) * (jde - self.time_p) / q / math.sqrt(q)
        G = W * 0.5
        Y = _cbrt(G + math.sqrt(G * G + 1))
        s = Y - 1 / Y
        nu = 2 * math.atan(s)
        r = q * (1 + s * s)
        return nu, r


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)
