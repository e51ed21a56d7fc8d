# reference/eqtime.py

from __future__ import annotations

import math

from ..core.angles import j2000_century, wrap_pi
from . import nutation
from . import solar


def e_smart(jde: float) -> float:
    """
    Equation of time for jde as an hour angle (radians), Smart's formula
    (28.3) p. 185.

    Less accurate than the full VSOP87 method but needs no planetary
    theory. Positive when apparent solar time is ahead of mean time.
    """
    eps = nutation.mean_obliquity(jde)
    t = math.tan(eps * 0.5)
    y = t * t
    T = j2000_century(jde)
    L0 = solar.mean_longitude(T * 0.1)
    e = solar.eccentricity(T)
    M = solar.mean_anomaly(T)
    s2L0 = math.sin(2 * L0)
    c2L0 = math.cos(2 * L0)
    sM = math.sin(M)
    # double angle identity for sin 4L0
    E = (
        y * s2L0
        - 2 * e * sM
        + 4 * e * y * sM * c2L0
        - y * y * s2L0 * c2L0
        - 1.25 * e * e * math.sin(2 * M)
    )
    return wrap_pi(E)


def e_smart_minutes(jde: float) -> float:
    """Equation of time in minutes of time."""
    return math.degrees(e_smart(jde)) * 4.0
