# reference/nutation.py

from __future__ import annotations

import math
from typing import Tuple

from ..core.angles import arcsec_to_rad, horner, j2000_century


def mean_obliquity(jde: float) -> float:
    """
    Mean obliquity of the ecliptic (radians), Laskar's expression (22.3).

    Good to 0.01" over 1000 years and a few seconds over 10000 years
    around J2000.
    """
    U = j2000_century(jde) * 0.01
    sec = horner(
        U,
        84381.448, -4680.93, -1.55, 1999.25, -51.38, -249.67,
        -39.05, 7.12, 27.87, 5.79, 2.45,
    )
    return arcsec_to_rad(sec)


def nutation(jde: float) -> Tuple[float, float]:
    """
    Nutation in longitude and in obliquity (radians), (Δψ, Δε).

    Low precision terms of Meeus p. 144, accurate to 0.5" in Δψ and 0.1"
    in Δε.
    """
    T = j2000_century(jde)
    Omega = math.radians(horner(T, 125.04452, -1934.136261))
    L = math.radians(horner(T, 280.4665, 36000.7698))
    Lp = math.radians(horner(T, 218.3165, 481267.8813))
    dpsi = (
        -17.20 * math.sin(Omega)
        - 1.32 * math.sin(2 * L)
        - 0.23 * math.sin(2 * Lp)
        + 0.21 * math.sin(2 * Omega)
    )
    deps = (
        9.20 * math.cos(Omega)
        + 0.57 * math.cos(2 * L)
        + 0.10 * math.cos(2 * Lp)
        - 0.09 * math.cos(2 * Omega)
    )
    return arcsec_to_rad(dpsi), arcsec_to_rad(deps)


def true_obliquity(jde: float) -> float:
    """Mean obliquity corrected for nutation, ε = ε0 + Δε (radians)."""
    return mean_obliquity(jde) + nutation(jde)[1]


def nutation_in_ra(jde: float) -> float:
    """
    Nutation in right ascension, Δψ cos ε (radians of hour angle).
    """
    return nutation(jde)[0] * math.cos(true_obliquity(jde))
