# reference/solar.py

from __future__ import annotations

import math

from ..core.angles import horner


def mean_anomaly(T: float) -> float:
    """
    Mean anomaly of the Sun (radians), (25.3) p. 163.

    T is Julian centuries from J2000.0.
    """
    return math.radians(horner(T, 357.52911, 35999.05029, -0.0001537))


def eccentricity(T: float) -> float:
    """
    Eccentricity of the Earth's orbit, (25.4) p. 163.
    """
    return horner(T, 0.016708634, -0.000042037, -0.0000001267)


def mean_longitude(tau: float) -> float:
    """
    Mean longitude of the Sun (radians), (28.2) p. 183.

    tau is Julian millennia from J2000.0. Not wrapped.
    """
    return math.radians(horner(
        tau,
        280.4664567, 360007.6982779, 0.03032028,
        1.0 / 49931, -1.0 / 15300, -1.0 / 2000000,
    ))
