from __future__ import annotations

import math
from typing import Tuple


# ------------------------------------------------------------
# Constants
# ------------------------------------------------------------

TAU = 2.0 * math.pi

J2000 = 2451545.0  # JD(TT) at J2000.0
JULIAN_CENTURY = 36525.0
K_GAUSS = 0.01720209895  # Gaussian gravitational constant

SECONDS_PER_DAY = 86400.0


# ------------------------------------------------------------
# Polynomials
# ------------------------------------------------------------

def horner(x: float, *coeffs: float) -> float:
    """
    Evaluate c0 + c1*x + c2*x^2 + ... by Horner's method.

    Coefficients are given constant term first.
    """
    if not coeffs:
        return 0.0
    y = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        y = y * x + c
    return y


def j2000_century(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / JULIAN_CENTURY


# ------------------------------------------------------------
# Angles (radians throughout)
# ------------------------------------------------------------

def sincos(a: float) -> Tuple[float, float]:
    return math.sin(a), math.cos(a)


def wrap_rad(a: float) -> float:
    """Wrap radians to [0, 2pi)."""
    y = math.fmod(a, TAU)
    if y < 0:
        y += TAU
    # fmod of a tiny negative can round up to exactly TAU
    if y >= TAU:
        y = 0.0
    return y


def wrap_pi(a: float) -> float:
    """Wrap radians to [-pi, pi)."""
    return wrap_rad(a + math.pi) - math.pi


def dms_to_rad(d: float, m: float = 0.0, s: float = 0.0, *, negative: bool = False) -> float:
    """
    Degrees, minutes, seconds of arc to radians.

    Components are taken as magnitudes; the sign comes from `negative`
    (so -0° 30' can be written).
    """
    deg = abs(d) + abs(m) / 60.0 + abs(s) / 3600.0
    if negative or d < 0:
        deg = -deg
    return math.radians(deg)


def hms_to_rad(h: float, m: float = 0.0, s: float = 0.0) -> float:
    """Hours, minutes, seconds of right ascension to radians."""
    hours = h + m / 60.0 + s / 3600.0
    return math.radians(hours * 15.0)


def arcsec_to_rad(arcsec: float) -> float:
    return math.radians(arcsec / 3600.0)


def rad_to_arcsec(rad: float) -> float:
    return math.degrees(rad) * 3600.0


# ------------------------------------------------------------
# Time
# ------------------------------------------------------------

def time_from_day(day_fraction: float) -> float:
    """Fraction of a day -> seconds of time."""
    return day_fraction * SECONDS_PER_DAY


def wrap_time(sec: float) -> float:
    """Wrap seconds of time to [0, 86400)."""
    y = math.fmod(sec, SECONDS_PER_DAY)
    if y < 0:
        y += SECONDS_PER_DAY
    if y >= SECONDS_PER_DAY:
        y = 0.0
    return y


def time_to_rad(sec: float) -> float:
    """Seconds of time -> radians (86400 s = 2pi)."""
    return sec * TAU / SECONDS_PER_DAY


def rad_to_time(rad: float) -> float:
    """Radians -> seconds of time."""
    return rad * SECONDS_PER_DAY / TAU


def hms_to_time(h: float, m: float = 0.0, s: float = 0.0) -> float:
    return h * 3600.0 + m * 60.0 + s


def time_to_hms(sec: float) -> Tuple[int, int, float]:
    """Split non-negative seconds of time into (h, m, s)."""
    h = int(sec // 3600.0)
    rem = sec - 3600.0 * h
    m = int(rem // 60.0)
    return h, m, rem - 60.0 * m
