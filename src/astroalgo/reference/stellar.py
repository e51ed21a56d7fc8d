# reference/stellar.py

from __future__ import annotations

import math

from ..core.angles import rad_to_arcsec


def magnitude_sum(m1: float, m2: float) -> float:
    """Combined apparent magnitude of two stars, (56.1) p. 393."""
    x = 0.4 * (m2 - m1)
    return m2 - 2.5 * math.log10(10.0 ** x + 1)


def magnitude_sum_n(*m: float) -> float:
    """Combined apparent magnitude of any number of stars."""
    s = 0.0
    for mi in m:
        s += 10.0 ** (-0.4 * mi)
    return -2.5 * math.log10(s)


def ratio(m1: float, m2: float) -> float:
    """Brightness ratio of star 1 to star 2 from their magnitudes."""
    return 10.0 ** (0.4 * (m2 - m1))


def difference(ratio: float) -> float:
    """Magnitude difference corresponding to a brightness ratio."""
    return 2.5 * math.log10(ratio)


def absolute_by_parallax(m: float, parallax: float) -> float:
    """
    Absolute magnitude from apparent magnitude m and annual parallax
    (radians).
    """
    return m + 5 + 5 * math.log10(rad_to_arcsec(parallax))


def absolute_by_distance(m: float, d: float) -> float:
    """Absolute magnitude from apparent magnitude m and distance d (parsecs)."""
    return m + 5 - 5 * math.log10(d)
