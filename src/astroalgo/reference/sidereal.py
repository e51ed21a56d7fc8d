# reference/sidereal.py

from __future__ import annotations

import math
from typing import Tuple

from ..core.angles import J2000, JULIAN_CENTURY, horner, rad_to_time, time_from_day, wrap_time
from . import nutation

# Mean sidereal time at Greenwich at 0h UT, seconds, in Julian centuries
# from J2000.0. IAU 1982 coefficients, (12.2) p. 87.
IAU82 = (24110.54841, 8640184.812866, 0.093104, -0.0000062)

SIDEREAL_RATE = 1.00273790935  # sidereal seconds per UT second


def _jd_to_cfrac(jd: float) -> Tuple[float, float]:
    """
    (centuries from J2000 of 0h UT on the day of jd, fraction of day after 0h)
    """
    f, j0 = math.modf(jd + 0.5)
    return (j0 - 0.5 - J2000) / JULIAN_CENTURY, f


def _mean_0ut(jd: float) -> Tuple[float, float]:
    cen, f = _jd_to_cfrac(jd)
    return horner(cen, *IAU82), time_from_day(f)


def _mean(jd: float) -> float:
    s, f = _mean_0ut(jd)
    return s + f * SIDEREAL_RATE


def mean(jd: float) -> float:
    """
    Mean sidereal time at Greenwich for jd, seconds in [0, 86400).
    """
    return wrap_time(_mean(jd))


def mean_0ut(jd: float) -> float:
    """
    Mean sidereal time at Greenwich at 0h UT on the day of jd,
    seconds in [0, 86400).
    """
    return wrap_time(_mean_0ut(jd)[0])


def apparent(jd: float) -> float:
    """
    Apparent sidereal time at Greenwich: mean plus nutation in right
    ascension. Seconds in [0, 86400).
    """
    return wrap_time(_mean(jd) + rad_to_time(nutation.nutation_in_ra(jd)))


def apparent_0ut(jd: float) -> float:
    """
    Apparent sidereal time at Greenwich at 0h UT on the day of jd.
    """
    _, j0 = math.modf(jd + 0.5)
    jd0 = j0 - 0.5
    return wrap_time(_mean_0ut(jd0)[0] + rad_to_time(nutation.nutation_in_ra(jd0)))
