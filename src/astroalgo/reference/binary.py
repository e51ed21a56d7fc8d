# reference/binary.py

from __future__ import annotations

import math
from typing import Tuple

from ..core.angles import TAU, wrap_rad
from ..numeric.iterate import full_precision

# Kepler's equation converges in a handful of rounds for visual binaries;
# the budget only matters for e close to 1.
KEPLER_MAX_ITERATIONS = 200


def mean_anomaly(year: float, T: float, P: float) -> float:
    """
    Mean anomaly (radians) of the companion at a date.

      year : decimal year of the date
      T    : time of periastron, decimal year
      P    : period of revolution, mean solar years
    """
    n = TAU / P
    return wrap_rad(n * (year - T))


def eccentric_anomaly(M: float, e: float) -> float:
    """
    Solve Kepler's equation E = M + e sin E (radians) by iteration
    (chapter 30, first method).
    """
    return full_precision(lambda E: M + e * math.sin(E), M, KEPLER_MAX_ITERATIONS)


def position(e: float, a: float, i: float, node: float, omega: float, E: float) -> Tuple[float, float]:
    """
    Apparent position angle θ and angular separation ρ of a binary star.

      e     : eccentricity of the true orbit
      a     : angular apparent semimajor axis
      i     : inclination relative to the line of sight
      node  : position angle of the ascending node (Ω)
      omega : longitude of periastron (ω)
      E     : eccentric anomaly, see eccentric_anomaly

    ρ is in the units of a.
    """
    r = a * (1 - e * math.cos(E))
    nu = 2 * math.atan(math.sqrt((1 + e) / (1 - e)) * math.tan(E / 2))
    snw = math.sin(nu + omega)
    cnw = math.cos(nu + omega)
    num = snw * math.cos(i)
    theta = wrap_rad(math.atan2(num, cnw) + node)
    rho = r * math.sqrt(num * num + cnw * cnw)
    return theta, rho


def apparent_eccentricity(e: float, i: float, omega: float) -> float:
    """
    Eccentricity of the apparent orbit from the true orbital elements.
    """
    ci = math.cos(i)
    sw = math.sin(omega)
    cw = math.cos(omega)
    A = (1 - e * e * cw * cw) * ci * ci
    B = e * e * sw * cw * ci
    C = 1 - e * e * sw * sw
    d = A - C
    sD = math.sqrt(d * d + 4 * B * B)
    return math.sqrt(2 * sD / (A + C + sD))
