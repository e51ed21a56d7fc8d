# reference/coord.py

"""
Transformation of coordinates (Meeus chapter 13).

Each transform comes as a function on bare angles (radians) and as a
method on the frozen value types of astroalgo.core.types, returning a new
value. Sidereal time is in seconds of time; observer longitude is positive
west of Greenwich.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.angles import hms_to_rad, sincos, time_to_rad, wrap_rad
from ..core.types import Ecliptic, Equatorial, Galactic, GeoCoord, Horizontal


@dataclass(frozen=True)
class Obliquity:
    """Sine and cosine of the obliquity of the ecliptic."""
    s: float
    c: float

    @classmethod
    def from_angle(cls, eps: float) -> "Obliquity":
        s, c = sincos(eps)
        return cls(s, c)


# ------------------------------------------------------------
# Equatorial <-> ecliptic
# ------------------------------------------------------------

def eq_to_ecl(ra: float, dec: float, s_eps: float, c_eps: float) -> Tuple[float, float]:
    """
    (α, δ) -> (λ, β), (13.1) and (13.2) p. 93.
    """
    sa, ca = sincos(ra)
    sd, cd = sincos(dec)
    lon = math.atan2(sa * c_eps + (sd / cd) * s_eps, ca)
    lat = math.asin(sd * c_eps - cd * s_eps * sa)
    return lon, lat


def ecl_to_eq(lon: float, lat: float, s_eps: float, c_eps: float) -> Tuple[float, float]:
    """
    (λ, β) -> (α, δ), (13.3) and (13.4) p. 93. α is wrapped to [0, 2pi).
    """
    sl, cl = sincos(lon)
    sb, cb = sincos(lat)
    ra = wrap_rad(math.atan2(sl * c_eps - (sb / cb) * s_eps, cl))
    dec = math.asin(sb * c_eps + cb * s_eps * sl)
    return ra, dec


# ------------------------------------------------------------
# Equatorial <-> horizontal
# ------------------------------------------------------------

def eq_to_hz(ra: float, dec: float, lat: float, lon: float, st: float) -> Tuple[float, float]:
    """
    (α, δ) -> (A, h), (13.5) and (13.6) p. 93.

      lat, lon : observer, longitude positive west
      st       : sidereal time at Greenwich, seconds

    Azimuth is measured westward from the south. Sidereal time must match
    the coordinates: apparent coordinates need apparent sidereal time.
    """
    H = time_to_rad(st) - lon - ra
    sH, cH = sincos(H)
    sp, cp = sincos(lat)
    sd, cd = sincos(dec)
    az = math.atan2(sH, cH * sp - (sd / cd) * cp)
    alt = math.asin(sp * sd + cp * cd * cH)
    return az, alt


def hz_to_eq(az: float, alt: float, lat: float, lon: float, st: float) -> Tuple[float, float]:
    """
    (A, h) -> (α, δ); inverse of eq_to_hz.
    """
    sA, cA = sincos(az)
    sh, ch = sincos(alt)
    sp, cp = sincos(lat)
    H = math.atan2(sA, cA * sp + sh / ch * cp)
    ra = wrap_rad(time_to_rad(st) - lon - H)
    dec = math.asin(sp * sh - cp * ch * cA)
    return ra, dec


# ------------------------------------------------------------
# Equatorial (B1950) <-> galactic
# ------------------------------------------------------------

# IAU B1950.0 galactic north pole
GALACTIC_NORTH_1950 = Equatorial(ra=hms_to_rad(12, 49, 0), dec=math.radians(27.4))
# Meeus' 33° is the origin of galactic longitude from the ascending node of
# the galactic equator; 33 + 90 = 123 is the IAU value from the pole.
GALACTIC_0_LON_1950 = math.radians(33.0)


def eq_to_gal(ra: float, dec: float) -> Tuple[float, float]:
    """
    (α, δ) referred to B1950.0 -> galactic (l, b), (13.7) and (13.8) p. 94.
    """
    sda, cda = sincos(GALACTIC_NORTH_1950.ra - ra)
    sgd, cgd = sincos(GALACTIC_NORTH_1950.dec)
    sd, cd = sincos(dec)
    x = math.atan2(sda, cda * sgd - (sd / cd) * cgd)
    # 33° + 270° = 303°
    lon = wrap_rad(GALACTIC_0_LON_1950 + 1.5 * math.pi - x)
    lat = math.asin(sd * sgd + cd * cgd * cda)
    return lon, lat


def gal_to_eq(lon: float, lat: float) -> Tuple[float, float]:
    """
    Galactic (l, b) -> (α, δ) referred to B1950.0.
    """
    # l - 33° - 90° = l - 123°
    sdl, cdl = sincos(lon - GALACTIC_0_LON_1950 - math.pi / 2)
    sgd, cgd = sincos(GALACTIC_NORTH_1950.dec)
    sb, cb = sincos(lat)
    y = math.atan2(sdl, cdl * sgd - (sb / cb) * cgd)
    # α of the pole - 180° = 12.25°
    ra = wrap_rad(y + GALACTIC_NORTH_1950.ra - math.pi)
    dec = math.asin(sb * sgd + cb * cgd * cdl)
    return ra, dec


# ------------------------------------------------------------
# Value type forms
# ------------------------------------------------------------

def ecliptic_from_equatorial(eq: Equatorial, eps: Obliquity) -> Ecliptic:
    return Ecliptic(*eq_to_ecl(eq.ra, eq.dec, eps.s, eps.c))


def equatorial_from_ecliptic(ecl: Ecliptic, eps: Obliquity) -> Equatorial:
    return Equatorial(*ecl_to_eq(ecl.lon, ecl.lat, eps.s, eps.c))


def horizontal_from_equatorial(eq: Equatorial, g: GeoCoord, st: float) -> Horizontal:
    return Horizontal(*eq_to_hz(eq.ra, eq.dec, g.lat, g.lon, st))


def equatorial_from_horizontal(hz: Horizontal, g: GeoCoord, st: float) -> Equatorial:
    return Equatorial(*hz_to_eq(hz.az, hz.alt, g.lat, g.lon, st))


def galactic_from_equatorial(eq: Equatorial) -> Galactic:
    return Galactic(*eq_to_gal(eq.ra, eq.dec))


def equatorial_from_galactic(g: Galactic) -> Equatorial:
    return Equatorial(*gal_to_eq(g.lon, g.lat))
