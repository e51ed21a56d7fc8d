from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple


class Sample(NamedTuple):
    """One row of an unequally spaced table."""
    x: float
    y: float


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: float  # day of month with fraction


@dataclass(frozen=True)
class GeoCoord:
    """Observer on the Earth (radians). Longitude is positive west, as in Meeus."""
    lat: float
    lon: float


@dataclass(frozen=True)
class Ecliptic:
    lon: float  # λ
    lat: float  # β


@dataclass(frozen=True)
class Equatorial:
    ra: float   # α
    dec: float  # δ


@dataclass(frozen=True)
class Horizontal:
    az: float   # A, westward from the south
    alt: float  # h


@dataclass(frozen=True)
class Galactic:
    lon: float  # l
    lat: float  # b
