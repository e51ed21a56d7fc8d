"""
Interpolation (Meeus chapter 3).

Len3 and Len5 interpolate in a table of equally spaced x values. Only the
first and last x are given; interior x values are implicit. All y values
are given, and the number of them is fixed: 3 for Len3, 5 for Len5.

Meeus stresses choosing the rows of a longer table so that the
interpolating factor n stays small. Len3.for_interpolate_x does this for
the 3-row case.

lagrange and lagrange_poly work with unequally spaced x values.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Protocol, Sequence, Tuple

from ..core.angles import horner
from ..core.types import Sample
from ..core.errors import (
    AbscissaOutOfRangeError,
    DegenerateAbscissaeError,
    ExtremumOutsideTableError,
    FactorOutOfRangeError,
    InvalidSampleCountError,
    NoExtremumError,
    ZeroOutsideTableError,
)
from .iterate import fixed_point

logger = logging.getLogger(__name__)


class InterpolationTable(Protocol):
    def interpolate_n(self, n: float) -> float: ...
    def interpolate_x(self, x: float) -> float: ...
    def extremum(self) -> Tuple[float, float]: ...
    def zero(self, strong: bool = False) -> float: ...


def _check_factor(n: float) -> None:
    if n < -1 or n > 1:
        raise FactorOutOfRangeError(n)


# ============================================================
# Three rows
# ============================================================

@dataclass(frozen=True)
class Len3:
    """
    Second difference interpolation in a table of three rows.

    x1 and x3 are the first and last x values; y holds the three y values.
    """
    x1: float
    x3: float
    y: Tuple[float, ...]

    a: float = field(init=False, repr=False)
    b: float = field(init=False, repr=False)
    c: float = field(init=False, repr=False)
    ab_sum: float = field(init=False, repr=False)
    x_sum: float = field(init=False, repr=False)
    x_diff: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        y = tuple(float(v) for v in self.y)
        if len(y) != 3:
            raise InvalidSampleCountError(3, len(y))
        if self.x3 == self.x1:
            raise DegenerateAbscissaeError(self.x1)
        # differences, (3.1) p. 23
        a = y[1] - y[0]
        b = y[2] - y[1]
        c = b - a
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "ab_sum", a + b)
        object.__setattr__(self, "x_sum", self.x3 + self.x1)
        object.__setattr__(self, "x_diff", self.x3 - self.x1)

    @classmethod
    def for_interpolate_x(cls, x: float, x1: float, xn: float, y: Sequence[float]) -> "Len3":
        """
        Build a Len3 from the three rows of a longer table best suited to x.

          x  : interpolation target
          x1 : x value of the first row of the table
          xn : x value of the last row of the table
          y  : all y values of the table (at least 3)

        The chosen window is centred on the row nearest x, clamped so that
        it stays inside the table. A non-finite x raises
        AbscissaOutOfRangeError.
        """
        if not math.isfinite(x):
            raise AbscissaOutOfRangeError(x)
        if len(y) > 3:
            interval = (xn - x1) / (len(y) - 1)
            if interval == 0:
                raise DegenerateAbscissaeError(x1)
            nearest = int(math.floor((x - x1) / interval + 0.5))
            nearest = min(max(nearest, 1), len(y) - 2)
            logger.debug("Len3 window centred on row %d of %d for x=%r", nearest, len(y), x)
            y = y[nearest - 1:nearest + 2]
            xn = x1 + (nearest + 1) * interval
            x1 = x1 + (nearest - 1) * interval
        return cls(x1, xn, tuple(y))

    def interpolate_x(self, x: float) -> float:
        """Interpolate for a given x value."""
        return self.interpolate_n(self._factor(x))

    def interpolate_x_strict(self, x: float) -> float:
        """Interpolate for x, restricted to the range x1..x3."""
        try:
            return self.interpolate_n_strict(self._factor(x))
        except FactorOutOfRangeError:
            raise AbscissaOutOfRangeError(x) from None

    def interpolate_n(self, n: float) -> float:
        """
        Interpolate for an interpolating factor n, formula (3.3).

        n is x - x2 in units of the tabular interval; no range check.
        """
        return self.y[1] + n * 0.5 * (self.ab_sum + n * self.c)

    def interpolate_n_strict(self, n: float) -> float:
        """Interpolate for n restricted to [-1, 1]."""
        _check_factor(n)
        return self.interpolate_n(n)

    def extremum(self) -> Tuple[float, float]:
        """
        x and y of the extremum of the parabola through the table.

        Closed form; the extremum must fall within the table.
        """
        if self.c == 0:
            raise NoExtremumError()
        n = self.ab_sum / (-2.0 * self.c)  # (3.5) p. 25
        if n < -1 or n > 1:
            raise ExtremumOutsideTableError(n)
        x = 0.5 * (self.x_sum + self.x_diff * n)
        y = self.y[1] - (self.ab_sum * self.ab_sum) / (8.0 * self.c)  # (3.4) p. 25
        return x, y

    def zero(self, strong: bool = False) -> float:
        """
        x value where the interpolated y is 0.

        strong=False uses the quick estimate (3.6), fine for gentle curves.
        strong=True uses (3.7), a Newton-style step that costs a little more
        per round but converges faster and more reliably on sharp curves.
        The zero must fall within the table.
        """
        y2, ab_sum, c = self.y[1], self.ab_sum, self.c
        if strong:
            def f(n0: float) -> float:
                return n0 - (2 * y2 + n0 * (ab_sum + c * n0)) / (ab_sum + 2 * c * n0)
        else:
            def f(n0: float) -> float:
                return -2 * y2 / (ab_sum + c * n0)
        n0, rounds = fixed_point(f, 0.0)
        logger.debug("Len3 zero (strong=%s) converged in %d rounds: n=%r", strong, rounds, n0)
        if n0 > 1 or n0 < -1:
            raise ZeroOutsideTableError(n0)
        return 0.5 * (self.x_sum + self.x_diff * n0)

    def _factor(self, x: float) -> float:
        return (2 * x - self.x_sum) / self.x_diff


def len4_half(y: Sequence[float]) -> float:
    """Interpolate the centre value of a table of four rows, (3.12) p. 32."""
    if len(y) != 4:
        raise InvalidSampleCountError(4, len(y))
    return (9 * (y[1] + y[2]) - y[0] - y[3]) / 16


# ============================================================
# Five rows
# ============================================================

@dataclass(frozen=True)
class Len5:
    """
    Fourth difference interpolation in a table of five rows.

    x1 and x5 are the first and last x values; y holds the five y values.
    """
    x1: float
    x5: float
    y: Tuple[float, ...]

    # a..d first, e..g second, h..j third, k fourth differences
    a: float = field(init=False, repr=False)
    b: float = field(init=False, repr=False)
    c: float = field(init=False, repr=False)
    d: float = field(init=False, repr=False)
    e: float = field(init=False, repr=False)
    f: float = field(init=False, repr=False)
    g: float = field(init=False, repr=False)
    h: float = field(init=False, repr=False)
    j: float = field(init=False, repr=False)
    k: float = field(init=False, repr=False)
    x_sum: float = field(init=False, repr=False)
    x_diff: float = field(init=False, repr=False)
    coeffs: Tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        y = tuple(float(v) for v in self.y)
        if len(y) != 5:
            raise InvalidSampleCountError(5, len(y))
        if self.x5 == self.x1:
            raise DegenerateAbscissaeError(self.x1)
        a = y[1] - y[0]
        b = y[2] - y[1]
        c = y[3] - y[2]
        d = y[4] - y[3]
        e = b - a
        f = c - b
        g = d - c
        h = f - e
        j = g - f
        k = j - h
        values = dict(
            y=y, a=a, b=b, c=c, d=d, e=e, f=f, g=g, h=h, j=j, k=k,
            x_sum=self.x5 + self.x1,
            x_diff=self.x5 - self.x1,
            # (3.8) p. 28
            coeffs=(
                y[2],
                (b + c) / 2 - (h + j) / 12,
                f / 2 - k / 24,
                (h + j) / 12,
                k / 24,
            ),
        )
        for name, v in values.items():
            object.__setattr__(self, name, v)

    def interpolate_x(self, x: float) -> float:
        """Interpolate for a given x value."""
        return self.interpolate_n(self._factor(x))

    def interpolate_x_strict(self, x: float) -> float:
        """Interpolate for x, restricted to the middle half of the table."""
        try:
            return self.interpolate_n_strict(self._factor(x))
        except FactorOutOfRangeError:
            raise AbscissaOutOfRangeError(x) from None

    def interpolate_n(self, n: float) -> float:
        """
        Interpolate for an interpolating factor n.

        n is x - x3 in units of the tabular interval (Meeus p. 28).
        """
        return horner(n, *self.coeffs)

    def interpolate_n_strict(self, n: float) -> float:
        """
        Interpolate for n restricted to [-1, 1].

        That is half the range of the table, which is what Meeus recommends
        on p. 31.
        """
        _check_factor(n)
        return horner(n, *self.coeffs)

    def extremum(self) -> Tuple[float, float]:
        """
        x and y of the extremum, by iteration on (3.9) p. 29.

        The result may lie anywhere in the table (n in [-2, 2]); Meeus would
        restrict it to one tabular interval.
        """
        b, c, f, h, j, k = self.b, self.c, self.f, self.h, self.j, self.k
        num = (6 * (b + c) - h - j, 0.0, 3 * (h + j), 2 * k)
        den = k - 12 * f
        if den == 0:
            raise ExtremumOutsideTableError()
        n0, rounds = fixed_point(lambda n: horner(n, *num) / den, 0.0)
        logger.debug("Len5 extremum converged in %d rounds: n=%r", rounds, n0)
        if n0 < -2 or n0 > 2:
            raise ExtremumOutsideTableError(n0)
        return self._x_at(n0), horner(n0, *self.coeffs)

    def zero(self, strong: bool = False) -> float:
        """
        x value where the interpolated y is 0.

        strong=False iterates the quick estimate (3.10); strong=True the
        Newton form (3.11), better on sharply curved tables. The zero may
        lie anywhere in the table (n in [-2, 2]).
        """
        b, c, f, h, j, k = self.b, self.c, self.f, self.h, self.j, self.k
        if strong:
            # (3.11) p. 29
            M = k / 24
            N = (h + j) / 12
            P = f / 2 - M
            Q = (b + c) / 2 - N
            num = (self.y[2], Q, P, N, M)
            dnum = (Q, 2 * P, 3 * N, 4 * M)

            def step(n0: float) -> float:
                return n0 - horner(n0, *num) / horner(n0, *dnum)
        else:
            # (3.10) p. 29
            num = (-24 * self.y[2], 0.0, k - 12 * f, -2 * (h + j), -k)
            den = 12 * (b + c) - 2 * (h + j)

            def step(n0: float) -> float:
                return horner(n0, *num) / den
        n0, rounds = fixed_point(step, 0.0)
        logger.debug("Len5 zero (strong=%s) converged in %d rounds: n=%r", strong, rounds, n0)
        if n0 > 2 or n0 < -2:
            raise ZeroOutsideTableError(n0)
        return self._x_at(n0)

    def _factor(self, x: float) -> float:
        return (4 * x - 2 * self.x_sum) / self.x_diff

    def _x_at(self, n: float) -> float:
        return 0.5 * self.x_sum + 0.25 * self.x_diff * n


# ============================================================
# Unequally spaced abscissae (Lagrange)
# ============================================================

def _div(num: float, den: float) -> float:
    """num/den with IEEE results for a zero denominator."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _rows(table: Iterable[Sample]) -> List[Sample]:
    return [Sample(float(x), float(y)) for x, y in table]


def lagrange(x: float, table: Iterable[Sample]) -> float:
    """
    Interpolate y at x in a table of Sample rows, method of p. 33.

    The x values need not be equally spaced or sorted, but must be
    distinct. That is not checked: a repeated x gives an infinite or NaN
    result.
    """
    rows = _rows(table)
    total = 0.0
    for i, (xi, yi) in enumerate(rows):
        prod = 1.0
        for j, (xj, _) in enumerate(rows):
            if i != j:
                prod *= _div(x - xj, xi - xj)
        total += yi * prod
    return total


def lagrange_poly(table: Iterable[Sample]) -> List[float]:
    """
    Coefficients of the Lagrange interpolating polynomial through the table.

    For n rows the polynomial has degree n-1. Coefficients are in ascending
    order (constant term first), ready for `horner`. X values must be
    distinct, as for `lagrange`.
    """
    rows = _rows(table)
    size = len(rows)
    total = [0.0] * size
    last = size - 1
    for i, (xi, yi) in enumerate(rows):
        # prod holds the basis numerator prod_{j != i} (X - xj), built up
        # one factor at a time from the high-order end
        prod = [0.0] * size
        prod[last] = 1.0
        den = 1.0
        top = last
        for j, (xj, _) in enumerate(rows):
            if i == j:
                continue
            prod[top - 1] = prod[top] * -xj
            for m in range(top, last):
                prod[m] -= prod[m + 1] * xj
            top -= 1
            den *= xi - xj
        for m, pm in enumerate(prod):
            total[m] += _div(yi * pm, den)
    return total
