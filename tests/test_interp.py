# tests/test_interp.py

import logging
import math

import pytest

from astroalgo.core.angles import horner
from astroalgo.core.errors import (
    AbscissaOutOfRangeError,
    DegenerateAbscissaeError,
    ExtremumOutsideTableError,
    FactorOutOfRangeError,
    InterpolationError,
    InvalidSampleCountError,
    NoConvergenceError,
    NoExtremumError,
    ZeroOutsideTableError,
)
from astroalgo.core.types import Sample
from astroalgo.numeric.interp import Len3, Len5, lagrange, lagrange_poly, len4_half
from astroalgo.numeric.iterate import FIXED_POINT_ROUNDS


def _rounds(caplog, prefix):
    """Round counts logged by the table solvers, in call order."""
    return [r.args[-2] for r in caplog.records if r.msg.startswith(prefix)]


# ------------------------------------------------------------
# Len3
# ------------------------------------------------------------

def test_meeus_example_3a_interpolate():
    """
    Meeus Example 3.a: distance of the Moon, 1992 Nov 7-9, interpolated
    for Nov 8 at 4h21m TD.
    """
    d = Len3(7, 9, [0.884226, 0.877366, 0.870531])
    x = 8 + (4 + 21 / 60.0) / 24
    assert d.interpolate_x(x) == pytest.approx(0.876125, abs=1e-6)
    assert d.interpolate_x_strict(x) == pytest.approx(0.876125, abs=1e-6)


def test_meeus_example_3b_extremum():
    """
    Meeus Example 3.b: least distance of Mars, 1992 Nov 12-20.
    """
    d = Len3(12, 20, [1.3814294, 1.3812213, 1.3812453])
    x, y = d.extremum()
    assert x == pytest.approx(17.5864, abs=1e-4)
    assert y == pytest.approx(1.3812030, abs=1e-7)


@pytest.mark.parametrize("strong", [False, True])
def test_meeus_example_3c_zero(strong):
    """
    Meeus Example 3.c: declination of Mercury (arcseconds) crossing zero,
    1988 Feb 26-28.
    """
    y = [-(28 * 60 + 13.4), 6 * 60 + 46.3, 38 * 60 + 23.2]
    d = Len3(26, 28, y)
    assert d.zero(strong) == pytest.approx(26.79873, abs=1e-5)


def test_len3_reproduces_parabola():
    def p(x):
        return 2 * x * x - 3 * x + 1

    d = Len3(0.5, 2.5, [p(0.5), p(1.5), p(2.5)])
    for x in (-3.0, 0.5, 0.9, 1.5, 2.2, 2.5, 7.0):
        assert d.interpolate_x(x) == pytest.approx(p(x), rel=1e-12, abs=1e-12)


def test_len3_factor_zero_is_middle_sample():
    d = Len3(1, 3, [0.1, 0.7, -0.3])
    assert d.interpolate_n(0) == 0.7


def test_len3_copies_samples():
    y = [1.0, 2.0, 5.0]
    d = Len3(0, 2, y)
    y[1] = 100.0
    assert d.y == (1.0, 2.0, 5.0)
    assert d.interpolate_n(0) == 2.0
    with pytest.raises(AttributeError):
        d.x1 = 5.0


def test_len3_construction_errors():
    with pytest.raises(InvalidSampleCountError) as ei:
        Len3(0, 2, [1, 2, 3, 4])
    assert ei.value.expected == 3 and ei.value.actual == 4
    with pytest.raises(DegenerateAbscissaeError):
        Len3(2, 2, [1, 2, 3])


def test_len3_strict_range():
    d = Len3(0, 2, [1.0, 2.0, 5.0])
    with pytest.raises(FactorOutOfRangeError):
        d.interpolate_n_strict(1.5)
    with pytest.raises(FactorOutOfRangeError):
        d.interpolate_n_strict(-1.0000001)
    assert d.interpolate_n_strict(1.0) == pytest.approx(5.0)
    with pytest.raises(AbscissaOutOfRangeError) as ei:
        d.interpolate_x_strict(2.5)
    assert ei.value.value == 2.5
    # the abscissa error is also a factor error
    assert isinstance(ei.value, FactorOutOfRangeError)
    assert isinstance(ei.value, ValueError)


def test_len3_extremum_of_downward_parabola():
    """y = -(x-2)^2 + 5 sampled at three points centred on the vertex."""
    d = Len3(1, 3, [4.0, 5.0, 4.0])
    x, y = d.extremum()
    assert x == pytest.approx(2.0, abs=1e-12)
    assert y == pytest.approx(5.0, abs=1e-12)


def test_len3_extremum_errors():
    with pytest.raises(NoExtremumError):
        Len3(0, 2, [1.0, 2.0, 3.0]).extremum()
    with pytest.raises(ExtremumOutsideTableError):
        Len3(0, 2, [1.0, 2.0, 4.0]).extremum()


def test_len3_strong_zero_converges_faster(caplog):
    """
    y = -0.2 + n + 0.8 n^2 (n = x - 11) bends sharply; both estimates find
    the root, the strong one in fewer rounds.
    """
    caplog.set_level(logging.DEBUG, logger="astroalgo.numeric.interp")
    d = Len3(10, 12, [-0.4, -0.2, 1.6])
    root = 11 + (-1 + math.sqrt(1.64)) / 1.6

    fast = d.zero(False)
    strong = d.zero(True)
    assert fast == pytest.approx(root, abs=1e-9)
    assert strong == pytest.approx(root, abs=1e-9)
    assert fast == pytest.approx(strong, abs=1e-9)

    fast_rounds, strong_rounds = _rounds(caplog, "Len3 zero")
    assert strong_rounds <= fast_rounds


def test_len3_zero_outside_table():
    d = Len3(0, 2, [1.0, 2.0, 3.0])  # y = x + 1, zero at x = -1
    with pytest.raises(ZeroOutsideTableError) as ei:
        d.zero()
    assert ei.value.value == pytest.approx(-2.0)
    with pytest.raises(ZeroOutsideTableError):
        d.zero(strong=True)


def test_len3_zero_no_convergence():
    d = Len3(-1, 1, [0.5, -0.5, 0.5])  # symmetric about n=0, no usable slope
    with pytest.raises(NoConvergenceError):
        d.zero()
    with pytest.raises(NoConvergenceError):
        d.zero(strong=True)


def test_len3_for_interpolate_x():
    y = [x * x for x in range(10)]
    d = Len3.for_interpolate_x(6.3, 0, 9, y)
    assert (d.x1, d.x3) == (5.0, 7.0)
    assert d.y == (25.0, 36.0, 49.0)
    assert d.interpolate_x(6.3) == pytest.approx(6.3 ** 2)

    # clamped at both ends of the table
    lo = Len3.for_interpolate_x(-0.2, 0, 9, y)
    assert lo.y == (0.0, 1.0, 4.0)
    hi = Len3.for_interpolate_x(12.0, 0, 9, y)
    assert hi.y == (49.0, 64.0, 81.0)

    with pytest.raises(DegenerateAbscissaeError):
        Len3.for_interpolate_x(1.0, 3, 3, y)


@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_len3_for_interpolate_x_non_finite(x):
    y = [float(i) for i in range(10)]
    with pytest.raises(AbscissaOutOfRangeError):
        Len3.for_interpolate_x(x, 0, 9, y)


def test_len4_half():
    assert len4_half([0.0, 1.0, 8.0, 27.0]) == pytest.approx(1.5 ** 3)
    with pytest.raises(InvalidSampleCountError):
        len4_half([1.0, 2.0, 3.0])


# ------------------------------------------------------------
# Len5
# ------------------------------------------------------------

def _quartic(x):
    return 0.3 * x ** 4 - x ** 3 + 2 * x * x - 0.5 * x + 1


def test_len5_reproduces_quartic():
    xs = [-1.0, -0.5, 0.0, 0.5, 1.0]
    d = Len5(-1, 1, [_quartic(x) for x in xs])
    for x in (-2.0, -1.0, -0.3, 0.0, 0.25, 0.8, 1.7):
        assert d.interpolate_x(x) == pytest.approx(_quartic(x), abs=1e-9)


def test_len5_factor_zero_is_middle_sample():
    d = Len5(0, 4, [0.3, -1.1, 2.25, 0.4, 0.9])
    assert d.interpolate_n(0) == 2.25


def test_len5_construction_errors():
    with pytest.raises(InvalidSampleCountError):
        Len5(0, 4, [1, 2, 3])
    with pytest.raises(DegenerateAbscissaeError):
        Len5(1, 1, [1, 2, 3, 4, 5])


def test_len5_strict_is_middle_half():
    d = Len5(0, 4, [_quartic(x) for x in range(5)])
    # x = 1..3 is n = -1..1
    assert d.interpolate_x_strict(1.0) == pytest.approx(_quartic(1.0))
    assert d.interpolate_x_strict(2.7) == pytest.approx(_quartic(2.7))
    with pytest.raises(AbscissaOutOfRangeError):
        d.interpolate_x_strict(0.5)
    with pytest.raises(FactorOutOfRangeError):
        d.interpolate_n_strict(1.5)


def test_len5_extremum():
    """y = -(x-2.3)^2 + 5 over x = 0..4."""
    d = Len5(0, 4, [-(x - 2.3) ** 2 + 5 for x in range(5)])
    x, y = d.extremum()
    assert x == pytest.approx(2.3, abs=1e-12)
    assert y == pytest.approx(5.0, abs=1e-12)


def test_len5_extremum_at_centre():
    d = Len5(0, 4, [-(x - 2) ** 2 + 5 for x in range(5)])
    assert d.extremum() == pytest.approx((2.0, 5.0))


def test_len5_extremum_errors():
    # linear: k == 12f == 0
    with pytest.raises(ExtremumOutsideTableError):
        Len5(0, 4, [1.0, 2.0, 3.0, 4.0, 5.0]).extremum()
    # vertex at x = 10, n = 8
    with pytest.raises(ExtremumOutsideTableError) as ei:
        Len5(0, 4, [(x - 10.0) ** 2 for x in range(5)]).extremum()
    assert ei.value.value == pytest.approx(8.0)


def test_len5_zero():
    def p(x):
        n = x - 2
        return n - 0.4 + 0.02 * n ** 3 + 0.01 * n ** 4

    d = Len5(0, 4, [p(x) for x in range(5)])
    fast = d.zero()
    strong = d.zero(strong=True)
    assert fast == pytest.approx(strong, abs=1e-9)
    assert p(fast) == pytest.approx(0.0, abs=1e-12)
    assert d.interpolate_x(strong) == pytest.approx(0.0, abs=1e-12)


def test_len5_zero_outside_table():
    d = Len5(0, 4, [x - 10.0 for x in range(5)])
    with pytest.raises(ZeroOutsideTableError):
        d.zero()
    with pytest.raises(ZeroOutsideTableError):
        d.zero(strong=True)


def test_len5_copies_samples():
    y = [0.3, -1.1, 2.25, 0.4, 0.9]
    d = Len5(0, 4, y)
    y[2] = 100.0
    assert d.y == (0.3, -1.1, 2.25, 0.4, 0.9)
    assert d.interpolate_n(0) == 2.25
    with pytest.raises(AttributeError):
        d.x5 = 8.0


# y = 1, -1, -2, -1, 1: b + c = 0 and h + j = 0, so the quick zero estimate
# has a zero denominator and the Newton step a zero slope at n = 0
_FLAT_MIDDLE = [1.0, -1.0, -2.0, -1.0, 1.0]


@pytest.mark.parametrize("strong", [False, True])
def test_len5_zero_zero_denominator(strong):
    with pytest.raises(NoConvergenceError) as ei:
        Len5(0, 4, _FLAT_MIDDLE).zero(strong)
    assert ei.value.rounds == 1


def test_len5_extremum_round_budget():
    """
    y = 0, 0, 0, 0, 1 makes the extremum iteration cycle between n = 0 and
    n = -1, so it runs out of rounds.
    """
    with pytest.raises(NoConvergenceError) as ei:
        Len5(0, 4, [0.0, 0.0, 0.0, 0.0, 1.0]).extremum()
    assert ei.value.rounds == FIXED_POINT_ROUNDS


def test_errors_share_base():
    with pytest.raises(InterpolationError):
        Len5(0, 4, [1.0])


# ------------------------------------------------------------
# Lagrange
# ------------------------------------------------------------

_SIN_X = [29.43, 30.97, 27.69, 28.11, 31.58, 33.05]


def _sin_table():
    return [Sample(x, math.sin(math.radians(x))) for x in _SIN_X]


def test_meeus_example_3f_lagrange():
    """
    Meeus Example 3.f: sin 30° from six unequally spaced, unsorted rows.
    """
    assert lagrange(30.0, _sin_table()) == pytest.approx(0.5, abs=1e-8)


def test_lagrange_reproduces_samples():
    table = _sin_table()
    for x, y in table:
        assert lagrange(x, table) == y


def test_lagrange_repeated_x_is_not_finite():
    repeated = [Sample(1.0, 2.0), Sample(1.0, 3.0)]
    assert not math.isfinite(lagrange(0.5, repeated))
    assert math.isnan(lagrange(1.0, repeated))


def test_lagrange_poly_recovers_cubic():
    def p(x):
        return 2 - x + 0.5 * x * x + 0.25 * x ** 3

    table = [Sample(x, p(x)) for x in (-1.0, 3.0, 0.5, 2.0)]
    coeffs = lagrange_poly(table)
    assert coeffs == pytest.approx([2.0, -1.0, 0.5, 0.25], abs=1e-12)


def test_lagrange_poly_matches_lagrange():
    table = _sin_table()
    coeffs = lagrange_poly(table)
    assert len(coeffs) == len(table)
    for x in (27.9, 30.0, 32.5):
        assert horner(x, *coeffs) == pytest.approx(lagrange(x, table), abs=1e-7)


def test_lagrange_poly_single_row():
    assert lagrange_poly([Sample(3.0, 7.0)]) == [7.0]


def test_lagrange_accepts_plain_pairs():
    assert lagrange(1.5, [(1.0, 2.0), (2.0, 3.0)]) == pytest.approx(2.5)
