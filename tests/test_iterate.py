# tests/test_iterate.py

import math

import pytest

from astroalgo.core.errors import (
    InterpolationError,
    IterationError,
    MaxIterationsExceededError,
    NoConvergenceError,
)
from astroalgo.numeric import iterate as it


def test_decimal_places_sqrt2():
    """
    Meeus chapter 5: sqrt(2) by Newton's improvement x -> (x + 2/x)/2,
    to six decimal places.
    """
    x = it.decimal_places(lambda x: (x + 2 / x) / 2, 1.0, 6, 20)
    assert round(x, 6) == 1.414214


def test_decimal_places_budget():
    with pytest.raises(MaxIterationsExceededError) as ei:
        it.decimal_places(lambda x: (x + 2 / x) / 2, 1.0, 6, 2)
    assert ei.value.max_iterations == 2


def test_full_precision_cosine_fixed_point():
    x = it.full_precision(math.cos, 1.0, 200)
    assert x == pytest.approx(0.7390851332151607, abs=1e-14)
    assert math.cos(x) == pytest.approx(x, rel=1e-14)


def test_full_precision_budget():
    with pytest.raises(MaxIterationsExceededError):
        it.full_precision(math.cos, 1.0, 10)


def test_fixed_point_converges_and_counts_rounds():
    fp = it.fixed_point(lambda n: 0.1 * n + 1, 0.0)
    assert fp.value == pytest.approx(10 / 9, rel=1e-15)
    assert 1 < fp.rounds < it.FIXED_POINT_ROUNDS


def test_fixed_point_unchanged_start_is_converged():
    fp = it.fixed_point(lambda n: 0.0, 0.0)
    assert fp == (0.0, 1)


def test_fixed_point_round_budget():
    with pytest.raises(NoConvergenceError) as ei:
        it.fixed_point(lambda n: 0.9 * n + 1, 0.0)
    assert ei.value.rounds == it.FIXED_POINT_ROUNDS


@pytest.mark.parametrize("f", [
    lambda n: math.inf,
    lambda n: math.nan,
    lambda n: 1 / n,
])
def test_fixed_point_divergence_stops_at_once(f):
    with pytest.raises(NoConvergenceError) as ei:
        it.fixed_point(f, 0.0)
    assert ei.value.rounds == 1


def test_no_convergence_is_both_kinds():
    err = NoConvergenceError(3)
    assert isinstance(err, InterpolationError)
    assert isinstance(err, IterationError)


def test_binary_root_linear():
    calls = []

    def f(x):
        calls.append(x)
        return x - 3

    x = it.binary_root(f, 0.0, 10.0)
    assert x == pytest.approx(3.0, abs=1e-12)
    # one evaluation at the lower bound, then one per round
    assert len(calls) == 1 + it.BINARY_ROOT_ROUNDS


def test_binary_root_descending_function():
    x = it.binary_root(lambda x: math.cos(x), 0.0, 3.0)
    assert x == pytest.approx(math.pi / 2, abs=1e-12)


def test_binary_root_exact_midpoint_stops_early():
    calls = []

    def f(x):
        calls.append(x)
        return x - 5

    assert it.binary_root(f, 0.0, 10.0) == 5.0
    assert len(calls) == 2


def test_binary_root_without_sign_change_does_not_raise():
    x = it.binary_root(lambda x: x * x + 1, -1.0, 4.0)
    assert -1.0 <= x <= 4.0
