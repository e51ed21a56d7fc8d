"""
Iteration (Meeus chapter 5).

Improvement functions are plain callables float -> float. The generic
primitives take an explicit iteration budget; the fixed point solver used by
the interpolation tables has a fixed budget of 50 rounds, and binary search
always runs 52 rounds, one per bit of a float64 mantissa.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, NamedTuple

from ..core.errors import MaxIterationsExceededError, NoConvergenceError

logger = logging.getLogger(__name__)

BetterFunc = Callable[[float], float]
RootFunc = Callable[[float], float]

FIXED_POINT_ROUNDS = 50
BINARY_ROOT_ROUNDS = 52
FULL_PRECISION = 1e-15


class FixedPoint(NamedTuple):
    value: float
    rounds: int


def _converged(new: float, old: float, scale: float) -> bool:
    # relative test written without a division so that a zero scale is harmless
    return new == old or abs(new - old) < FULL_PRECISION * abs(scale)


def decimal_places(better: BetterFunc, start: float, places: int, max_iterations: int) -> float:
    """
    Iterate `better` until successive values agree to `places` decimals.

    Raises MaxIterationsExceededError when the budget runs out.
    """
    d = 10.0 ** -places
    for _ in range(max_iterations):
        n = better(start)
        if abs(n - start) < d:
            return n
        start = n
    raise MaxIterationsExceededError(max_iterations)


def full_precision(better: BetterFunc, start: float, max_iterations: int) -> float:
    """
    Iterate `better` to (nearly) the full precision of a float.

    The stopping test is a relative change below 1e-15, i.e. 15 significant
    figures, a couple of bits short of the full mantissa to allow for
    rounding jitter.
    """
    for _ in range(max_iterations):
        n = better(start)
        if _converged(n, start, n):
            return n
        start = n
    raise MaxIterationsExceededError(max_iterations)


def fixed_point(f: BetterFunc, start: float) -> FixedPoint:
    """
    Fixed point iteration n1 = f(n0) used by the interpolation tables.

    Stops successfully when the relative change drops below 1e-15. An
    infinite or NaN estimate (or a division by zero inside f) is divergence
    and ends the iteration at once with NoConvergenceError, as does running
    through all 50 rounds.
    """
    n0 = start
    for rounds in range(1, FIXED_POINT_ROUNDS + 1):
        try:
            n1 = f(n0)
        except (ZeroDivisionError, OverflowError):
            logger.debug("fixed point diverged at round %d from n=%r", rounds, n0)
            raise NoConvergenceError(rounds, n0) from None
        if math.isinf(n1) or math.isnan(n1):
            logger.debug("fixed point diverged at round %d: n=%r", rounds, n1)
            raise NoConvergenceError(rounds, n1)
        if _converged(n1, n0, n0):
            return FixedPoint(n1, rounds)
        n0 = n1
    raise NoConvergenceError(FIXED_POINT_ROUNDS, n0)


def binary_root(f: RootFunc, lower: float, upper: float) -> float:
    """
    Find a root of f between lower and upper by bisection.

    f must change sign between the bounds; otherwise the result is not
    meaningful (but no error is raised). Runs 52 rounds unless a midpoint
    hits an exact zero.
    """
    y_lower = f(lower)
    mid = lower
    for _ in range(BINARY_ROOT_ROUNDS):
        mid = (lower + upper) / 2.0
        y_mid = f(mid)
        if y_mid == 0:
            break
        if math.copysign(1.0, y_lower) == math.copysign(1.0, y_mid):
            lower = mid
            y_lower = y_mid
        else:
            upper = mid
    return mid
