from __future__ import annotations

from typing import Optional


class AstroAlgoError(Exception):
    """Base error."""


class InterpolationError(AstroAlgoError, ValueError):
    """Raised by the table interpolators for bad input or no solution."""


class IterationError(AstroAlgoError, ArithmeticError):
    """Raised when an iterative solution cannot be reached."""


class InvalidSampleCountError(InterpolationError):
    """Table constructed with the wrong number of y values."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Argument y must be length {expected} (got {actual})")
        self.expected = expected
        self.actual = actual


class DegenerateAbscissaeError(InterpolationError):
    """First and last abscissae of an equally spaced table coincide."""

    def __init__(self, x: float):
        super().__init__(f"First and last x values cannot be equal (both {x!r})")
        self.value = x


class FactorOutOfRangeError(InterpolationError):
    """Interpolating factor outside [-1, 1] in strict evaluation."""

    def __init__(self, n: float, message: Optional[str] = None):
        super().__init__(message or f"Interpolating factor n must be in range -1 to 1 (got {n!r})")
        self.value = n


class AbscissaOutOfRangeError(FactorOutOfRangeError):
    """Argument x outside the validated support of the table."""

    def __init__(self, x: float):
        super().__init__(x, f"Argument x outside of table range (got {x!r})")


class NoExtremumError(InterpolationError):
    """Table has no curvature, hence no extremum."""

    def __init__(self):
        super().__init__("No extremum in table")


class ExtremumOutsideTableError(InterpolationError):
    """Extremum exists but falls outside the table."""

    def __init__(self, n: Optional[float] = None):
        super().__init__("Extremum falls outside of table")
        self.value = n


class ZeroOutsideTableError(InterpolationError):
    """Zero exists but falls outside the table."""

    def __init__(self, n: float):
        super().__init__("Zero falls outside of table")
        self.value = n


class NoConvergenceError(InterpolationError, IterationError):
    """Fixed point iteration diverged or ran out of rounds."""

    def __init__(self, rounds: int, last: Optional[float] = None):
        super().__init__(f"Failure to converge after {rounds} rounds")
        self.rounds = rounds
        self.value = last


class MaxIterationsExceededError(IterationError):
    """Generic iteration ran past its caller-supplied budget."""

    def __init__(self, max_iterations: int):
        super().__init__(f"Maximum iterations reached ({max_iterations})")
        self.max_iterations = max_iterations
