"""astroalgo public API.

Keep this surface small: the interpolation tables and iteration primitives
are re-exported here; the formula modules live in astroalgo.reference.
"""

from .core.errors import (
    AstroAlgoError,
    InterpolationError,
    IterationError,
    InvalidSampleCountError,
    DegenerateAbscissaeError,
    FactorOutOfRangeError,
    AbscissaOutOfRangeError,
    NoExtremumError,
    ExtremumOutsideTableError,
    ZeroOutsideTableError,
    NoConvergenceError,
    MaxIterationsExceededError,
)
from .core.types import Sample
from .numeric.interp import (
    InterpolationTable,
    Len3,
    Len5,
    len4_half,
    lagrange,
    lagrange_poly,
)
from .numeric.iterate import (
    decimal_places,
    full_precision,
    binary_root,
)

__version__ = "0.1.0"

__all__ = [
    "AstroAlgoError",
    "InterpolationError",
    "IterationError",
    "InvalidSampleCountError",
    "DegenerateAbscissaeError",
    "FactorOutOfRangeError",
    "AbscissaOutOfRangeError",
    "NoExtremumError",
    "ExtremumOutsideTableError",
    "ZeroOutsideTableError",
    "NoConvergenceError",
    "MaxIterationsExceededError",
    "Sample",
    "InterpolationTable",
    "Len3",
    "Len5",
    "len4_half",
    "lagrange",
    "lagrange_poly",
    "decimal_places",
    "full_precision",
    "binary_root",
]
