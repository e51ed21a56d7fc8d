"""Diagnostics package.

- interp_check: cross-checks of the interpolators against numpy
  (requires the diagnostics extra)
"""

__all__ = ["interp_check"]
