#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

from astroalgo.core.types import Sample
from astroalgo.numeric.interp import Len3, Len5, lagrange, lagrange_poly


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astroalgo[diagnostics]"') from e


@dataclass(frozen=True)
class Residuals:
    name: str
    trials: int
    max_abs: float


def _random_rows(np, rng, rows: int):
    """Sorted random abscissae with their ordinates, or None when two x are too close."""
    xs = np.sort(rng.uniform(-2.0, 2.0, rows))
    if np.min(np.diff(xs)) < 1e-3:
        return None
    ys = rng.normal(size=rows)
    return xs, ys, [Sample(x, y) for x, y in zip(xs.tolist(), ys.tolist())]


def check_lagrange_poly(np, *, rows: int = 6, trials: int = 200, seed: int = 1) -> Residuals:
    """
    Max |coefficient difference| between lagrange_poly and numpy.polyfit
    on random tables of unequally spaced rows.

    Tables with nearly repeated x are skipped and not counted.
    """
    rng = np.random.default_rng(seed)
    worst = 0.0
    ran = 0
    for _ in range(trials):
        drawn = _random_rows(np, rng, rows)
        if drawn is None:
            continue
        xs, ys, table = drawn
        ours = np.array(lagrange_poly(table))
        # polyfit is highest degree first
        ref = np.polyfit(xs, ys, rows - 1)[::-1]
        worst = max(worst, float(np.max(np.abs(ours - ref))))
        ran += 1
    return Residuals("lagrange_poly vs polyfit", ran, worst)


def check_lagrange(np, *, rows: int = 6, trials: int = 200, seed: int = 2) -> Residuals:
    """Max |y difference| between lagrange and numpy.polyval of the exact fit."""
    rng = np.random.default_rng(seed)
    worst = 0.0
    ran = 0
    for _ in range(trials):
        drawn = _random_rows(np, rng, rows)
        if drawn is None:
            continue
        xs, ys, table = drawn
        fit = np.polyfit(xs, ys, rows - 1)
        x = float(rng.uniform(xs[0], xs[-1]))
        ours = lagrange(x, table)
        worst = max(worst, abs(ours - float(np.polyval(fit, x))))
        ran += 1
    return Residuals("lagrange vs polyval", ran, worst)


def check_tables(np, *, trials: int = 200, seed: int = 3) -> List[Residuals]:
    """
    Len3/Len5 against numpy.polyval on tables sampled from random
    quadratics/quartics, evaluated across the table.
    """
    rng = np.random.default_rng(seed)
    out = []
    for size, cls in ((3, Len3), (5, Len5)):
        worst = 0.0
        for _ in range(trials):
            coeffs = rng.normal(size=size)
            x1 = float(rng.uniform(-10.0, 10.0))
            step = float(rng.uniform(0.1, 2.0))
            xs = x1 + step * np.arange(size)
            table = cls(float(xs[0]), float(xs[-1]), np.polyval(coeffs, xs).tolist())
            for x in np.linspace(xs[0], xs[-1], 17):
                worst = max(worst, abs(table.interpolate_x(float(x)) - float(np.polyval(coeffs, x))))
        out.append(Residuals(f"{cls.__name__} vs polyval", trials, worst))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Cross-check the interpolators against numpy.")
    p.add_argument("--trials", type=int, default=200)
    p.add_argument("--rows", type=int, default=6, help="rows of the Lagrange tables")
    p.add_argument("--seed", type=int, default=1)
    args = p.parse_args(argv)

    np = _need_numpy()

    results = [
        check_lagrange_poly(np, rows=args.rows, trials=args.trials, seed=args.seed),
        check_lagrange(np, rows=args.rows, trials=args.trials, seed=args.seed + 1),
        *check_tables(np, trials=args.trials, seed=args.seed + 2),
    ]
    for r in results:
        print(f"{r.name:28s} trials={r.trials:5d}  max |residual| = {r.max_abs:.3e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
