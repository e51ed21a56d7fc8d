from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Callable, Dict, List

from . import config
from .core.angles import time_to_hms
from .core.errors import AstroAlgoError
from .core.types import Sample

logger = logging.getLogger(__name__)

_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def _fmt_time(sec: float) -> str:
    h, m, s = time_to_hms(sec)
    return f"{h:02d}h{m:02d}m{s:07.4f}s"


def cmd_jd(argv: List[str]) -> int:
    from .reference import julian

    p = argparse.ArgumentParser(prog="astroalgo jd", description="Calendar date -> Julian day.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=float, help="day of month, may carry a fraction")
    p.add_argument("--julian", action="store_true", help="date is in the Julian calendar")
    args = p.parse_args(argv)

    if args.julian:
        jd = julian.calendar_julian_to_jd(args.year, args.month, args.day)
    else:
        jd = julian.calendar_gregorian_to_jd(args.year, args.month, args.day)
    print(f"JD = {jd:.{config.get_decimals()}f}")
    return 0


def cmd_calendar(argv: List[str]) -> int:
    from .reference import julian

    p = argparse.ArgumentParser(prog="astroalgo calendar", description="Julian day -> calendar date.")
    p.add_argument("jd", type=float)
    args = p.parse_args(argv)

    cd = julian.jd_to_calendar(args.jd)
    kind = "Gregorian" if args.jd >= 2299160.5 else "Julian"
    print(f"{cd.year} {cd.month:02d} {cd.day:.{config.get_decimals()}f} ({kind})")
    print(f"Day of week: {_WEEKDAYS[julian.day_of_week(args.jd)]}")
    return 0


def cmd_sidereal(argv: List[str]) -> int:
    from .reference import sidereal

    p = argparse.ArgumentParser(prog="astroalgo sidereal", description="Sidereal time at Greenwich.")
    p.add_argument("jd", type=float, help="Julian day (UT)")
    args = p.parse_args(argv)

    print(f"Mean:     {_fmt_time(sidereal.mean(args.jd))}")
    print(f"Apparent: {_fmt_time(sidereal.apparent(args.jd))}")
    return 0


def cmd_eqtime(argv: List[str]) -> int:
    from .reference import eqtime

    p = argparse.ArgumentParser(prog="astroalgo eqtime", description="Equation of time (Smart).")
    p.add_argument("jde", type=float)
    args = p.parse_args(argv)

    e = eqtime.e_smart(args.jde)
    decimals = config.get_decimals()
    print(f"E = {e:+.{decimals}f} rad = {eqtime.e_smart_minutes(args.jde):+.{decimals}f} min")
    return 0


def cmd_interp(argv: List[str]) -> int:
    from .numeric import interp

    p = argparse.ArgumentParser(
        prog="astroalgo interp",
        description="Interpolate in a table of 3 or 5 equally spaced rows, or any rows with --xs.",
    )
    p.add_argument("y", type=float, nargs="+", help="tabular y values")
    p.add_argument("--x1", type=float, help="x of the first row (equally spaced tables)")
    p.add_argument("--xn", type=float, help="x of the last row (equally spaced tables)")
    p.add_argument("--xs", type=float, nargs="+", help="x of every row (Lagrange)")
    p.add_argument("--at", type=float, help="interpolate y at this x")
    p.add_argument("--extremum", action="store_true")
    p.add_argument("--zero", action="store_true")
    p.add_argument("--strong", action="store_true", help="use the strong estimate for --zero")
    args = p.parse_args(argv)
    decimals = config.get_decimals()

    if args.xs is not None:
        if len(args.xs) != len(args.y):
            p.error("--xs and y must have the same length")
        if args.at is None:
            p.error("--at is required with --xs")
        rows = [Sample(x, y) for x, y in zip(args.xs, args.y)]
        print(f"y({args.at}) = {interp.lagrange(args.at, rows):.{decimals}f}")
        return 0

    if args.x1 is None or args.xn is None:
        p.error("--x1 and --xn are required for equally spaced tables")
    if len(args.y) == 5:
        table: interp.InterpolationTable = interp.Len5(args.x1, args.xn, args.y)
    else:
        table = interp.Len3(args.x1, args.xn, args.y)
    logger.debug("interpolating in %r", table)

    if args.at is not None:
        print(f"y({args.at}) = {table.interpolate_x(args.at):.{decimals}f}")
    if args.extremum:
        x, y = table.extremum()
        print(f"extremum: x = {x:.{decimals}f}, y = {y:.{decimals}f}")
    if args.zero:
        print(f"zero: x = {table.zero(args.strong):.{decimals}f}")
    return 0


def cmd_kepler(argv: List[str]) -> int:
    from .numeric import iterate

    p = argparse.ArgumentParser(prog="astroalgo kepler", description="Solve Kepler's equation E = M + e sin E.")
    p.add_argument("M", type=float, help="mean anomaly, degrees")
    p.add_argument("e", type=float, help="eccentricity, 0 <= e < 1")
    p.add_argument("--places", type=int, help="stop at this many decimal places instead of full precision")
    args = p.parse_args(argv)
    if not 0.0 <= args.e < 1.0:
        p.error("eccentricity must be in [0, 1)")

    M = math.radians(args.M)
    max_iterations = config.get_max_iterations()

    def better(E: float) -> float:
        return M + args.e * math.sin(E)

    if args.places is None:
        E = iterate.full_precision(better, M, max_iterations)
    else:
        E = iterate.decimal_places(better, M, args.places, max_iterations)
    print(f"E = {math.degrees(E):.{config.get_decimals()}f} deg")
    return 0


def cmd_pluto(argv: List[str]) -> int:
    from .reference import pluto

    p = argparse.ArgumentParser(prog="astroalgo pluto", description="Heliocentric position of Pluto (J2000).")
    p.add_argument("jde", type=float)
    args = p.parse_args(argv)

    l, b, r = pluto.heliocentric(args.jde)
    decimals = config.get_decimals()
    print(f"l = {math.degrees(l) % 360.0:.{decimals}f} deg")
    print(f"b = {math.degrees(b):.{decimals}f} deg")
    print(f"r = {r:.{decimals}f} AU")
    return 0


def cmd_magnitude(argv: List[str]) -> int:
    from .reference import stellar

    p = argparse.ArgumentParser(prog="astroalgo magnitude", description="Combined magnitude of several stars.")
    p.add_argument("m", type=float, nargs="+")
    args = p.parse_args(argv)

    print(f"m = {stellar.magnitude_sum_n(*args.m):.{config.get_decimals()}f}")
    return 0


def cmd_diag(argv: List[str]) -> int:
    from .diagnostics import interp_check

    return interp_check.main(argv)


_COMMANDS: Dict[str, Callable[[List[str]], int]] = {
    "jd": cmd_jd,
    "calendar": cmd_calendar,
    "sidereal": cmd_sidereal,
    "eqtime": cmd_eqtime,
    "interp": cmd_interp,
    "kepler": cmd_kepler,
    "pluto": cmd_pluto,
    "magnitude": cmd_magnitude,
    "diag": cmd_diag,
}


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="astroalgo", description="Astronomical algorithms")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("jd", help="Calendar date -> Julian day")
    sub.add_parser("calendar", help="Julian day -> calendar date and weekday")
    sub.add_parser("sidereal", help="Mean and apparent sidereal time at Greenwich")
    sub.add_parser("eqtime", help="Equation of time")
    sub.add_parser("interp", help="Table interpolation, extremum and zero")
    sub.add_parser("kepler", help="Eccentric anomaly from Kepler's equation")
    sub.add_parser("pluto", help="Heliocentric position of Pluto")
    sub.add_parser("magnitude", help="Combined magnitude of several stars")
    sub.add_parser("diag", help="Cross-check the interpolators against numpy (needs numpy)")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.cmd](rest)
    except AstroAlgoError as e:
        print(f"astroalgo {args.cmd}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
