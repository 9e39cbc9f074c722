#!/usr/bin/env python3
"""Command line front end for the polynomial extended Euclidean algorithm.

Anything not given on the command line is asked for interactively, unless
``--non-interactive`` is set.

Typical usage example:

    polygcd gcd --f "x^2 - 1" --g "x - 1"
    polygcd --seed 42 trials --count 10
    polygcd bench --length 50 --output plot.png
    polygcd                                  # full interactive session
"""
from __future__ import annotations
import argparse
import logging
import sys
import time
import typing

from rational import DivisionByZero, Rational
from polynomial import Polynomial
from polynomial_parser import parse_polynomial, parse_rational
from euclid import extended_euclidean
import display
import poly_random
import timing

__version__ = "0.1.0"

_logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 5
DEFAULT_LENGTH = 30

Reader = typing.Callable[[str], str]


class Session(typing.NamedTuple):
    interactive: bool
    use_color: bool
    read: Reader = input
    write: typing.Callable[[str], None] = print


def read_int(prompt: str, session: Session, minimum: int = 0) -> int:
    while True:
        raw = session.read(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            session.write("Please enter a whole number.")
            continue
        if value < minimum:
            session.write(f"Please enter a number >= {minimum}.")
            continue
        return value


def read_coefficient(prompt: str, session: Session) -> Rational:
    while True:
        raw = session.read(prompt)
        try:
            return parse_rational(raw)
        except ValueError:
            session.write("Please enter an integer or a fraction such as -3/4.")


def read_polynomial(name: str, session: Session) -> Polynomial:
    """Ask for a degree, then each coefficient from the highest power down."""
    degree = read_int(f"Enter the degree of the {name} polynomial: ", session)
    coeffs = [Rational(0)] * (degree + 1)
    for i in range(degree, -1, -1):
        coeffs[i] = read_coefficient(f"Enter the coefficient for x^{i}: ", session)
    return Polynomial(tuple(coeffs))


def resolve_polynomial(text: str | None, name: str, session: Session) -> Polynomial:
    if text is not None:
        return parse_polynomial(text)
    if not session.interactive:
        raise IOError(f"The {name} polynomial is missing and non-interactive mode is active.")
    return read_polynomial(name, session)


def resolve_count(value: int | None, prompt: str, default: int, session: Session) -> int:
    if value is not None:
        return value
    if not session.interactive:
        return default
    return read_int(prompt, session)


def run_gcd(args: argparse.Namespace, session: Session) -> None:
    f = resolve_polynomial(args.f, "first", session)
    g = resolve_polynomial(args.g, "second", session)
    _logger.info("computing gcd of %s and %s", f, g)

    start = time.perf_counter()
    gcd, s, t = extended_euclidean(f, g)
    elapsed = time.perf_counter() - start

    if f.is_zero() and g.is_zero():
        _logger.warning("both polynomials are zero; the result is degenerate")
    session.write("\n" + display.format_result(gcd, s, t, elapsed, session.use_color))


def run_trials(args: argparse.Namespace, session: Session, rng) -> bool:
    count = resolve_count(args.count, "\nEnter the number of random tests to run: ", DEFAULT_TRIALS, session)
    ok = True
    for trial in poly_random.run_trials(rng, count, args.min_degree, args.max_degree):
        session.write("\n" + display.format_trial(trial, session.use_color))
        ok = ok and trial.verified
    return ok


def run_bench(args: argparse.Namespace, session: Session, rng) -> None:
    length = resolve_count(args.length, "\nEnter the length of random polynomials to test: ", DEFAULT_LENGTH, session)
    if length < 1:
        session.write("Nothing to benchmark.")
        return
    timings = timing.time_by_length(rng, length)
    session.write(
        display.colorize("Total execution time:", display.MAGENTA, session.use_color)
        + " "
        + display.format_seconds(timings.total)
    )
    path = timing.plot_timings(timings, args.output)
    session.write(f"Plot written to {path}")


def option_parents(suppress: bool = False) -> tuple[argparse.ArgumentParser, ...]:
    """Shared option groups; the subcommand copies default to SUPPRESS."""

    def default(value: typing.Any) -> typing.Any:
        return argparse.SUPPRESS if suppress else value

    polys = argparse.ArgumentParser(add_help=False)
    polys.add_argument("--f", default=default(None), help="First polynomial, e.g. \"x^2 - 1\".")
    polys.add_argument("--g", default=default(None), help="Second polynomial, e.g. \"x - 1\".")
    trials = argparse.ArgumentParser(add_help=False)
    trials.add_argument("--count", "-c", type=int, default=default(None), help="Number of random trials.")
    trials.add_argument("--min-degree", type=int, default=default(poly_random.DEFAULT_MIN_DEGREE),
                        help="Smallest degree drawn for trial polynomials.")
    trials.add_argument("--max-degree", type=int, default=default(poly_random.DEFAULT_MAX_DEGREE),
                        help="Largest degree drawn for trial polynomials.")
    bench = argparse.ArgumentParser(add_help=False)
    bench.add_argument("--length", "-l", type=int, default=default(None),
                       help="Largest polynomial length to benchmark.")
    bench.add_argument("--output", "-o", default=default(timing.DEFAULT_PLOT_PATH),
                       help="Where to save the timing plot.")
    return polys, trials, bench


def build_parser() -> argparse.ArgumentParser:
    corep = argparse.ArgumentParser(prog="polygcd", parents=list(option_parents()),
                                    description="Extended Euclidean algorithm for rational polynomials.")
    corep.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    corep.add_argument("--non-interactive", "-n", action="store_true", help="Never prompt for missing input.")
    corep.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    corep.add_argument("--seed", type=int, help="Seed for the random generator.")
    corep.add_argument("--verbose", "-v", action="count", default=0, help="More logging (-v info, -vv debug).")
    polys, trials, bench = option_parents(suppress=True)
    commands = corep.add_subparsers(dest="subcommand", title="Subcommands")
    commands.add_parser("gcd", parents=[polys], help="Compute gcd and Bezout coefficients of two polynomials.")
    commands.add_parser("trials", parents=[trials], help="Run randomized extended Euclidean trials.")
    commands.add_parser("bench", parents=[bench], help="Time the algorithm over growing polynomial lengths.")
    return corep


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def main(argv: list[str] | None = None, read: Reader = input) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    session = Session(not args.non_interactive, not args.no_color, read)
    rng = poly_random.make_rng(args.seed)
    _logger.debug("seed=%s subcommand=%s", args.seed, args.subcommand)

    try:
        match args.subcommand:
            case "gcd":
                run_gcd(args, session)
            case "trials":
                if not run_trials(args, session, rng):
                    return 1
            case "bench":
                run_bench(args, session, rng)
            case _:
                run_gcd(args, session)
                ok = run_trials(args, session, rng)
                run_bench(args, session, rng)
                if not ok:
                    return 1
    except DivisionByZero as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, IOError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
