from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from polynomial import Polynomial

if TYPE_CHECKING:
    from poly_random import Trial

BLUE = "\033[1;34m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
CYAN = "\033[1;36m"
MAGENTA = "\033[1;35m"
RED = "\033[1;31m"
RESET = "\033[0m"


def colorize(text: str, color: str, use_color: bool = True) -> str:
    if not use_color:
        return text
    return f"{color}{text}{RESET}"


def format_lines(rows: List[Tuple[str, str, object]], use_color: bool = True) -> str:
    """Render ``(label, color, value)`` rows as ``label value`` lines."""
    return "\n".join(
        f"{colorize(label, color, use_color)} {value}" for label, color, value in rows
    )


def format_seconds(elapsed: float) -> str:
    return f"{elapsed:.6f} seconds"


def format_result(
    gcd: Polynomial,
    s: Polynomial,
    t: Polynomial,
    elapsed: float,
    use_color: bool = True,
) -> str:
    return format_lines(
        [
            ("GCD of the two polynomials:", YELLOW, gcd),
            ("U(x):", CYAN, s),
            ("V(x):", CYAN, t),
            ("Execution time:", MAGENTA, format_seconds(elapsed)),
        ],
        use_color,
    )


def format_trial(trial: Trial, use_color: bool = True) -> str:
    header = f"{colorize('Test', BLUE, use_color)} {trial.index}"
    status = (
        colorize("identity holds", GREEN, use_color)
        if trial.verified
        else colorize("IDENTITY FAILED", RED, use_color)
    )
    body = format_lines(
        [
            ("f(x):", GREEN, trial.f),
            ("g(x):", GREEN, trial.g),
            ("GCD:", YELLOW, trial.result.gcd),
            ("s(x):", CYAN, trial.result.s),
            ("t(x):", CYAN, trial.result.t),
            ("Execution time:", MAGENTA, format_seconds(trial.elapsed)),
            ("Bezout check:", MAGENTA, status),
        ],
        use_color,
    )
    return f"{header}\n{body}"
