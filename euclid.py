"""
Extended Euclidean algorithm for polynomials over the rationals.

Typical usage:

    f = Polynomial.from_ints(-1, 0, 1)    # x^2 - 1
    g = Polynomial.from_ints(-1, 1)       # x - 1
    gcd, s, t = extended_euclidean(f, g)
    assert s * f + t * g == gcd
"""
from __future__ import annotations
from typing import NamedTuple
import logging

from polynomial import Polynomial
from division import poly_divmod

_logger = logging.getLogger(__name__)


class BezoutResult(NamedTuple):
    """``gcd`` together with Bézout coefficients: ``s*f + t*g == gcd``."""
    gcd: Polynomial
    s: Polynomial
    t: Polynomial

    def check(self, f: Polynomial, g: Polynomial) -> bool:
        return self.s * f + self.t * g == self.gcd


def extended_euclidean(f: Polynomial, g: Polynomial) -> BezoutResult:
    """Compute ``(gcd, s, t)`` with ``s*f + t*g == gcd``.

    The gcd is not made monic; it is whatever scalar multiple the remainder
    sequence ends on. If both inputs are zero the result is the degenerate
    ``(f, 1, 0)``.
    """
    r0, r1 = f, g
    s0, s1 = Polynomial.one(), Polynomial.zero()
    t0, t1 = Polynomial.zero(), Polynomial.one()

    step = 0
    while not r1.is_zero():
        q, r = poly_divmod(r0, r1)
        r0, r1 = r1, r
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
        step += 1
        _logger.debug(
            "euclid step %d: remainder %s",
            step,
            "zero" if r1.is_zero() else f"deg {r1.degree()}",
        )

    if f.is_zero() and g.is_zero():
        _logger.debug("euclid: both operands zero, returning degenerate result")
    return BezoutResult(r0, s0, t0)


def poly_gcd(f: Polynomial, g: Polynomial) -> Polynomial:
    return extended_euclidean(f, g).gcd
