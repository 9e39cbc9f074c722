"""
Polynomial long division over the rationals.
"""
from __future__ import annotations
from typing import List, Tuple
import logging

from rational import DivisionByZero, Rational, ZERO
from polynomial import Polynomial

_logger = logging.getLogger(__name__)


def _effective_degree(coeffs: List[Rational], start: int) -> int:
    """Scan down from ``start`` to the highest non-zero index, or -1 if none."""
    d = start
    while d >= 0 and coeffs[d].is_zero():
        d -= 1
    return d


def poly_divmod(p: Polynomial, q: Polynomial) -> Tuple[Polynomial, Polynomial]:
    """Divide ``p`` by ``q`` and return ``(quotient, remainder)``.

    The result satisfies ``p == quotient * q + remainder`` exactly, and the
    remainder is either zero or of lower degree than ``q``.

    Raises DivisionByZero if ``q`` is the zero polynomial.
    """
    if q.is_zero():
        raise DivisionByZero("polynomial division by zero")

    p_deg, q_deg = p.degree(), q.degree()
    if p.is_zero() or p_deg < q_deg:
        return Polynomial.zero(), p

    divisor = q.trimmed()
    lead = divisor[q_deg]
    quotient: List[Rational] = [ZERO] * (p_deg - q_deg + 1)
    remainder: List[Rational] = list(p.trimmed())

    r_deg = p_deg
    while r_deg >= q_deg:
        factor = remainder[r_deg] / lead
        offset = r_deg - q_deg
        quotient[offset] = factor
        for i, c in enumerate(divisor):
            remainder[offset + i] = remainder[offset + i] - factor * c
        # the leading term cancels exactly; lower terms may cancel too
        r_deg = _effective_degree(remainder, r_deg - 1)

    _logger.debug("divmod: deg %d / deg %d -> remainder deg %d", p_deg, q_deg, r_deg)
    if r_deg < 0:
        return Polynomial(tuple(quotient)), Polynomial.zero()
    return Polynomial(tuple(quotient)), Polynomial(tuple(remainder[: r_deg + 1]))


def poly_div(p: Polynomial, q: Polynomial) -> Polynomial:
    return poly_divmod(p, q)[0]


def poly_rem(p: Polynomial, q: Polynomial) -> Polynomial:
    return poly_divmod(p, q)[1]


def divides(q: Polynomial, p: Polynomial) -> bool:
    """True if ``q`` divides ``p`` with zero remainder."""
    return poly_divmod(p, q)[1].is_zero()
