"""
Random polynomials and randomized extended-Euclidean trials.

Every function takes an explicit ``numpy.random.Generator`` so runs can be
reproduced from a seed.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import time

import numpy as np

from polynomial import Polynomial
from euclid import BezoutResult, extended_euclidean

_logger = logging.getLogger(__name__)

DEFAULT_LOW = -5
DEFAULT_HIGH = 5
DEFAULT_MIN_DEGREE = 1
DEFAULT_MAX_DEGREE = 5


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_polynomial(
    rng: np.random.Generator,
    degree: int,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> Polynomial:
    """Integer coefficients drawn uniformly from ``[low, high]``, ``degree + 1`` of them.

    The leading coefficient may come out zero, so the actual degree can be lower.
    """
    if degree < 0:
        raise ValueError("degree must be non-negative")
    if low > high:
        raise ValueError("empty coefficient range")
    coeffs = rng.integers(low, high, size=degree + 1, endpoint=True).tolist()
    return Polynomial.from_ints(*coeffs)


def random_nonzero_polynomial(
    rng: np.random.Generator,
    degree: int,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> Polynomial:
    if low == high == 0:
        raise ValueError("coefficient range only contains zero")
    p = random_polynomial(rng, degree, low, high)
    while p.is_zero():
        p = random_polynomial(rng, degree, low, high)
    return p


@dataclass(frozen=True)
class Trial:
    index: int
    f: Polynomial
    g: Polynomial
    result: BezoutResult
    elapsed: float
    verified: bool


def run_trials(
    rng: np.random.Generator,
    count: int,
    min_degree: int = DEFAULT_MIN_DEGREE,
    max_degree: int = DEFAULT_MAX_DEGREE,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> Iterator[Trial]:
    """Yield ``count`` timed and checked extended-Euclidean runs on random inputs."""
    if min_degree > max_degree:
        raise ValueError("min_degree must not exceed max_degree")
    for i in range(1, count + 1):
        deg_f = int(rng.integers(min_degree, max_degree, endpoint=True))
        deg_g = int(rng.integers(min_degree, max_degree, endpoint=True))
        f = random_polynomial(rng, deg_f, low, high)
        g = random_nonzero_polynomial(rng, deg_g, low, high)

        start = time.perf_counter()
        result = extended_euclidean(f, g)
        elapsed = time.perf_counter() - start

        verified = result.check(f, g)
        if not verified:
            _logger.error("Bezout identity failed for f=%s g=%s", f, g)
        _logger.debug("trial %d: deg %d, %d in %.6fs", i, deg_f, deg_g, elapsed)
        yield Trial(i, f, g, result, elapsed, verified)
