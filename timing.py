"""
Length-vs-time benchmark for the extended Euclidean algorithm.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
import pathlib
import time

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from euclid import extended_euclidean
from poly_random import random_polynomial

_logger = logging.getLogger(__name__)

DEFAULT_PLOT_PATH = "plot.png"
FIGURE_SIZE = (6, 4)  # inches
PLOT_TITLE = "Polynomial Length vs. Execution Time"


@dataclass
class LengthTimings:
    lengths: np.ndarray
    seconds: np.ndarray

    @property
    def cumulative(self) -> np.ndarray:
        return np.cumsum(self.seconds)

    @property
    def total(self) -> float:
        return float(self.seconds.sum())


def time_by_length(rng: np.random.Generator, max_length: int) -> LengthTimings:
    """Time one extended-Euclidean call per polynomial length ``1..max_length``."""
    if max_length < 1:
        raise ValueError("max_length must be at least 1")
    lengths = np.arange(1, max_length + 1)
    seconds = np.zeros(max_length)
    for idx, n in enumerate(lengths):
        f = random_polynomial(rng, int(n))
        g = random_polynomial(rng, int(n))
        start = time.perf_counter()
        extended_euclidean(f, g)
        seconds[idx] = time.perf_counter() - start
        _logger.debug("length %d: %.6fs", n, seconds[idx])
    return LengthTimings(lengths, seconds)


def plot_timings(timings: LengthTimings, path: str | pathlib.Path = DEFAULT_PLOT_PATH) -> pathlib.Path:
    """Plot cumulative execution time against polynomial length and save it."""
    path = pathlib.Path(path)
    fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    try:
        ax.plot(timings.lengths, timings.cumulative)
        ax.set_title(PLOT_TITLE)
        ax.set_xlabel("Polynomial Length")
        ax.set_ylabel("Execution Time (seconds)")
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
    _logger.info("saved timing plot to %s", path)
    return path
