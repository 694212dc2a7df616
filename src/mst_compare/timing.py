"""Wall-clock timing helpers."""

from __future__ import annotations

import time
from typing import Callable

import numpy as np


def measure_median(task: Callable[[], object], runs: int) -> float:
    """Run `task` `runs` times and return the median duration in milliseconds.

    For an even number of runs the upper of the two middle samples is used.
    """

    if runs < 1:
        raise ValueError("runs must be at least 1")

    samples = np.empty(runs, dtype=np.float64)
    for attempt in range(runs):
        start = time.perf_counter()
        task()
        samples[attempt] = time.perf_counter() - start
    return float(np.percentile(samples, 50, method="higher")) * 1000.0
