"""Synthetic price series for demos and tests."""

from __future__ import annotations
from typing import List

import numpy as np

from crossover_backtest.core.types import PricePoint


def generate_sample_data(
    n: int,
    base: float = 100.0,
    amplitude: float = 10.0,
    period: float = 10.0,
) -> List[PricePoint]:
    """
    n points oscillating around base: price_i = base + sin(i / period) * amplitude,
    timestamps 0..n-1.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    idx = np.arange(n)
    prices = base + np.sin(idx / period) * amplitude
    return [PricePoint(timestamp=int(i), price=float(p)) for i, p in zip(idx, prices)]
