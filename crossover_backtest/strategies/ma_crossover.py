"""
Moving average crossover: LONG when the short SMA is above the long SMA, SHORT otherwise.

Window modes:
- "suffix": averages for point i are taken over prices[i:], i.e. the point and
  everything after it. This looks ahead and is kept as the reference behaviour.
- "trailing": averages over prices[:i + 1], the usual causal window.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

import numpy as np

from crossover_backtest.core.exceptions import EmptySeriesError
from crossover_backtest.core.types import Position, PricePoint, Signal
from crossover_backtest.strategies.base import BaseStrategy

logger = logging.getLogger("crossover_backtest.strategy")

WINDOW_MODES = ("suffix", "trailing")


def sma(series: Sequence[float], period: int) -> float:
    """Mean of the last `period` values (all of them when shorter)."""
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")
    if len(series) == 0:
        raise EmptySeriesError("SMA of an empty series")
    window = np.asarray(series[-period:], dtype=np.float64)
    return float(window.mean())


def _check_periods(short_period: int, long_period: int) -> None:
    if short_period < 1 or long_period < 1:
        raise ValueError(f"periods must be >= 1, got short={short_period} long={long_period}")


def generate_signals(
    series: Sequence[PricePoint],
    short_period: int,
    long_period: int,
    window: str = "suffix",
) -> List[Signal]:
    """
    One signal per price point, same order. Ties between the two averages
    resolve to SHORT.
    """
    _check_periods(short_period, long_period)
    if window not in WINDOW_MODES:
        raise ValueError(f"Unknown window mode: {window!r} (expected one of {WINDOW_MODES})")
    prices = [p.price for p in series]
    signals: List[Signal] = []
    for i, point in enumerate(series):
        sub = prices[i:] if window == "suffix" else prices[: i + 1]
        short_ma = sma(sub, short_period)
        long_ma = sma(sub, long_period)
        side = Position.LONG if short_ma > long_ma else Position.SHORT
        signals.append(Signal(point.timestamp, side))
    return signals


class MACrossoverStrategy(BaseStrategy):
    """Two-SMA comparison, evaluated at every point (no edge detection)."""

    def __init__(self, short_period: int = 5, long_period: int = 20, window: str = "suffix"):
        _check_periods(short_period, long_period)
        if window not in WINDOW_MODES:
            raise ValueError(f"Unknown window mode: {window!r} (expected one of {WINDOW_MODES})")
        if short_period >= long_period:
            logger.warning(
                "short_period (%d) >= long_period (%d); crossover has no meaningful direction",
                short_period, long_period,
            )
        if window == "suffix":
            logger.debug("Suffix windowing uses prices after each signal's timestamp")
        self.short_period = short_period
        self.long_period = long_period
        self.window = window

    def generate_signals(self, series: Sequence[PricePoint]) -> List[Signal]:
        signals = generate_signals(series, self.short_period, self.long_period, self.window)
        longs = sum(1 for s in signals if s.position == Position.LONG)
        logger.debug("Generated %d signals (%d long, %d short)", len(signals), longs, len(signals) - longs)
        return signals
