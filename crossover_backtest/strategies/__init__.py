"""Strategies: base interface and implementations."""

from crossover_backtest.strategies.base import BaseStrategy
from crossover_backtest.strategies.ma_crossover import (
    MACrossoverStrategy,
    generate_signals,
    sma,
)

__all__ = ["BaseStrategy", "MACrossoverStrategy", "generate_signals", "sma"]
