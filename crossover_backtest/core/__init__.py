"""Core: config, types, errors, logging."""

from crossover_backtest.core.config import load_config, Config
from crossover_backtest.core.exceptions import (
    BacktestError,
    EmptySeriesError,
    InvalidPriceError,
    PriceNotFoundError,
    ZeroVarianceError,
)
from crossover_backtest.core.types import PricePoint, Position, Signal, Trade
from crossover_backtest.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "BacktestError",
    "EmptySeriesError",
    "InvalidPriceError",
    "PriceNotFoundError",
    "ZeroVarianceError",
    "PricePoint",
    "Position",
    "Signal",
    "Trade",
    "setup_logging",
]
