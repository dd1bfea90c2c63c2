"""
Performance metrics: per-trade returns, Sharpe ratio, win rate, profit factor.
Returns are simple per-trade fractions (0.10 = 10%), not annualized.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from crossover_backtest.core.exceptions import EmptySeriesError, InvalidPriceError, ZeroVarianceError
from crossover_backtest.core.types import Position, Trade

logger = logging.getLogger("crossover_backtest.analytics")


@dataclass
class PerformanceMetrics:
    """Aggregate performance metrics. Undefined statistics are None."""
    total_trades: int
    closed_trades: int
    open_trades: int
    mean_return: Optional[float]
    sharpe_ratio: Optional[float]
    win_rate: float
    profit_factor: float
    best_return: Optional[float]
    worst_return: Optional[float]


def trade_return(trade: Trade, mark_price: Optional[float] = None) -> float:
    """
    Fractional return of one trade. An open trade is valued at mark_price,
    or 0.0 when no mark is given. Raises InvalidPriceError for a zero entry price.
    """
    if trade.position == Position.FLAT:
        return 0.0
    if trade.entry_price == 0:
        raise InvalidPriceError(trade.entry_time, trade.entry_price)
    exit_price = trade.exit_price
    if trade.is_open:
        if mark_price is None:
            return 0.0
        exit_price = mark_price
    if trade.position == Position.LONG:
        return (exit_price - trade.entry_price) / trade.entry_price
    return (trade.entry_price - exit_price) / trade.entry_price


def calculate_returns(trades: Sequence[Trade], mark_price: Optional[float] = None) -> List[float]:
    """One return per trade, same order."""
    return [trade_return(t, mark_price) for t in trades]


def mean_return(returns: Sequence[float]) -> float:
    if len(returns) == 0:
        raise EmptySeriesError("mean of an empty return series")
    return float(np.mean(returns))


def calculate_sharpe_ratio(returns: Sequence[float], risk_free_rate: float) -> float:
    """
    (mean - risk_free_rate) / std, with population std (divide by N).
    Raises EmptySeriesError for no returns and ZeroVarianceError when std is
    0 within rounding noise (eps * n * largest |return|).
    """
    if len(returns) == 0:
        raise EmptySeriesError("Sharpe ratio of an empty return series")
    arr = np.asarray(returns, dtype=np.float64)
    std = float(np.sqrt(np.mean((arr - arr.mean()) ** 2)))
    noise = np.finfo(np.float64).eps * len(arr) * float(np.abs(arr).max())
    if std <= noise:
        raise ZeroVarianceError(f"returns have zero variance (n={len(arr)})")
    return float((arr.mean() - risk_free_rate) / std)


def win_rate(returns: Sequence[float]) -> float:
    """Fraction of trades with positive return."""
    if not returns:
        return 0.0
    return sum(1 for r in returns if r > 0) / len(returns)


def profit_factor(returns: Sequence[float]) -> float:
    """Gross gains / gross losses. inf with gains and no losses, 0 with neither."""
    wins = sum(r for r in returns if r > 0)
    losses = sum(-r for r in returns if r < 0)
    if losses <= 0:
        return float("inf") if wins > 0 else 0.0
    return wins / losses


def compute_metrics(
    trades: Sequence[Trade],
    risk_free_rate: float = 0.0,
    mark_price: Optional[float] = None,
) -> PerformanceMetrics:
    """Compute all metrics. Empty or zero-variance returns give None for mean / Sharpe."""
    returns = calculate_returns(trades, mark_price)
    open_trades = sum(1 for t in trades if t.is_open)
    avg: Optional[float] = None
    sharpe: Optional[float] = None
    try:
        avg = mean_return(returns)
        sharpe = calculate_sharpe_ratio(returns, risk_free_rate)
    except EmptySeriesError:
        logger.warning("No trades; mean return and Sharpe ratio are undefined")
    except ZeroVarianceError as e:
        logger.warning("Sharpe ratio undefined: %s", e)
    return PerformanceMetrics(
        total_trades=len(trades),
        closed_trades=len(trades) - open_trades,
        open_trades=open_trades,
        mean_return=avg,
        sharpe_ratio=sharpe,
        win_rate=win_rate(returns),
        profit_factor=profit_factor(returns),
        best_return=max(returns) if returns else None,
        worst_return=min(returns) if returns else None,
    )
