"""
Backtest engine: price series -> signals -> trades -> statistics in one pass.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from crossover_backtest.analytics.metrics import PerformanceMetrics, calculate_returns, compute_metrics
from crossover_backtest.backtesting.simulator import simulate_trades
from crossover_backtest.core.types import PricePoint, Signal, Trade
from crossover_backtest.strategies.base import BaseStrategy

logger = logging.getLogger("crossover_backtest.backtest")


@dataclass
class BacktestResult:
    """Backtest output: signals, trades, per-trade returns and metrics."""
    signals: List[Signal] = field(default_factory=list)
    trades: List[Trade] = field(default_factory=list)
    returns: List[float] = field(default_factory=list)
    metrics: Optional[PerformanceMetrics] = None


class BacktestEngine:
    """
    Runs a strategy over an ordered price series. No costs, no sizing:
    returns are per-trade price moves.

    mark_open_trades: value a trade still open at the end at the last price
    instead of reporting a 0.0 return for it.
    """

    def __init__(
        self,
        strategy: BaseStrategy,
        risk_free_rate: float = 0.02,
        reverse_opens_trade: bool = False,
        mark_open_trades: bool = True,
    ):
        self.strategy = strategy
        self.risk_free_rate = risk_free_rate
        self.reverse_opens_trade = reverse_opens_trade
        self.mark_open_trades = mark_open_trades

    def run(self, series: Sequence[PricePoint]) -> BacktestResult:
        """
        Run the full pipeline. PriceNotFoundError, InvalidPriceError and parameter
        errors propagate; undefined statistics come back as None in the metrics.
        """
        logger.info("Backtest start: %d price points", len(series))
        signals = self.strategy.generate_signals(series)
        trades = simulate_trades(series, signals, reverse_opens_trade=self.reverse_opens_trade)
        mark_price = series[-1].price if self.mark_open_trades and len(series) > 0 else None
        returns = calculate_returns(trades, mark_price)
        metrics = compute_metrics(trades, self.risk_free_rate, mark_price)
        logger.info(
            "Backtest done: %d trades (%d open), mean return %s, Sharpe %s",
            metrics.total_trades,
            metrics.open_trades,
            "n/a" if metrics.mean_return is None else f"{metrics.mean_return:.4f}",
            "n/a" if metrics.sharpe_ratio is None else f"{metrics.sharpe_ratio:.4f}",
        )
        return BacktestResult(signals=signals, trades=trades, returns=returns, metrics=metrics)
