"""Analytics: per-trade returns, Sharpe ratio, aggregate metrics, text report."""

from crossover_backtest.analytics.metrics import (
    PerformanceMetrics,
    calculate_returns,
    calculate_sharpe_ratio,
    compute_metrics,
    mean_return,
    profit_factor,
    trade_return,
    win_rate,
)
from crossover_backtest.analytics.report import format_report

__all__ = [
    "PerformanceMetrics",
    "calculate_returns",
    "calculate_sharpe_ratio",
    "compute_metrics",
    "mean_return",
    "profit_factor",
    "trade_return",
    "win_rate",
    "format_report",
]
