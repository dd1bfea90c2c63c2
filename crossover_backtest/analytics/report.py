"""Plain-text backtest report."""

from __future__ import annotations
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from crossover_backtest.backtesting.engine import BacktestResult


def _pct(value) -> str:
    return "n/a" if value is None else f"{value * 100:.2f}%"


def format_report(result: "BacktestResult") -> List[str]:
    """Summary lines followed by one line per trade."""
    m = result.metrics
    sharpe = "n/a" if m is None or m.sharpe_ratio is None else f"{m.sharpe_ratio:.2f}"
    lines = [
        f"Number of trades: {len(result.trades)}",
        f"Average return: {_pct(m.mean_return if m else None)}",
        f"Sharpe ratio: {sharpe}",
    ]
    if m and m.total_trades:
        lines.append(f"Win rate: {m.win_rate * 100:.1f}%")
    for trade, ret in zip(result.trades, result.returns):
        exit_text = "exit open" if trade.is_open else f"exit at {trade.exit_price:.2f}"
        lines.append(
            f"Trade: {trade.position.value} at {trade.entry_price:.2f}, {exit_text}, return: {_pct(ret)}"
        )
    return lines
