"""Backtesting: trade simulation state machine and the end-to-end engine."""

from crossover_backtest.backtesting.engine import BacktestEngine, BacktestResult
from crossover_backtest.backtesting.simulator import SimulationState, simulate_trades, step

__all__ = ["BacktestEngine", "BacktestResult", "SimulationState", "simulate_trades", "step"]
