#!/usr/bin/env python3
"""
Crossover backtester CLI: backtest | signals
Usage:
  python main.py backtest [--config config.yaml] [--data prices.csv]
  python main.py signals [--config config.yaml] [--data prices.csv]
Without --data (or data.file in config) a synthetic sine-wave series is used.
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from crossover_backtest.analytics.report import format_report
from crossover_backtest.backtesting.engine import BacktestEngine
from crossover_backtest.core.config import Config, load_config
from crossover_backtest.core.exceptions import BacktestError
from crossover_backtest.core.logger import setup_logging
from crossover_backtest.core.types import PricePoint
from crossover_backtest.data.loader import load_price_csv
from crossover_backtest.data.sample import generate_sample_data
from crossover_backtest.strategies.ma_crossover import MACrossoverStrategy

ROOT = Path(__file__).resolve().parent

logger = logging.getLogger("crossover_backtest")


def load_series(config: Config, data_path: Optional[Path]) -> List[PricePoint]:
    path = data_path or config.data_file
    if path is not None:
        return load_price_csv(path)
    logger.info("No data file configured, generating %d sample points", config.sample_size)
    return generate_sample_data(config.sample_size)


def run_backtest(config: Config, series: List[PricePoint]) -> int:
    strategy = MACrossoverStrategy(config.short_period, config.long_period, config.window)
    engine = BacktestEngine(
        strategy=strategy,
        risk_free_rate=config.risk_free_rate,
        reverse_opens_trade=config.reverse_opens_trade,
        mark_open_trades=config.mark_open_trades,
    )
    result = engine.run(series)
    print("\n".join(format_report(result)))
    return 0


def run_signals(config: Config, series: List[PricePoint]) -> int:
    strategy = MACrossoverStrategy(config.short_period, config.long_period, config.window)
    for signal in strategy.generate_signals(series):
        print(f"{signal.timestamp}\t{signal.position.value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Moving-average crossover backtester")
    parser.add_argument("mode", choices=["backtest", "signals"], help="Run full backtest or print signals")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--data", type=Path, default=None, help="CSV with timestamp,price columns")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, ROOT)
    except (yaml.YAMLError, ValueError, OSError) as e:
        setup_logging()
        logger.error("Could not load config: %s", e)
        return 1
    setup_logging(config.log_level, config.log_dir, config.log_file)
    try:
        series = load_series(config, args.data)
        if args.mode == "backtest":
            return run_backtest(config, series)
        return run_signals(config, series)
    except (BacktestError, ValueError, OSError) as e:
        logger.error("Run aborted: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
