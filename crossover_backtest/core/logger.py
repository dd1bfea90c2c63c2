"""
Logging for backtest runs. Log records go to stderr (and optionally a file);
stdout carries only the report and signal listings printed by main.py.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the `crossover_backtest` logger that the strategy, simulator,
    engine, analytics and data modules log under. Unknown level names fall
    back to INFO. A file handler is added only when both log_dir and
    log_file are set. Safe to call more than once per process.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger("crossover_backtest")
    root.setLevel(log_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir and log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    return root
