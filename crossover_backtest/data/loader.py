"""
Load price series from CSV or a DataFrame. Row order is kept as-is (no sorting).
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from crossover_backtest.core.types import PricePoint

logger = logging.getLogger("crossover_backtest.data")


def from_frame(
    df: pd.DataFrame,
    timestamp_col: str = "timestamp",
    price_col: str = "price",
) -> List[PricePoint]:
    """Convert a DataFrame with integer timestamps and float prices to PricePoints."""
    missing = [c for c in (timestamp_col, price_col) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing} (have {list(df.columns)})")
    frame = df[[timestamp_col, price_col]]
    if frame.isna().any().any():
        raise ValueError("Price data contains empty cells")
    series = []
    for ts, px in zip(frame[timestamp_col], frame[price_col]):
        if ts != int(ts):
            raise ValueError(f"Timestamp {ts} is not an integer")
        series.append(PricePoint(timestamp=int(ts), price=float(px)))
    return series


def load_price_csv(
    path: Union[str, Path],
    timestamp_col: str = "timestamp",
    price_col: str = "price",
) -> List[PricePoint]:
    """Read a CSV with timestamp and price columns."""
    df = pd.read_csv(path)
    series = from_frame(df, timestamp_col, price_col)
    logger.info("Loaded %d price points from %s", len(series), path)
    return series
