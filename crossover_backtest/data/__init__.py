"""Data: synthetic sample series and CSV / DataFrame loading."""

from crossover_backtest.data.loader import from_frame, load_price_csv
from crossover_backtest.data.sample import generate_sample_data

__all__ = ["from_frame", "load_price_csv", "generate_sample_data"]
