"""Errors raised by the backtest pipeline. Any of them aborts the run."""


class BacktestError(Exception):
    """Base class for pipeline errors."""


class EmptySeriesError(BacktestError):
    """A mean (SMA, average return, Sharpe) was requested over no values."""


class PriceNotFoundError(BacktestError):
    """A signal timestamp has no matching price point in the source series."""

    def __init__(self, timestamp: int):
        super().__init__(f"No price point for timestamp {timestamp}")
        self.timestamp = timestamp


class ZeroVarianceError(BacktestError):
    """Returns have zero standard deviation, so the Sharpe ratio is undefined."""


class InvalidPriceError(BacktestError):
    """A trade was entered at a zero price, so its fractional return is undefined."""

    def __init__(self, timestamp: int, price: float):
        super().__init__(f"Cannot compute a return for a trade entered at price {price} (timestamp {timestamp})")
        self.timestamp = timestamp
        self.price = price
