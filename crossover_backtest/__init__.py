"""Moving-average crossover backtester: signals, trade simulation, performance statistics."""

__version__ = "0.1.0"
