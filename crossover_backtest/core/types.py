"""
Core data types for price points, positions, signals, and trades.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional


class Position(str, Enum):
    LONG = "Long"
    SHORT = "Short"
    FLAT = "Flat"


@dataclass(frozen=True)
class PricePoint:
    """One price observation."""
    timestamp: int
    price: float


class Signal(NamedTuple):
    """Desired position at a timestamp. Only LONG or SHORT are ever generated."""
    timestamp: int
    position: Position


@dataclass(frozen=True)
class Trade:
    """
    A position opened at entry_time. exit_price / exit_time stay None until
    an opposite signal closes it.
    """
    entry_price: float
    position: Position
    entry_time: int
    exit_price: Optional[float] = None
    exit_time: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.exit_time is None

    def close(self, price: float, timestamp: int) -> "Trade":
        """Return a copy with the exit filled in (overwrites an earlier exit)."""
        return replace(self, exit_price=price, exit_time=timestamp)
