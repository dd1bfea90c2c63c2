"""Abstract strategy: price series in, one signal per point out."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence

from crossover_backtest.core.types import PricePoint, Signal


class BaseStrategy(ABC):
    """Strategy maps an ordered price series to position signals."""

    @abstractmethod
    def generate_signals(self, series: Sequence[PricePoint]) -> List[Signal]:
        """
        Return one Signal per point, in input order. Must not mutate series.
        """
        pass
