"""
Trade simulation: a left fold of signals through a FLAT -> LONG/SHORT state machine.

FLAT is only the starting state. The first signal opens a trade; every later
direction flip closes the most recently opened trade at the flip price. By
default a flip does not open a new trade, so subsequent flips re-close the
same trade and its exit moves forward. With reverse_opens_trade=True a flip
also opens a trade in the new direction.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from crossover_backtest.core.exceptions import PriceNotFoundError
from crossover_backtest.core.types import Position, PricePoint, Trade

logger = logging.getLogger("crossover_backtest.backtest.simulator")


@dataclass(frozen=True)
class SimulationState:
    """Accumulator threaded through the fold. `current` is the most recently opened trade."""
    position: Position = Position.FLAT
    trades: Tuple[Trade, ...] = ()
    current: Optional[int] = None


def build_price_index(series: Iterable[PricePoint]) -> Dict[int, float]:
    """Timestamp -> price. The first point wins on duplicate timestamps."""
    index: Dict[int, float] = {}
    for point in series:
        index.setdefault(point.timestamp, point.price)
    return index


def _open(state: SimulationState, side: Position, price: float, timestamp: int) -> SimulationState:
    trade = Trade(entry_price=price, position=side, entry_time=timestamp)
    return SimulationState(position=side, trades=state.trades + (trade,), current=len(state.trades))


def _close_current(state: SimulationState, price: float, timestamp: int) -> Tuple[Trade, ...]:
    trades = list(state.trades)
    trades[state.current] = trades[state.current].close(price, timestamp)
    return tuple(trades)


def step(
    state: SimulationState,
    timestamp: int,
    signal: Position,
    price: float,
    reverse_opens_trade: bool = False,
) -> SimulationState:
    """Apply one signal. Returns a new state; `state` is left untouched."""
    if state.position == Position.FLAT:
        if signal in (Position.LONG, Position.SHORT):
            return _open(state, signal, price, timestamp)
        return state
    if signal == state.position or signal == Position.FLAT:
        return state
    # LONG -> SHORT or SHORT -> LONG
    closed = SimulationState(
        position=signal,
        trades=_close_current(state, price, timestamp),
        current=state.current,
    )
    if reverse_opens_trade:
        return _open(closed, signal, price, timestamp)
    return closed


def simulate_trades(
    series: Sequence[PricePoint],
    signals: Iterable[Tuple[int, Position]],
    reverse_opens_trade: bool = False,
) -> List[Trade]:
    """
    Run signals in order and return trades in the order they were opened.
    Raises PriceNotFoundError if any signal timestamp has no price point.
    """
    prices = build_price_index(series)
    state = SimulationState()
    for timestamp, signal in signals:
        if timestamp not in prices:
            raise PriceNotFoundError(timestamp)
        state = step(state, timestamp, signal, prices[timestamp], reverse_opens_trade)
    open_count = sum(1 for t in state.trades if t.is_open)
    logger.debug("Simulated %d trades (%d open), final position %s",
                 len(state.trades), open_count, state.position.value)
    return list(state.trades)
