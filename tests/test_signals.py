"""Unit tests for signal generation (suffix and trailing windows)."""

import pytest
from crossover_backtest.core.types import Position, PricePoint, Signal
from crossover_backtest.data.sample import generate_sample_data
from crossover_backtest.strategies.ma_crossover import MACrossoverStrategy, generate_signals

L, S = Position.LONG, Position.SHORT


@pytest.fixture
def rising():
    return [PricePoint(t, 99.0 + t) for t in range(1, 6)]  # 100..104


def test_one_signal_per_point_in_order(rising):
    signals = generate_signals(rising, 2, 3)
    assert len(signals) == 5
    assert [s.timestamp for s in signals] == [1, 2, 3, 4, 5]


def test_suffix_window_looks_ahead(rising):
    # points 1-3 see the tail 102..104; points 4-5 have too few values and tie
    signals = generate_signals(rising, 2, 3)
    assert [s.position for s in signals] == [L, L, L, S, S]


def test_trailing_window(rising):
    signals = generate_signals(rising, 2, 3, window="trailing")
    assert [s.position for s in signals] == [S, S, L, L, L]


def test_tie_resolves_short():
    flat = [PricePoint(t, 50.0) for t in range(4)]
    assert all(s.position == S for s in generate_signals(flat, 2, 3))


def test_never_flat():
    series = generate_sample_data(60)
    signals = generate_signals(series, 5, 20)
    assert len(signals) == 60
    assert all(s.position in (L, S) for s in signals)


def test_signals_are_tuples(rising):
    sig = generate_signals(rising, 2, 3)[0]
    assert isinstance(sig, Signal)
    timestamp, position = sig
    assert (timestamp, position) == (1, L)


def test_empty_series():
    assert generate_signals([], 2, 3) == []


def test_invalid_periods(rising):
    with pytest.raises(ValueError):
        generate_signals(rising, 0, 3)
    with pytest.raises(ValueError):
        generate_signals(rising, 2, -1)


def test_unknown_window(rising):
    with pytest.raises(ValueError):
        generate_signals(rising, 2, 3, window="centered")


def test_strategy_matches_function(rising):
    strategy = MACrossoverStrategy(short_period=2, long_period=3, window="trailing")
    assert strategy.generate_signals(rising) == generate_signals(rising, 2, 3, "trailing")


def test_strategy_warns_on_inverted_periods(caplog):
    with caplog.at_level("WARNING", logger="crossover_backtest.strategy"):
        MACrossoverStrategy(short_period=20, long_period=5)
    assert "short_period" in caplog.text
