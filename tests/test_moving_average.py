"""Unit tests for strategies.ma_crossover.sma."""

import pytest
from crossover_backtest.core.exceptions import EmptySeriesError
from crossover_backtest.strategies.ma_crossover import sma


def test_sma_last_period_values():
    assert sma([1.0, 2.0, 3.0, 4.0, 5.0], 3) == pytest.approx(4.0)


def test_sma_shorter_than_period_uses_all():
    assert sma([2.0, 4.0], 5) == pytest.approx(3.0)


def test_sma_period_equals_length():
    assert sma([1.0, 2.0, 3.0], 3) == pytest.approx(2.0)


def test_sma_period_one_is_last_value():
    assert sma([7.0, 8.0, 9.5], 1) == 9.5


def test_sma_empty_raises():
    with pytest.raises(EmptySeriesError):
        sma([], 3)


def test_sma_invalid_period():
    with pytest.raises(ValueError):
        sma([1.0, 2.0], 0)


def test_sma_does_not_mutate_input():
    values = [5.0, 1.0, 3.0]
    sma(values, 2)
    assert values == [5.0, 1.0, 3.0]
