r"""Unit tests for the max_delay combinator."""

from __future__ import annotations

import math

import pytest

from aretry.combinators import MaxDelayStrategy, max_delay
from aretry.strategy import constant, multiplicative, stop


def test_max_delay_multiplicative() -> None:
    """Test that 160 is excluded as it is >= 100."""
    assert list(max_delay(100, multiplicative(10, 2))) == [10, 20, 40, 80]


def test_max_delay_cap_is_exclusive() -> None:
    assert list(max_delay(40, multiplicative(10, 2))) == [10, 20]


def test_max_delay_stops_at_first_large_delay() -> None:
    """Test that delays after the first large one are dropped too."""
    assert list(max_delay(100, [10, 200, 20, 30])) == [10]


def test_max_delay_keeps_values_unchanged() -> None:
    assert list(max_delay(100, [99, 1, 50])) == [99, 1, 50]


def test_max_delay_first_delay_too_large() -> None:
    assert list(max_delay(10, constant(10))) == []


def test_max_delay_zero_cap() -> None:
    assert list(max_delay(0, constant(0))) == []


def test_max_delay_empty_source() -> None:
    assert list(max_delay(100, stop())) == []


def test_max_delay_is_reiterable() -> None:
    strategy = max_delay(50, multiplicative(10, 2))
    assert list(strategy) == list(strategy) == [10, 20, 40]


def test_max_delay_strategy_attributes() -> None:
    strategy = MaxDelayStrategy(100, [1])
    assert strategy.cap == 100
    assert repr(strategy) == "MaxDelayStrategy(cap=100, strategy=[1])"


def test_max_delay_negative_cap() -> None:
    with pytest.raises(ValueError, match=r"cap must be >= 0"):
        max_delay(-5, [1])


def test_max_delay_nan_cap() -> None:
    with pytest.raises(ValueError, match=r"cap must be >= 0, got nan"):
        max_delay(math.nan, [1])
