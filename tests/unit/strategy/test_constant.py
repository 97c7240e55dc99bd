r"""Unit tests for constant, immediate and stop strategies."""

from __future__ import annotations

import math
from itertools import islice

import pytest

from aretry.strategy import ConstantStrategy, StopStrategy, constant, immediate, stop

######################################
#     Tests for ConstantStrategy     #
######################################


@pytest.mark.parametrize("delay", [0, 1, 100, 2.5, 10**30])
def test_constant_every_delay_equal(delay: float) -> None:
    """Test that every delay equals the configured delay."""
    assert constant(delay).take(50) == [delay] * 50


def test_constant_is_infinite() -> None:
    """Test that a constant strategy keeps producing delays."""
    assert sum(1 for _ in islice(constant(10), 10_000)) == 10_000


def test_constant_is_reiterable() -> None:
    strategy = constant(100)
    assert strategy.take(3) == [100, 100, 100]
    assert strategy.take(3) == [100, 100, 100]


def test_constant_strategy_attributes() -> None:
    strategy = ConstantStrategy(delay=250)
    assert strategy.delay == 250
    assert repr(strategy) == "ConstantStrategy(delay=250)"


def test_constant_negative_delay() -> None:
    """Test that negative delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be >= 0, got -1"):
        constant(-1)


def test_constant_nan_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0, got nan"):
        constant(math.nan)


def test_constant_returns_strategy_class() -> None:
    assert isinstance(constant(1), ConstantStrategy)


###############################
#     Tests for immediate     #
###############################


def test_immediate_matches_constant_zero() -> None:
    """Test that immediate() equals constant(0)."""
    assert immediate().take(5) == constant(0).take(5) == [0, 0, 0, 0, 0]


def test_immediate_is_infinite() -> None:
    assert len(immediate().take(1000)) == 1000


##########################
#     Tests for stop     #
##########################


def test_stop_is_empty() -> None:
    """Test that stop() produces no delay at all."""
    assert list(stop()) == []


def test_stop_strategy_class() -> None:
    strategy = stop()
    assert isinstance(strategy, StopStrategy)
    assert repr(strategy) == "StopStrategy()"
    assert strategy.take(5) == []
