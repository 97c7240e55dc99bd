r"""Unit tests for parameter validation utilities."""

from __future__ import annotations

import math

import pytest

from aretry.utils.validation import check_non_negative, check_rand_factor, check_retry_count


@pytest.mark.parametrize("value", [0, 0.0, 1, 1.5, 10**40])
def test_check_non_negative_valid(value: float) -> None:
    check_non_negative("delay", value)


@pytest.mark.parametrize("value", [-1, -0.001])
def test_check_non_negative_invalid(value: float) -> None:
    with pytest.raises(ValueError, match=rf"delay must be >= 0, got {value}"):
        check_non_negative("delay", value)


def test_check_non_negative_nan() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0, got nan"):
        check_non_negative("delay", math.nan)


@pytest.mark.parametrize("rand_factor", [0.001, 0.5, 0.999])
def test_check_rand_factor_valid(rand_factor: float) -> None:
    check_rand_factor(rand_factor)


@pytest.mark.parametrize("rand_factor", [0, 0.0, 1, 1.0, -0.5, 2, math.nan])
def test_check_rand_factor_invalid(rand_factor: float) -> None:
    with pytest.raises(ValueError, match=r"rand_factor must be > 0 and < 1"):
        check_rand_factor(rand_factor)


@pytest.mark.parametrize("n", [0, 1, 100])
def test_check_retry_count_valid(n: int) -> None:
    check_retry_count(n)


def test_check_retry_count_negative() -> None:
    with pytest.raises(ValueError, match=r"n must be >= 0, got -3"):
        check_retry_count(-3)


@pytest.mark.parametrize("n", [2.0, "2", False])
def test_check_retry_count_not_integer(n: object) -> None:
    with pytest.raises(ValueError, match=r"n must be an integer"):
        check_retry_count(n)  # type: ignore[arg-type]
