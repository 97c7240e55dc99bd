r"""Parameter validation utilities for retry strategies.

This module provides validation functions for the numeric parameters of
strategy generators and combinators. They are called at construction
time so that invalid parameters fail fast, before any operation is
invoked.
"""

from __future__ import annotations

__all__ = ["check_non_negative", "check_rand_factor", "check_retry_count"]


def check_non_negative(name: str, value: float) -> None:
    """Check that a numeric parameter is non-negative.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If ``value`` is negative or NaN.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_non_negative
        >>> check_non_negative("delay", 100)
        >>> check_non_negative("delay", -1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be >= 0, got -1

        ```
    """
    if not value >= 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def check_rand_factor(rand_factor: float) -> None:
    """Check that a jitter factor lies in the open interval ``(0, 1)``.

    Args:
        rand_factor: The jitter factor to check.

    Raises:
        ValueError: If ``rand_factor`` is not strictly between 0 and 1.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_rand_factor
        >>> check_rand_factor(0.5)
        >>> check_rand_factor(1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: rand_factor must be > 0 and < 1, got 1.0

        ```
    """
    if not 0 < rand_factor < 1:
        msg = f"rand_factor must be > 0 and < 1, got {rand_factor}"
        raise ValueError(msg)


def check_retry_count(n: int) -> None:
    """Check that a retry count is a non-negative integer.

    Args:
        n: The maximum number of retries.

    Raises:
        ValueError: If ``n`` is not an integer or is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"n must be an integer, got {n!r}"
        raise ValueError(msg)
    check_non_negative("n", n)
