r"""Shared core logic for retry executors.

This module provides helpers used by both the synchronous and the
asynchronous executor: pulling the next delay off the remaining
strategy and logging the lifecycle events.
"""

from __future__ import annotations

__all__ = ["EXHAUSTED", "log_exhausted", "log_retry", "log_success", "next_delay"]

import logging
from typing import TYPE_CHECKING

from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Iterator

# Returned by ``next_delay`` when the strategy has no delay left. A
# sentinel keeps any value a user strategy may yield distinguishable.
EXHAUSTED = object()


def next_delay(delays: Iterator[int | float]) -> int | float | object:
    """Take the next delay off the remaining strategy.

    Args:
        delays: The iterator over the remaining delays.

    Returns:
        The next delay in milliseconds, or ``EXHAUSTED``.
    """
    return next(delays, EXHAUSTED)


def log_retry(logger: logging.Logger, attempt: int, delay: float, error: Exception) -> None:
    """Log a failed attempt that will be retried.

    Args:
        logger: The executor logger.
        attempt: The failed attempt number (0-indexed).
        delay: The delay in milliseconds before the next attempt.
        error: The exception raised by the attempt.
    """
    error_type = type(error).__name__
    log_structured(
        logger,
        logging.DEBUG,
        f"Attempt {attempt + 1} failed with {error_type}: {error}; retrying in {delay}ms",
        attempt=attempt + 1,
        delay_ms=delay,
        error_type=error_type,
    )


def log_exhausted(logger: logging.Logger, attempt: int, error: Exception) -> None:
    """Log a failure that ends the run because the strategy is exhausted.

    Args:
        logger: The executor logger.
        attempt: The final attempt number (0-indexed).
        error: The exception about to be re-raised.
    """
    error_type = type(error).__name__
    log_structured(
        logger,
        logging.DEBUG,
        f"Attempt {attempt + 1} failed with {error_type}: {error}; no retries left",
        attempt=attempt + 1,
        error_type=error_type,
    )


def log_success(logger: logging.Logger, attempt: int) -> None:
    """Log a success that needed at least one retry.

    Args:
        logger: The executor logger.
        attempt: The successful attempt number (0-indexed).
    """
    if attempt > 0:
        log_structured(
            logger,
            logging.DEBUG,
            f"Operation succeeded on attempt {attempt + 1}",
            attempt=attempt + 1,
        )
