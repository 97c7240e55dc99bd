r"""Callback types and data structures for observability.

This module lets users hook into the retry lifecycle for logging,
metrics or alerting. Four hooks are available:

- on_attempt: Called before each attempt of the operation
- on_retry: Called after a failed attempt, before sleeping
- on_success: Called when the operation returns a value
- on_failure: Called when the strategy is exhausted, before the last
  exception is re-raised

Callbacks observe the run; they cannot change whether it retries.

Example:
    ```pycon
    >>> from aretry import max_retries, immediate, run
    >>> from aretry.callbacks import RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"attempt {info.attempt} in {info.delay}ms after {info.error!r}")
    ...
    >>> calls = iter([ValueError("boom"), "ok"])
    >>> def flaky():
    ...     outcome = next(calls)
    ...     if isinstance(outcome, Exception):
    ...         raise outcome
    ...     return outcome
    ...
    >>> run(max_retries(3, immediate()), flaky, on_retry=log_retry)
    attempt 2 in 0ms after ValueError('boom')
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptInfo",
    "FailureInfo",
    "RetryInfo",
    "SuccessInfo",
    "invoke_on_attempt",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class AttemptInfo:
    """Information passed to the on_attempt callback.

    Attributes:
        attempt: The attempt about to start (1-indexed).
    """

    attempt: int


@dataclass
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        attempt: The upcoming attempt (1-indexed). The first retry is
            attempt 2.
        delay: The delay in milliseconds before the upcoming attempt.
        error: The exception raised by the failed attempt.
    """

    attempt: int
    delay: float
    error: Exception


@dataclass
class SuccessInfo:
    """Information passed to the on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed).
        result: The value returned by the operation.
        total_time: Seconds elapsed since the first attempt, sleeps included.
    """

    attempt: int
    result: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to the on_failure callback.

    Attributes:
        attempt: The final attempt (1-indexed).
        error: The exception about to be re-raised.
        total_time: Seconds elapsed since the first attempt, sleeps included.
    """

    attempt: int
    error: Exception
    total_time: float


def invoke_on_attempt(on_attempt: Callable[[AttemptInfo], None] | None, *, attempt: int) -> None:
    """Invoke the on_attempt callback if provided.

    Args:
        on_attempt: Optional callback.
        attempt: The attempt number (0-indexed internally). The callback
            receives it 1-indexed.
    """
    if on_attempt is not None:
        on_attempt(AttemptInfo(attempt=attempt + 1))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    attempt: int,
    delay: float,
    error: Exception,
) -> None:
    """Invoke the on_retry callback if provided.

    Args:
        on_retry: Optional callback.
        attempt: The failed attempt (0-indexed internally). The callback
            receives the next attempt number, 1-indexed: after the first
            failure (``attempt=0``) it receives 2.
        delay: The delay in milliseconds before the next attempt.
        error: The exception raised by the failed attempt.
    """
    if on_retry is not None:
        on_retry(RetryInfo(attempt=attempt + 2, delay=delay, error=error))


def invoke_on_success(
    on_success: Callable[[SuccessInfo], None] | None,
    *,
    attempt: int,
    result: Any,
    start_time: float,
) -> None:
    """Invoke the on_success callback if provided.

    Args:
        on_success: Optional callback.
        attempt: The successful attempt (0-indexed internally).
        result: The value returned by the operation.
        start_time: The ``time.monotonic()`` value when the run started.
    """
    if on_success is not None:
        on_success(
            SuccessInfo(
                attempt=attempt + 1,
                result=result,
                total_time=time.monotonic() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    attempt: int,
    error: Exception,
    start_time: float,
) -> None:
    """Invoke the on_failure callback if provided.

    Args:
        on_failure: Optional callback.
        attempt: The final attempt (0-indexed internally).
        error: The exception about to be re-raised.
        start_time: The ``time.monotonic()`` value when the run started.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(
                attempt=attempt + 1,
                error=error,
                total_time=time.monotonic() - start_time,
            )
        )
