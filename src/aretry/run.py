r"""Run an operation with retries, blocking between attempts.

This module provides the ``run`` function, the higher-order entry point
for the blocking executor.
"""

from __future__ import annotations

__all__ = ["run"]

from typing import TYPE_CHECKING, TypeVar

from aretry.retry.config import CallbackConfig
from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo
    from aretry.strategy.base import Strategy

T = TypeVar("T")


def run(
    strategy: Strategy,
    operation: Callable[[], T],
    *,
    callbacks: CallbackConfig | None = None,
    on_attempt: Callable[[AttemptInfo], None] | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
    on_success: Callable[[SuccessInfo], None] | None = None,
    on_failure: Callable[[FailureInfo], None] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> T:
    """Call ``operation`` until it returns or ``strategy`` is exhausted.

    The operation is attempted once, then once more after each delay of
    the strategy, so a strategy with N delays allows up to N + 1
    attempts. The calling thread sleeps during each delay.

    Args:
        strategy: The delays in milliseconds, e.g.
            ``max_retries(5, multiplicative(100, 2))`` or a plain list.
        operation: Zero-argument callable to run. Any ``Exception`` it
            raises triggers a retry.
        callbacks: Optional callback configuration.
        on_attempt: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each sleep.
        on_success: Optional callback invoked when the operation returns.
        on_failure: Optional callback invoked when no retry is left.
        sleep: Optional sleep function taking seconds. Defaults to
            ``time.sleep``.

    Returns:
        The value returned by the operation.

    Raises:
        Exception: The exception raised by the last attempt, unchanged.

    Example:
        ```pycon
        >>> from aretry import run
        >>> attempts = []
        >>> def flaky():
        ...     attempts.append(1)
        ...     if len(attempts) < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "done"
        ...
        >>> run([100, 100, 100], flaky, sleep=lambda seconds: None)
        'done'
        >>> len(attempts)
        3

        ```
    """
    config = (callbacks if callbacks is not None else CallbackConfig()).merge(
        on_attempt=on_attempt,
        on_retry=on_retry,
        on_success=on_success,
        on_failure=on_failure,
    )
    return RetryExecutor(strategy, config, sleep=sleep).execute(operation)
