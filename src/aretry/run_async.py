r"""Run an async operation with retries, yielding between attempts.

This module provides the ``run_async`` function, the higher-order entry
point for the asyncio executor.
"""

from __future__ import annotations

__all__ = ["run_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.retry.config import CallbackConfig
from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo
    from aretry.strategy.base import Strategy

T = TypeVar("T")


async def run_async(
    strategy: Strategy,
    operation: Callable[[], Awaitable[T]],
    *,
    callbacks: CallbackConfig | None = None,
    on_attempt: Callable[[AttemptInfo], None] | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
    on_success: Callable[[SuccessInfo], None] | None = None,
    on_failure: Callable[[FailureInfo], None] | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> T:
    """Await ``operation`` until it succeeds or ``strategy`` is exhausted.

    This is the asyncio counterpart of ``run``: delays are awaited with
    ``asyncio.sleep`` so the event loop keeps serving other tasks.

    Args:
        strategy: The delays in milliseconds.
        operation: Zero-argument callable returning an awaitable. Any
            ``Exception`` raised while awaiting it triggers a retry.
        callbacks: Optional callback configuration.
        on_attempt: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each sleep.
        on_success: Optional callback invoked when the operation succeeds.
        on_failure: Optional callback invoked when no retry is left.
        sleep: Optional coroutine function taking seconds. Defaults to
            ``asyncio.sleep``.

    Returns:
        The value produced by the operation.

    Raises:
        Exception: The exception raised by the last attempt, unchanged.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import immediate, max_retries, run_async
        >>> async def ping():
        ...     return "pong"
        ...
        >>> asyncio.run(run_async(max_retries(2, immediate()), ping))
        'pong'

        ```
    """
    config = (callbacks if callbacks is not None else CallbackConfig()).merge(
        on_attempt=on_attempt,
        on_retry=on_retry,
        on_success=on_success,
        on_failure=on_failure,
    )
    return await AsyncRetryExecutor(strategy, config, sleep=sleep).execute(operation)
