r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a coroutine
operation against a strategy, yielding to the event loop during each
delay instead of blocking the thread.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.executor_core import EXHAUSTED, log_exhausted, log_retry, log_success, next_delay
from aretry.retry.manager import CallbackManager
from aretry.utils.sleep import asleep_ms

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.retry.config import CallbackConfig
    from aretry.strategy.base import Strategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async operation with retries driven by a strategy.

    Same state machine as ``RetryExecutor``: success returns at once,
    a failure with no delay left re-raises the exception unchanged, and
    any other failure waits for the next delay before attempting again.
    Waiting uses ``asyncio.sleep`` so other tasks run meanwhile;
    cancelling the awaiting task aborts the run, including an
    in-progress wait.

    Attributes:
        strategy: The strategy providing delays in milliseconds.
        callbacks: Manager for invoking lifecycle callbacks.
        sleep: Optional coroutine function taking seconds. Defaults to
            ``asyncio.sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.combinators import max_retries
        >>> from aretry.retry import AsyncRetryExecutor
        >>> from aretry.strategy import immediate
        >>> async def fetch():
        ...     return "payload"
        ...
        >>> executor = AsyncRetryExecutor(max_retries(3, immediate()))
        >>> asyncio.run(executor.execute(fetch))
        'payload'

        ```
    """

    def __init__(
        self,
        strategy: Strategy,
        callback_config: CallbackConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.strategy = strategy
        self.callbacks: CallbackManager = CallbackManager(callback_config)
        self.sleep = sleep

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(strategy={self.strategy!r})"

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` until it succeeds or the strategy is exhausted.

        Args:
            operation: Zero-argument callable returning an awaitable, such
                as a coroutine function.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            Exception: The exception raised by the last attempt, unchanged,
                when no delay is left in the strategy.
        """
        start_time = time.monotonic()
        delays = iter(self.strategy)
        attempt = 0
        while True:
            self.callbacks.on_attempt(attempt)
            try:
                result = await operation()
            except Exception as exc:
                delay = next_delay(delays)
                if delay is EXHAUSTED:
                    log_exhausted(logger, attempt, exc)
                    self.callbacks.on_failure(attempt, exc, start_time)
                    raise
                log_retry(logger, attempt, delay, exc)
                self.callbacks.on_retry(attempt, delay, exc)
            else:
                log_success(logger, attempt)
                self.callbacks.on_success(attempt, result, start_time)
                return result

            await asleep_ms(delay, self.sleep)
            attempt += 1
