r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs an operation
against a strategy, blocking the calling thread during each delay.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.executor_core import EXHAUSTED, log_exhausted, log_retry, log_success, next_delay
from aretry.retry.manager import CallbackManager
from aretry.utils.sleep import sleep_ms

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry.config import CallbackConfig
    from aretry.strategy.base import Strategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an operation with retries driven by a strategy.

    The run is a small state machine. Each attempt invokes the
    operation:

    - If it returns, the value is returned immediately without sleeping.
    - If it raises an ``Exception`` and the strategy has no delay left,
      the same exception is re-raised unchanged.
    - Otherwise the next delay is taken off the strategy, the calling
      thread sleeps for it, and the operation is attempted again.

    Any ``Exception`` triggers a retry; the executor never inspects its
    type. ``BaseException`` subclasses such as ``KeyboardInterrupt``
    propagate immediately. Attempts are strictly sequential and consumed
    delays are never reused.

    Attributes:
        strategy: The strategy providing delays in milliseconds.
        callbacks: Manager for invoking lifecycle callbacks.
        sleep: Optional sleep function taking seconds. Defaults to
            ``time.sleep``.

    Example:
        ```pycon
        >>> from aretry.combinators import max_retries
        >>> from aretry.retry import RetryExecutor
        >>> from aretry.strategy import constant
        >>> executor = RetryExecutor(max_retries(3, constant(100)), sleep=lambda s: None)
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(
        self,
        strategy: Strategy,
        callback_config: CallbackConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.strategy = strategy
        self.callbacks: CallbackManager = CallbackManager(callback_config)
        self.sleep = sleep

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(strategy={self.strategy!r})"

    def execute(self, operation: Callable[[], T]) -> T:
        """Run ``operation`` until it succeeds or the strategy is exhausted.

        Args:
            operation: Zero-argument callable to run.

        Returns:
            The value returned by the first successful attempt.

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
                result = operation()
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

            sleep_ms(delay, self.sleep)
            attempt += 1
