r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that invokes the
user-defined callbacks at each point of the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import Any

from aretry.callbacks import (
    invoke_on_attempt,
    invoke_on_failure,
    invoke_on_retry,
    invoke_on_success,
)
from aretry.retry.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Exceptions raised by callbacks are not caught: they propagate to the
    caller of the executor.

    Attributes:
        callbacks: Configuration containing the lifecycle callbacks.
    """

    def __init__(self, callbacks: CallbackConfig | None = None) -> None:
        self.callbacks = callbacks if callbacks is not None else CallbackConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(callbacks={self.callbacks!r})"

    def on_attempt(self, attempt: int) -> None:
        """Invoke on_attempt.

        Args:
            attempt: Current attempt number (0-indexed).
        """
        invoke_on_attempt(self.callbacks.on_attempt, attempt=attempt)

    def on_retry(self, attempt: int, delay: float, error: Exception) -> None:
        """Invoke on_retry.

        Args:
            attempt: The failed attempt number (0-indexed).
            delay: Delay in milliseconds before the next attempt.
            error: Exception raised by the failed attempt.
        """
        invoke_on_retry(self.callbacks.on_retry, attempt=attempt, delay=delay, error=error)

    def on_success(self, attempt: int, result: Any, start_time: float) -> None:
        """Invoke on_success.

        Args:
            attempt: The successful attempt number (0-indexed).
            result: Value returned by the operation.
            start_time: ``time.monotonic()`` value when the run started.
        """
        invoke_on_success(
            self.callbacks.on_success, attempt=attempt, result=result, start_time=start_time
        )

    def on_failure(self, attempt: int, error: Exception, start_time: float) -> None:
        """Invoke on_failure.

        Args:
            attempt: The final attempt number (0-indexed).
            error: Exception about to be re-raised.
            start_time: ``time.monotonic()`` value when the run started.
        """
        invoke_on_failure(
            self.callbacks.on_failure, attempt=attempt, error=error, start_time=start_time
        )
