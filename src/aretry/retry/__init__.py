r"""Retry executors and their configuration.

Public API:
    - CallbackConfig: Configuration for lifecycle callbacks
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Blocking retry executor
    - AsyncRetryExecutor: asyncio retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "RetryExecutor",
]

from aretry.retry.config import CallbackConfig
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import CallbackManager
