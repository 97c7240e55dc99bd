r"""aretry - Composable retry strategies and executors.

This package retries fallible operations according to a strategy: a
lazy, possibly infinite sequence of delays in milliseconds. Strategies
are built from generators and bounded or perturbed with combinators,
then handed to an executor together with the operation.

Key Features:
    - Generators: constant, immediate, stop, additive, multiplicative
    - Combinators: randomize (jitter), max_retries, clamp_delay,
      max_delay, max_duration
    - Lazy, re-iterable strategies that never materialize infinite sequences
    - Blocking (``run``) and asyncio (``run_async``) executors
    - Lifecycle callbacks for logging, metrics and alerting
    - Exceptions re-raised unchanged once the strategy is exhausted

Example:
    ```pycon
    >>> from aretry import max_delay, max_retries, multiplicative, randomize, run
    >>> strategy = max_retries(5, randomize(0.2, max_delay(10_000, multiplicative(100, 2))))
    >>> run(strategy, lambda: "ok")
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "BaseStrategy",
    "CallbackConfig",
    "RetryExecutor",
    "__version__",
    "additive",
    "clamp_delay",
    "constant",
    "immediate",
    "max_delay",
    "max_duration",
    "max_retries",
    "multiplicative",
    "randomize",
    "run",
    "run_async",
    "stop",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.combinators import clamp_delay, max_delay, max_duration, max_retries, randomize
from aretry.retry import AsyncRetryExecutor, CallbackConfig, RetryExecutor
from aretry.run import run
from aretry.run_async import run_async
from aretry.strategy import (
    BaseStrategy,
    additive,
    constant,
    immediate,
    multiplicative,
    stop,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
