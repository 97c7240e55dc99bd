r"""Sleep helpers for retry delays expressed in milliseconds.

Strategies produce delays in milliseconds while ``time.sleep`` and
``asyncio.sleep`` take seconds. These helpers perform the conversion and
dispatch to an injectable sleep function.

Delays too large for the platform are saturated: the conversion returns
``math.inf`` for integers beyond the float range, and the actual sleep
is capped at ``MAX_SLEEP_SECONDS``, the longest timeout the standard
library blocking primitives accept (``threading.TIMEOUT_MAX``, centuries
on 64-bit platforms).
"""

from __future__ import annotations

__all__ = [
    "MAX_SLEEP_SECONDS",
    "MILLISECONDS_PER_SECOND",
    "asleep_ms",
    "sleep_ms",
    "to_seconds",
]

import asyncio
import logging
import math
import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)

MILLISECONDS_PER_SECOND = 1000
MAX_SLEEP_SECONDS: float = threading.TIMEOUT_MAX


def to_seconds(delay: float) -> float:
    """Convert a delay in milliseconds to seconds.

    Args:
        delay: The delay in milliseconds.

    Returns:
        The delay in seconds, or ``math.inf`` if ``delay`` is an integer
        whose value in seconds does not fit in a float.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import to_seconds
        >>> to_seconds(1500)
        1.5
        >>> to_seconds(0)
        0.0
        >>> to_seconds(10**400)
        inf

        ```
    """
    try:
        return delay / MILLISECONDS_PER_SECOND
    except OverflowError:
        return math.inf


def sleep_ms(delay: float, sleep: Callable[[float], None] | None = None) -> None:
    """Block the calling thread for ``delay`` milliseconds.

    Args:
        delay: The delay in milliseconds. Waits longer than
            ``MAX_SLEEP_SECONDS`` are capped.
        sleep: Optional sleep function taking seconds. Defaults to
            ``time.sleep``, resolved at call time.
    """
    seconds = min(to_seconds(delay), MAX_SLEEP_SECONDS)
    logger.debug(f"Sleeping {seconds:.3f}s before retry")
    if sleep is None:
        time.sleep(seconds)
    else:
        sleep(seconds)


async def asleep_ms(
    delay: float, sleep: Callable[[float], Awaitable[None]] | None = None
) -> None:
    """Suspend the current task for ``delay`` milliseconds.

    Args:
        delay: The delay in milliseconds. Waits longer than
            ``MAX_SLEEP_SECONDS`` are capped.
        sleep: Optional coroutine function taking seconds. Defaults to
            ``asyncio.sleep``, resolved at call time.
    """
    seconds = min(to_seconds(delay), MAX_SLEEP_SECONDS)
    logger.debug(f"Sleeping {seconds:.3f}s before retry")
    if sleep is None:
        await asyncio.sleep(seconds)
    else:
        await sleep(seconds)
