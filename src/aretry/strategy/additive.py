r"""Additive (arithmetic) backoff strategy."""

from __future__ import annotations

__all__ = ["AdditiveStrategy", "additive"]

from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterator


class AdditiveStrategy(BaseStrategy):
    """Infinite strategy whose delays grow by a fixed increment.

    The n-th delay (0-indexed) is ``initial_delay + n * increment``.

    Delays are computed by repeated addition. With integer parameters
    Python's arbitrary-precision ``int`` keeps every element exact no
    matter how many retries are consumed; with float parameters the
    sequence saturates at ``math.inf``.

    Args:
        initial_delay: The first delay in milliseconds.
        increment: The amount added to each subsequent delay.

    Raises:
        ValueError: If either parameter is negative.

    Example:
        ```pycon
        >>> from aretry.strategy import AdditiveStrategy
        >>> AdditiveStrategy(initial_delay=100, increment=50).take(4)
        [100, 150, 200, 250]

        ```
    """

    def __init__(self, initial_delay: float, increment: float) -> None:
        check_non_negative("initial_delay", initial_delay)
        check_non_negative("increment", increment)
        self.initial_delay = initial_delay
        self.increment = increment

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay!r}, "
            f"increment={self.increment!r})"
        )

    def __iter__(self) -> Iterator[int | float]:
        delay = self.initial_delay
        while True:
            yield delay
            delay += self.increment


def additive(initial_delay: float, increment: float | None = None) -> AdditiveStrategy:
    """Return an infinite arithmetic strategy.

    With one argument, ``additive(increment)`` is
    ``additive(increment, increment)``: the first delay equals the
    increment.

    Args:
        initial_delay: The first delay in milliseconds, or the increment
            when ``increment`` is omitted.
        increment: The amount added to each subsequent delay.

    Returns:
        The additive strategy.

    Example:
        ```pycon
        >>> from aretry.strategy import additive
        >>> additive(100).take(3)
        [100, 200, 300]
        >>> additive(0, 100).take(3)
        [0, 100, 200]

        ```
    """
    if increment is None:
        increment = initial_delay
    return AdditiveStrategy(initial_delay, increment)
