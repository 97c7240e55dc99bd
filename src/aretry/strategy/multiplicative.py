r"""Multiplicative (geometric) backoff strategy."""

from __future__ import annotations

__all__ = ["MultiplicativeStrategy", "multiplicative"]

from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterator


class MultiplicativeStrategy(BaseStrategy):
    """Infinite strategy whose delays grow by a fixed factor.

    The n-th delay (0-indexed) is ``initial_delay * multiplier ** n``.

    Delays are computed by repeated multiplication of the previous delay
    rather than with ``**``, so the sequence never raises
    ``OverflowError``. Integer parameters stay exact through Python's
    arbitrary-precision ``int``; float parameters saturate at
    ``math.inf`` once they exceed ``sys.float_info.max``. Combine with
    ``max_delay`` or ``clamp_delay`` to keep waits practical.

    Args:
        initial_delay: The first delay in milliseconds.
        multiplier: The factor applied to each subsequent delay.

    Raises:
        ValueError: If either parameter is negative.

    Example:
        ```pycon
        >>> from aretry.strategy import MultiplicativeStrategy
        >>> MultiplicativeStrategy(initial_delay=10, multiplier=2).take(5)
        [10, 20, 40, 80, 160]
        >>> MultiplicativeStrategy(initial_delay=100, multiplier=1.5).take(3)
        [100, 150.0, 225.0]

        ```
    """

    def __init__(self, initial_delay: float, multiplier: float) -> None:
        check_non_negative("initial_delay", initial_delay)
        check_non_negative("multiplier", multiplier)
        self.initial_delay = initial_delay
        self.multiplier = multiplier

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay!r}, "
            f"multiplier={self.multiplier!r})"
        )

    def __iter__(self) -> Iterator[int | float]:
        delay = self.initial_delay
        while True:
            yield delay
            delay *= self.multiplier


def multiplicative(initial_delay: float, multiplier: float) -> MultiplicativeStrategy:
    """Return an infinite geometric strategy.

    Args:
        initial_delay: The first delay in milliseconds. Must be >= 0.
        multiplier: The growth factor. Must be >= 0.

    Returns:
        The multiplicative strategy.
    """
    return MultiplicativeStrategy(initial_delay, multiplier)
