r"""Constant, immediate and stop strategies."""

from __future__ import annotations

__all__ = ["ConstantStrategy", "StopStrategy", "constant", "immediate", "stop"]

from itertools import repeat
from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterator


class ConstantStrategy(BaseStrategy):
    """Infinite strategy where every delay is the same.

    Args:
        delay: The delay in milliseconds used before every retry.

    Raises:
        ValueError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretry.strategy import ConstantStrategy
        >>> ConstantStrategy(delay=250).take(3)
        [250, 250, 250]

        ```
    """

    def __init__(self, delay: float) -> None:
        check_non_negative("delay", delay)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay!r})"

    def __iter__(self) -> Iterator[int | float]:
        return repeat(self.delay)


class StopStrategy(BaseStrategy):
    """Empty strategy: the operation is attempted exactly once."""

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def __iter__(self) -> Iterator[int | float]:
        return iter(())


def constant(delay: float) -> ConstantStrategy:
    """Return an infinite strategy that always waits ``delay`` ms.

    Args:
        delay: The delay in milliseconds. Must be >= 0.

    Returns:
        The constant strategy.
    """
    return ConstantStrategy(delay)


def immediate() -> ConstantStrategy:
    """Return an infinite strategy that retries without waiting.

    Example:
        ```pycon
        >>> from aretry.strategy import immediate
        >>> immediate().take(2)
        [0, 0]

        ```
    """
    return ConstantStrategy(0)


def stop() -> StopStrategy:
    """Return the empty strategy, which never retries."""
    return StopStrategy()
