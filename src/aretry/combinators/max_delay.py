r"""Delay threshold combinator."""

from __future__ import annotations

__all__ = ["MaxDelayStrategy", "max_delay"]

from itertools import takewhile
from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterator

    from aretry.strategy.base import Strategy


class MaxDelayStrategy(BaseStrategy):
    """Strategy that ends before the first delay reaching ``cap``.

    The result is the longest leading run of delays strictly lower than
    ``cap``; kept delays are not rescaled. Unlike ``ClampDelayStrategy``
    this stops retrying once delays grow too large.

    Args:
        cap: The exclusive delay threshold in milliseconds.
        strategy: The source strategy.

    Raises:
        ValueError: If ``cap`` is negative.

    Example:
        ```pycon
        >>> from aretry.combinators import MaxDelayStrategy
        >>> from aretry.strategy import multiplicative
        >>> list(MaxDelayStrategy(100, multiplicative(10, 2)))
        [10, 20, 40, 80]

        ```
    """

    def __init__(self, cap: float, strategy: Strategy) -> None:
        check_non_negative("cap", cap)
        self.cap = cap
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cap={self.cap!r}, strategy={self.strategy!r})"

    def __iter__(self) -> Iterator[int | float]:
        return takewhile(lambda delay: delay < self.cap, self.strategy)


def max_delay(cap: float, strategy: Strategy) -> MaxDelayStrategy:
    """Return the leading delays of ``strategy`` that are lower than ``cap``.

    Args:
        cap: The exclusive delay threshold in milliseconds. Must be >= 0.
        strategy: The source strategy.

    Returns:
        The truncated strategy.
    """
    return MaxDelayStrategy(cap, strategy)
