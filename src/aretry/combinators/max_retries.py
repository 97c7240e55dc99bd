r"""Retry count limit combinator."""

from __future__ import annotations

__all__ = ["MaxRetriesStrategy", "max_retries"]

from itertools import islice
from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_retry_count

if TYPE_CHECKING:
    from collections.abc import Iterator

    from aretry.strategy.base import Strategy


class MaxRetriesStrategy(BaseStrategy):
    """Strategy limited to the first ``n`` delays of another.

    This turns an infinite strategy into a finite retry budget: the
    operation is attempted at most ``n + 1`` times.

    Args:
        n: The maximum number of retries.
        strategy: The source strategy.

    Raises:
        ValueError: If ``n`` is not a non-negative integer.

    Example:
        ```pycon
        >>> from aretry.combinators import MaxRetriesStrategy
        >>> from aretry.strategy import constant
        >>> list(MaxRetriesStrategy(2, constant(50)))
        [50, 50]
        >>> list(MaxRetriesStrategy(5, [1, 2]))
        [1, 2]

        ```
    """

    def __init__(self, n: int, strategy: Strategy) -> None:
        check_retry_count(n)
        self.n = n
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(n={self.n!r}, strategy={self.strategy!r})"

    def __iter__(self) -> Iterator[int | float]:
        return islice(self.strategy, self.n)


def max_retries(n: int, strategy: Strategy) -> MaxRetriesStrategy:
    """Return the first ``n`` delays of ``strategy``.

    Args:
        n: The maximum number of retries. Must be a non-negative integer.
        strategy: The source strategy.

    Returns:
        The bounded strategy.
    """
    return MaxRetriesStrategy(n, strategy)
