r"""Abstract base class for retry strategies."""

from __future__ import annotations

__all__ = ["BaseStrategy", "Strategy"]

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from itertools import islice

# Anything that yields delays in milliseconds can drive the executor,
# including plain lists and tuples.
Strategy = Iterable[int | float]


class BaseStrategy(ABC):
    """Abstract base class for retry strategies.

    A strategy is a lazy, possibly infinite sequence of delays in
    milliseconds. Its length is the retry budget: a strategy with N
    delays allows N retries, so up to N + 1 attempts of the operation.

    Every call to ``iter()`` starts a new traversal, so a strategy can be
    built once and shared between runs. Subclasses implement ``__iter__``
    as a generator and must never materialize the whole sequence.

    Example:
        ```pycon
        >>> from aretry.strategy import BaseStrategy
        >>> class Countdown(BaseStrategy):
        ...     def __iter__(self):
        ...         yield from (30, 20, 10)
        ...
        >>> list(Countdown())
        [30, 20, 10]

        ```
    """

    @abstractmethod
    def __iter__(self) -> Iterator[int | float]:
        """Return a fresh iterator over the delays in milliseconds."""

    def take(self, n: int) -> list[int | float]:
        """Materialize at most the first ``n`` delays.

        Args:
            n: The maximum number of delays to return.

        Returns:
            The first ``n`` delays, or all of them if the strategy is
            shorter.

        Example:
            ```pycon
            >>> from aretry.strategy import additive
            >>> additive(10).take(3)
            [10, 20, 30]

            ```
        """
        return list(islice(self, n))
