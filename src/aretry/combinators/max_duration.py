r"""Cumulative wait budget combinator."""

from __future__ import annotations

__all__ = ["MaxDurationStrategy", "max_duration"]

from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy

if TYPE_CHECKING:
    from collections.abc import Iterator

    from aretry.strategy.base import Strategy


class MaxDurationStrategy(BaseStrategy):
    """Strategy bounded by a budget on the total waiting time.

    The remaining budget starts at ``timeout``. Before each delay, the
    delay is emitted only if the remaining budget is strictly positive,
    and it is then subtracted from the budget. The check happens before
    the subtraction, so the last emitted delay may push the cumulative
    wait past ``timeout``: the strategy never starts waiting once the
    budget is spent, but it does not trim the final wait. A ``timeout``
    lower than or equal to zero, or NaN, gives the empty strategy.

    Args:
        timeout: The waiting budget in milliseconds.
        strategy: The source strategy.

    Example:
        ```pycon
        >>> from aretry.combinators import MaxDurationStrategy
        >>> from aretry.strategy import constant
        >>> list(MaxDurationStrategy(250, constant(100)))
        [100, 100, 100]
        >>> list(MaxDurationStrategy(0, constant(100)))
        []

        ```
    """

    def __init__(self, timeout: float, strategy: Strategy) -> None:
        self.timeout = timeout
        self.strategy = strategy

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(timeout={self.timeout!r}, "
            f"strategy={self.strategy!r})"
        )

    def __iter__(self) -> Iterator[int | float]:
        remaining = self.timeout
        if not remaining > 0:
            return
        for delay in self.strategy:
            yield delay
            remaining -= delay
            if not remaining > 0:
                return


def max_duration(timeout: float, strategy: Strategy) -> MaxDurationStrategy:
    """Return ``strategy`` bounded by a total waiting budget.

    Args:
        timeout: The waiting budget in milliseconds.
        strategy: The source strategy.

    Returns:
        The bounded strategy.
    """
    return MaxDurationStrategy(timeout, strategy)
