r"""Delay clamping combinator."""

from __future__ import annotations

__all__ = ["ClampDelayStrategy", "clamp_delay"]

from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterator

    from aretry.strategy.base import Strategy


class ClampDelayStrategy(BaseStrategy):
    """Strategy whose delays are flattened to at most ``cap``.

    Every delay greater than ``cap`` is replaced with ``cap``. The number
    of delays is unchanged, so retrying continues at the capped delay.
    See ``MaxDelayStrategy`` to stop retrying instead.

    Args:
        cap: The maximum delay in milliseconds.
        strategy: The source strategy.

    Raises:
        ValueError: If ``cap`` is negative.

    Example:
        ```pycon
        >>> from aretry.combinators import ClampDelayStrategy
        >>> from aretry.strategy import multiplicative
        >>> ClampDelayStrategy(100, multiplicative(10, 2)).take(6)
        [10, 20, 40, 80, 100, 100]

        ```
    """

    def __init__(self, cap: float, strategy: Strategy) -> None:
        check_non_negative("cap", cap)
        self.cap = cap
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cap={self.cap!r}, strategy={self.strategy!r})"

    def __iter__(self) -> Iterator[int | float]:
        for delay in self.strategy:
            yield min(delay, self.cap)


def clamp_delay(cap: float, strategy: Strategy) -> ClampDelayStrategy:
    """Return ``strategy`` with every delay above ``cap`` replaced by ``cap``.

    Args:
        cap: The maximum delay in milliseconds. Must be >= 0.
        strategy: The source strategy.

    Returns:
        The clamped strategy.
    """
    return ClampDelayStrategy(cap, strategy)
