r"""Jitter combinator."""

from __future__ import annotations

__all__ = ["RandomizedStrategy", "randomize", "randomize_delay"]

import math
import random
import sys
from typing import TYPE_CHECKING

from aretry.strategy.base import BaseStrategy
from aretry.utils.validation import check_rand_factor

if TYPE_CHECKING:
    from collections.abc import Iterator

    from aretry.strategy.base import Strategy


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def randomize_delay(
    delay: float, rand_factor: float, rng: random.Random | None = None
) -> int | float:
    """Draw a jittered whole-number delay around ``delay``.

    The band ``[delay - delay * rand_factor, delay + delay * rand_factor]``
    is rounded half-up to whole numbers ``[low, high]`` and an integer is
    drawn uniformly from it, both endpoints included.

    Delays whose band does not fit in a float are returned unchanged,
    like non-finite delays. This covers integers above
    ``sys.float_info.max`` (about ``1.8e308``) and floats close enough
    to it that ``delay * (1 + rand_factor)`` overflows.

    Args:
        delay: The nominal delay in milliseconds.
        rand_factor: The relative width of the band, in ``(0, 1)``.
        rng: Optional random source. Defaults to the ``random`` module.

    Returns:
        The jittered delay.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.combinators.randomize import randomize_delay
        >>> 5 <= randomize_delay(10, 0.5, random.Random(0)) <= 15
        True
        >>> randomize_delay(0, 0.5)
        0

        ```
    """
    if delay > sys.float_info.max:
        return delay
    delta = delay * rand_factor
    upper = delay + delta
    if not math.isfinite(upper):
        return delay
    low = _round_half_up(delay - delta)
    high = _round_half_up(upper)
    return (rng if rng is not None else random).randint(low, high)


class RandomizedStrategy(BaseStrategy):
    """Strategy that adds proportional jitter to every delay of another.

    Each delay ``d`` becomes a whole number drawn uniformly from
    ``[d * (1 - rand_factor), d * (1 + rand_factor)]`` (bounds rounded to
    whole numbers). The length of the source is preserved.

    This strategy is not restartable: every traversal draws fresh random
    values. Inject a seeded ``random.Random`` for reproducible delays.

    Args:
        rand_factor: The relative jitter, strictly between 0 and 1.
        strategy: The source strategy.
        rng: Optional random source. Defaults to the ``random`` module.

    Raises:
        ValueError: If ``rand_factor`` is not in ``(0, 1)``.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.combinators import RandomizedStrategy
        >>> from aretry.strategy import constant
        >>> delays = RandomizedStrategy(0.1, constant(1000), rng=random.Random(42)).take(3)
        >>> all(900 <= delay <= 1100 for delay in delays)
        True

        ```
    """

    def __init__(
        self, rand_factor: float, strategy: Strategy, rng: random.Random | None = None
    ) -> None:
        check_rand_factor(rand_factor)
        self.rand_factor = rand_factor
        self.strategy = strategy
        self.rng = rng

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(rand_factor={self.rand_factor!r}, "
            f"strategy={self.strategy!r})"
        )

    def __iter__(self) -> Iterator[int | float]:
        for delay in self.strategy:
            yield randomize_delay(delay, self.rand_factor, self.rng)


def randomize(
    rand_factor: float, strategy: Strategy, rng: random.Random | None = None
) -> RandomizedStrategy:
    """Return ``strategy`` with proportional jitter applied to each delay.

    Args:
        rand_factor: The relative jitter, strictly between 0 and 1.
        strategy: The source strategy.
        rng: Optional random source.

    Returns:
        The randomized strategy.
    """
    return RandomizedStrategy(rand_factor, strategy, rng=rng)
