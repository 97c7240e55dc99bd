r"""Strategy generators producing lazy sequences of retry delays.

This package provides the base class for strategies and the generators
for the common backoff shapes: constant, immediate, stop (no retry),
additive and multiplicative. All delays are in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "AdditiveStrategy",
    "BaseStrategy",
    "ConstantStrategy",
    "MultiplicativeStrategy",
    "StopStrategy",
    "Strategy",
    "additive",
    "constant",
    "immediate",
    "multiplicative",
    "stop",
]

from aretry.strategy.additive import AdditiveStrategy, additive
from aretry.strategy.base import BaseStrategy, Strategy
from aretry.strategy.constant import ConstantStrategy, StopStrategy, constant, immediate, stop
from aretry.strategy.multiplicative import MultiplicativeStrategy, multiplicative
