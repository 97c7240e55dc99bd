r"""Strategy combinators bounding or perturbing retry delays.

Each combinator wraps a source strategy (any iterable of delays in
milliseconds) and returns a new lazy strategy:

- ``randomize``: proportional jitter on every delay (``randomize_delay``
  jitters a single delay)
- ``max_retries``: keep at most ``n`` delays
- ``clamp_delay``: flatten delays above a cap
- ``max_delay``: stop before the first delay reaching a cap
- ``max_duration``: stop once a total waiting budget is spent
"""

from __future__ import annotations

__all__ = [
    "ClampDelayStrategy",
    "MaxDelayStrategy",
    "MaxDurationStrategy",
    "MaxRetriesStrategy",
    "RandomizedStrategy",
    "clamp_delay",
    "max_delay",
    "max_duration",
    "max_retries",
    "randomize",
    "randomize_delay",
]

from aretry.combinators.clamp_delay import ClampDelayStrategy, clamp_delay
from aretry.combinators.max_delay import MaxDelayStrategy, max_delay
from aretry.combinators.max_duration import MaxDurationStrategy, max_duration
from aretry.combinators.max_retries import MaxRetriesStrategy, max_retries
from aretry.combinators.randomize import RandomizedStrategy, randomize, randomize_delay
