r"""Utility functions shared by strategies and executors.

This package provides parameter validation, millisecond sleep helpers
and opt-in structured logging.
"""

from __future__ import annotations

__all__ = [
    "MAX_SLEEP_SECONDS",
    "MILLISECONDS_PER_SECOND",
    "asleep_ms",
    "check_non_negative",
    "check_rand_factor",
    "check_retry_count",
    "log_structured",
    "sleep_ms",
    "to_seconds",
]

from aretry.utils.sleep import (
    MAX_SLEEP_SECONDS,
    MILLISECONDS_PER_SECOND,
    asleep_ms,
    sleep_ms,
    to_seconds,
)
from aretry.utils.structured_logging import log_structured
from aretry.utils.validation import check_non_negative, check_rand_factor, check_retry_count
