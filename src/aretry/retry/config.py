r"""Configuration dataclass for retry lifecycle callbacks."""

from __future__ import annotations

__all__ = ["CallbackConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo


@dataclass
class CallbackConfig:
    """Configuration for retry lifecycle callbacks.

    Attributes:
        on_attempt: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked after a failed attempt,
            before sleeping.
        on_success: Optional callback invoked when the operation succeeds.
        on_failure: Optional callback invoked when the strategy is
            exhausted, before the last exception is re-raised.

    Example:
        ```pycon
        >>> from aretry.retry import CallbackConfig
        >>> config = CallbackConfig(on_retry=print)
        >>> config.merge(on_failure=print).on_retry is print
        True
        >>> config.on_failure is None
        True

        ```
    """

    on_attempt: Callable[[AttemptInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def merge(self, **overrides: Any) -> CallbackConfig:
        """Create a new config with the given callbacks overridden.

        Only non-``None`` overrides are applied, so callbacks already set
        are kept unless replaced explicitly.

        Args:
            **overrides: Callbacks to override.

        Returns:
            A new ``CallbackConfig``; the current one is unchanged.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary of keyword arguments.

        Returns:
            Dictionary mapping each callback name to its value.
        """
        return {
            "on_attempt": self.on_attempt,
            "on_retry": self.on_retry,
            "on_success": self.on_success,
            "on_failure": self.on_failure,
        }
