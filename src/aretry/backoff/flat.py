r"""Flat backoff strategy."""

from __future__ import annotations

__all__ = ["FlatBackoff"]

from datetime import timedelta

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_delay


class FlatBackoff(BaseBackoffStrategy):
    """Flat/fixed backoff strategy.

    Returns the same delay for every retry attempt.

    This strategy is useful for testing or when you know the exact delay that works
    best for a particular operation.

    Args:
        delay: The fixed delay to use for all retry attempts (default: no delay).

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import FlatBackoff
        >>> backoff = FlatBackoff(delay=timedelta(seconds=2))
        >>> backoff.next_delay()
        datetime.timedelta(seconds=2)
        >>> backoff.next_delay()
        datetime.timedelta(seconds=2)

        ```
    """

    def __init__(self, delay: timedelta = timedelta(0)) -> None:
        validate_delay(delay, name="delay")
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay!r})"

    def next_delay(self) -> timedelta:
        return self.delay

    def reset(self) -> None:
        """Do nothing, a flat backoff has no state."""
