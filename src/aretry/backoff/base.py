r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import timedelta


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy is a stateful generator of successive delays to
    wait between retry attempts. Each call to ``next_delay`` returns the
    delay before the next attempt and advances the internal state, and
    ``reset`` brings the strategy back to its as-constructed state.

    Note:
        Backoff strategies are not thread-safe. A strategy instance must
        be owned by a single retry execution at a time. Callers that need
        concurrent independent retry sequences must use separate
        strategy instances.
    """

    @abstractmethod
    def next_delay(self) -> timedelta:
        """Return the delay to wait before the next attempt.

        Calling this method advances the internal state of the strategy.

        Returns:
            The delay before the next retry attempt.
        """

    @abstractmethod
    def reset(self) -> None:
        """Reset the strategy to its initial state."""
