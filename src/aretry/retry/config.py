r"""Configuration for retry behavior.

This module provides the immutable ``RetryConfig`` object and the
``RetryConfigBuilder`` used to assemble it.
"""

from __future__ import annotations

__all__ = ["DEFAULT_MAX_ATTEMPTS", "RetryConfig", "RetryConfigBuilder"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from aretry.utils.validation import validate_max_attempts

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BaseBackoffStrategy

# Default maximum number of attempts, including the initial attempt
DEFAULT_MAX_ATTEMPTS = 3


def always_retry(exception: Exception) -> bool:  # noqa: ARG001
    """Retry predicate accepting every exception."""
    return True


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Instances are immutable. Use ``RetryConfig.builder`` to assemble a
    configuration step by step.

    Attributes:
        max_attempts: Maximum number of attempts, including the initial
            attempt. Must be >= 1.
        backoff: Backoff strategy producing the delays between attempts.
            The strategy is shared by reference and must not be used by
            two retry executions at the same time.
        on_retry: Optional callback invoked before each retry with the
            index of the attempt that just failed and its exception.
        should_retry: Predicate deciding whether an exception is
            retryable. Retries every exception by default.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import FlatBackoff
        >>> from aretry.retry import RetryConfig
        >>> config = RetryConfig(max_attempts=3, backoff=FlatBackoff(timedelta(seconds=1)))
        >>> config.max_attempts
        3

        ```
    """

    max_attempts: int
    backoff: BaseBackoffStrategy
    on_retry: Callable[[int, Exception], None] | None = None
    should_retry: Callable[[Exception], bool] = always_retry

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)

    @staticmethod
    def builder(max_attempts: int, backoff: BaseBackoffStrategy) -> RetryConfigBuilder:
        """Create a builder for a retry configuration.

        Args:
            max_attempts: Maximum number of attempts. Must be >= 1.
            backoff: Backoff strategy producing the delays between attempts.

        Returns:
            A new builder.
        """
        return RetryConfigBuilder(max_attempts, backoff)


class RetryConfigBuilder:
    """Builder for ``RetryConfig`` objects.

    Setters overwrite any previously set value and return the builder so
    calls can be chained. Mutating the builder after ``build`` does not
    affect the configurations already built.

    Args:
        max_attempts: Maximum number of attempts. Must be >= 1.
        backoff: Backoff strategy producing the delays between attempts.

    Raises:
        ValueError: If max_attempts is lower than 1.

    Example:
        ```pycon
        >>> from aretry.backoff import FlatBackoff
        >>> from aretry.retry import RetryConfigBuilder
        >>> config = (
        ...     RetryConfigBuilder(5, FlatBackoff())
        ...     .should_retry(lambda exc: isinstance(exc, TimeoutError))
        ...     .on_retry(lambda attempt, exc: print(f"attempt {attempt} failed: {exc}"))
        ...     .build()
        ... )
        >>> config.max_attempts
        5

        ```
    """

    def __init__(self, max_attempts: int, backoff: BaseBackoffStrategy) -> None:
        validate_max_attempts(max_attempts)
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._on_retry: Callable[[int, Exception], None] | None = None
        self._should_retry: Callable[[Exception], bool] = always_retry

    def on_retry(self, on_retry: Callable[[int, Exception], None]) -> RetryConfigBuilder:
        """Set the callback invoked before each retry.

        Args:
            on_retry: Callback receiving the index of the failed attempt
                and its exception.

        Returns:
            The builder.
        """
        self._on_retry = on_retry
        return self

    def should_retry(self, should_retry: Callable[[Exception], bool]) -> RetryConfigBuilder:
        """Set the predicate deciding whether an exception is retryable.

        Args:
            should_retry: Predicate receiving the exception.

        Returns:
            The builder.
        """
        self._should_retry = should_retry
        return self

    def build(self) -> RetryConfig:
        return RetryConfig(
            max_attempts=self._max_attempts,
            backoff=self._backoff,
            on_retry=self._on_retry,
            should_retry=self._should_retry,
        )
