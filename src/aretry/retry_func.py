r"""Convenience entry points to run operations with automatic retries.

Example:
    ```pycon
    >>> from datetime import timedelta
    >>> from aretry import retry
    >>> from aretry.backoff import ExponentialBackoff
    >>> from aretry.retry import RetryConfig
    >>> backoff = ExponentialBackoff(timedelta(0), timedelta(0))
    >>> retry(RetryConfig(max_attempts=3, backoff=backoff), lambda attempt: attempt * 10)
    0

    ```
"""

from __future__ import annotations

__all__ = ["retry", "retry_async", "retry_with_backoff", "retryable"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.retry.config import DEFAULT_MAX_ATTEMPTS, RetryConfig
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.base import BaseBackoffStrategy

T = TypeVar("T")


def retry(config: RetryConfig, operation: Callable[[int], T] | Callable[[], T]) -> T:
    """Run an operation with automatic retries.

    Args:
        config: The retry configuration.
        operation: Function called with the current attempt number
            (0-indexed), or without argument.

    Returns:
        The result of the first successful attempt.
    """
    return RetryExecutor(config).execute(operation)


async def retry_async(
    config: RetryConfig,
    operation: Callable[[int], Awaitable[T]] | Callable[[], Awaitable[T]],
) -> T:
    """Run a coroutine function with automatic retries.

    Args:
        config: The retry configuration.
        operation: Coroutine function called with the current attempt
            number (0-indexed), or without argument.

    Returns:
        The result of the first successful attempt.
    """
    return await AsyncRetryExecutor(config).execute(operation)


def retry_with_backoff(
    backoff: BaseBackoffStrategy,
    operation: Callable[[int], T] | Callable[[], T],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> T:
    """Run an operation with automatic retries, without hooks.

    Every exception except ``NonRetryableError`` is retried.

    Args:
        backoff: Backoff strategy producing the delays between attempts.
        operation: Function called with the current attempt number
            (0-indexed), or without argument.
        max_attempts: Maximum number of attempts. Must be >= 1.

    Returns:
        The result of the first successful attempt.
    """
    return retry(RetryConfig(max_attempts=max_attempts, backoff=backoff), operation)


def retryable(config: RetryConfig) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorate a function so every call runs with automatic retries.

    The decorated function receives the current attempt number
    (0-indexed) as its first argument, followed by the arguments of the
    call.

    Args:
        config: The retry configuration. Its backoff strategy is shared by
            all calls, so the decorated function must not be called
            concurrently.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from aretry import retryable
        >>> from aretry.backoff import FlatBackoff
        >>> from aretry.retry import RetryConfig
        >>> @retryable(RetryConfig(max_attempts=2, backoff=FlatBackoff()))
        ... def greet(attempt: int, name: str) -> str:
        ...     return f"hello {name} ({attempt})"
        ...
        >>> greet("world")
        'hello world (0)'

        ```
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return retry(config, lambda attempt: func(attempt, *args, **kwargs))

        return wrapper

    return decorator

