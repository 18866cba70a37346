r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a coroutine
function with automatic retry logic and backoff delays.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.decider import RetryDecider
from aretry.utils.operation import bind_attempt
from aretry.utils.sleep import sleep_for_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.retry.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes a coroutine function with automatic retry logic.

    This is the asynchronous counterpart of ``RetryExecutor``. It follows
    the same retry semantics but waits with ``asyncio.sleep``, allowing
    other tasks to run during retry waits. Cancelling the task while it
    waits propagates ``asyncio.CancelledError``.

    Attributes:
        config: Retry configuration containing the max attempts, the
            backoff strategy, and the hooks.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.backoff import FlatBackoff
        >>> from aretry.retry import AsyncRetryExecutor, RetryConfig
        >>> executor = AsyncRetryExecutor(RetryConfig(max_attempts=3, backoff=FlatBackoff()))
        >>> async def operation(attempt: int) -> str:
        ...     if attempt < 1:
        ...         raise RuntimeError("this failed")
        ...     return f"succeeded on attempt {attempt}"
        ...
        >>> asyncio.run(executor.execute(operation))
        'succeeded on attempt 1'

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider: RetryDecider = RetryDecider(config.should_retry)

    async def execute(
        self, operation: Callable[[int], Awaitable[T]] | Callable[[], Awaitable[T]]
    ) -> T:
        """Execute the coroutine function with automatic retry logic.

        Args:
            operation: Coroutine function called with the current attempt
                number (0-indexed), or without argument if it takes no
                positional parameter.

        Returns:
            The result of the first successful attempt.

        Raises:
            NonRetryableError: If the operation raises it, on its first
                occurrence.
            Exception: The exception of the last attempt when all attempts
                are exhausted, or the exception rejected by the
                ``should_retry`` predicate.
        """
        config = self.config
        invoke = bind_attempt(operation)
        config.backoff.reset()

        for attempt in range(config.max_attempts):
            try:
                result = await invoke(attempt)
            except Exception as exc:
                should_retry, reason = self.decider.should_retry_exception(
                    exc, attempt, config.max_attempts
                )
                if not should_retry:
                    logger.debug(
                        f"Attempt {attempt + 1}/{config.max_attempts} failed, "
                        f"not retrying ({reason})"
                    )
                    raise
                logger.debug(
                    f"Attempt {attempt + 1}/{config.max_attempts} failed: will retry ({reason})"
                )
                if config.on_retry is not None:
                    config.on_retry(attempt, exc)
                await sleep_for_async(config.backoff.next_delay())
            else:
                config.backoff.reset()
                return result

        msg = "retry loop exited without a result"  # pragma: no cover
        raise RuntimeError(msg)  # pragma: no cover
