r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs an operation with
automatic retry logic and backoff delays.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.decider import RetryDecider
from aretry.utils.operation import bind_attempt
from aretry.utils.sleep import sleep_for

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an operation with automatic retry logic.

    This class implements the retry loop: it resets the backoff strategy,
    invokes the operation, and on a retryable failure waits for the next
    backoff delay before trying again. The loop runs on the caller's
    thread and blocks it while waiting.

    The executor never wraps, logs at error level, or swallows the
    failures of the operation. The terminal exception is re-raised as is.

    Attributes:
        config: Retry configuration containing the max attempts, the
            backoff strategy, and the hooks.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> from aretry.backoff import FlatBackoff
        >>> from aretry.retry import RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(max_attempts=3, backoff=FlatBackoff()))
        >>> def operation(attempt: int) -> str:
        ...     if attempt < 2:
        ...         raise RuntimeError("this failed")
        ...     return f"succeeded on attempt {attempt}"
        ...
        >>> executor.execute(operation)
        'succeeded on attempt 2'

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider: RetryDecider = RetryDecider(config.should_retry)

    def execute(self, operation: Callable[[int], T] | Callable[[], T]) -> T:
        """Execute the operation with automatic retry logic.

        The backoff strategy is reset before the first attempt and after
        a successful attempt. It is not reset when the loop stops on a
        failure, so the cursor reflects the delays consumed.

        Args:
            operation: Function called with the current attempt number
                (0-indexed), or without argument if it takes no
                positional parameter. It returns a result or raises an
                exception.

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
                result = invoke(attempt)
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
                sleep_for(config.backoff.next_delay())
            else:
                config.backoff.reset()
                return result

        # The last attempt always either returns or raises
        msg = "retry loop exited without a result"  # pragma: no cover
        raise RuntimeError(msg)  # pragma: no cover
