r"""Retry decision logic for determining whether to retry an operation.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a failed attempt should be retried based on the
exception kind, the remaining attempts, and a custom predicate.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from aretry.exceptions import NonRetryableError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        should_retry: Predicate deciding whether an exception is retryable.
    """

    def __init__(self, should_retry: Callable[[Exception], bool]) -> None:
        self.should_retry = should_retry

    def should_retry_exception(
        self,
        exception: Exception,
        attempt: int,
        max_attempts: int,
    ) -> tuple[bool, str]:
        """Determine if exception should trigger retry.

        ``NonRetryableError`` and the last allowed attempt stop the retry
        loop without consulting the predicate.

        Args:
            exception: The exception raised by the attempt.
            attempt: Current attempt number (0-indexed).
            max_attempts: Maximum number of attempts.

        Returns:
            Tuple of (should_retry, reason).

        Example:
            ```pycon
            >>> from aretry.retry import RetryDecider
            >>> decider = RetryDecider(lambda exc: isinstance(exc, TimeoutError))
            >>> decider.should_retry_exception(TimeoutError(), attempt=0, max_attempts=3)
            (True, 'TimeoutError')
            >>> decider.should_retry_exception(ValueError(), attempt=0, max_attempts=3)
            (False, 'should_retry returned False')
            >>> decider.should_retry_exception(TimeoutError(), attempt=2, max_attempts=3)
            (False, 'max attempts exhausted')

            ```
        """
        if isinstance(exception, NonRetryableError):
            return (False, "non-retryable error")
        if attempt >= max_attempts - 1:
            return (False, "max attempts exhausted")
        if not self.should_retry(exception):
            logger.debug(f"should_retry returned False for {type(exception).__name__}")
            return (False, "should_retry returned False")
        return (True, type(exception).__name__)
