r"""Parameter validation utilities for retry logic.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used in the retry loop.
"""

from __future__ import annotations

__all__ = ["validate_delay", "validate_max_attempts"]

from datetime import timedelta


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempts: Maximum number of attempts, including the initial
            attempt. Must be >= 1.

    Raises:
        TypeError: If max_attempts is not an integer.
        ValueError: If max_attempts is lower than 1.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if not isinstance(max_attempts, int) or isinstance(max_attempts, bool):
        msg = f"max_attempts must be an int, got {type(max_attempts).__qualname__}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)


def validate_delay(delay: timedelta, name: str = "delay") -> None:
    """Validate a delay duration.

    Args:
        delay: The delay to validate. Must be a non-negative
            ``datetime.timedelta``.
        name: The parameter name used in error messages.

    Raises:
        TypeError: If delay is not a ``datetime.timedelta``.
        ValueError: If delay is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.utils.validation import validate_delay
        >>> validate_delay(timedelta(seconds=1))
        >>> validate_delay(timedelta(seconds=-1))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1 day, 23:59:59

        ```
    """
    if not isinstance(delay, timedelta):
        msg = f"{name} must be a datetime.timedelta, got {type(delay).__qualname__}"
        raise TypeError(msg)
    if delay < timedelta(0):
        msg = f"{name} must be non-negative, got {delay}"
        raise ValueError(msg)
