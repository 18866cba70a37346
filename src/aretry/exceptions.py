r"""Exception classes for retry execution.

This module defines the exception used by operations to signal that a
failure must not be retried.
"""

from __future__ import annotations

__all__ = ["NonRetryableError"]


class NonRetryableError(Exception):
    """Exception raised by an operation to stop retrying immediately.

    When an operation raises this exception, the retry executor propagates
    it on its first occurrence, regardless of the remaining attempts and
    of the ``should_retry`` predicate.

    Both the message and the cause are optional. When a cause is given,
    it is also chained as ``__cause__``.

    Args:
        message: Optional error message.
        cause: Optional underlying exception.

    Attributes:
        message: The error message, or ``None``.
        cause: The underlying exception, or ``None``.

    Example:
        ```pycon
        >>> from aretry.exceptions import NonRetryableError
        >>> error = NonRetryableError("invalid credentials")
        >>> error.message
        'invalid credentials'
        >>> error.cause is None
        True
        >>> cause = ValueError("bad input")
        >>> error = NonRetryableError(cause=cause)
        >>> error.message is None
        True
        >>> error.cause is cause
        True

        ```
    """

    def __init__(self, message: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(*(() if message is None else (message,)))
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message if self.message is not None else ""

