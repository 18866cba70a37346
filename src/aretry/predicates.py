r"""Ready-made retry predicates.

These predicates can be passed as ``should_retry`` to a retry
configuration to classify which exceptions are retryable.

Example:
    ```pycon
    >>> from aretry.backoff import FlatBackoff
    >>> from aretry.predicates import is_transient_http_error
    >>> from aretry.retry import RetryConfig
    >>> config = RetryConfig(
    ...     max_attempts=5, backoff=FlatBackoff(), should_retry=is_transient_http_error
    ... )

    ```
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "is_transient_http_error", "retry_on_exception_types"]

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

# HTTP status codes that indicate a transient failure
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def retry_on_exception_types(
    *exception_types: type[Exception],
) -> Callable[[Exception], bool]:
    """Create a predicate accepting only the given exception types.

    Args:
        *exception_types: The retryable exception types. Subclasses are
            also accepted.

    Returns:
        The predicate.

    Raises:
        ValueError: If no exception type is given.

    Example:
        ```pycon
        >>> from aretry.predicates import retry_on_exception_types
        >>> predicate = retry_on_exception_types(TimeoutError, ConnectionError)
        >>> predicate(TimeoutError())
        True
        >>> predicate(ValueError())
        False

        ```
    """
    if not exception_types:
        msg = "at least one exception type is required"
        raise ValueError(msg)

    def predicate(exception: Exception) -> bool:
        return isinstance(exception, exception_types)

    return predicate


def is_transient_http_error(
    exception: Exception, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Indicate if an httpx exception is a transient HTTP failure.

    Timeouts and transport errors (connection failures, protocol errors)
    are transient. ``httpx.HTTPStatusError`` is transient when its status
    code is in ``status_forcelist``. Any other exception is not.

    Args:
        exception: The exception to classify.
        status_forcelist: HTTP status codes considered transient.

    Returns:
        ``True`` if the exception is a transient HTTP failure.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.predicates import is_transient_http_error
        >>> is_transient_http_error(httpx.ConnectTimeout("timed out"))
        True
        >>> is_transient_http_error(ValueError())
        False

        ```
    """
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in status_forcelist
    return isinstance(exception, httpx.TransportError)
