r"""aretry - Retry-with-backoff execution wrapper.

This package runs operations that may fail transiently, re-invoking them a
bounded number of times and waiting between attempts for a delay computed by
a pluggable backoff strategy.

Key Features:
    - Stateful backoff strategies: Flat and Exponential (with cap and optional jitter)
    - Immutable retry configuration assembled with a fluent builder
    - Custom retry predicates to classify which failures are retryable
    - On-retry hook to observe each retry
    - ``NonRetryableError`` to stop retrying immediately from within an operation
    - Synchronous and asyncio executors

Example:
    ```pycon
    >>> from datetime import timedelta
    >>> from aretry import retry
    >>> from aretry.backoff import ExponentialBackoff
    >>> from aretry.retry import RetryConfig
    >>> backoff = ExponentialBackoff(
    ...     base_delay=timedelta(milliseconds=10), max_delay=timedelta(milliseconds=100)
    ... )
    >>> config = (
    ...     RetryConfig.builder(3, backoff)
    ...     .should_retry(lambda exc: isinstance(exc, ConnectionError))
    ...     .build()
    ... )
    >>> def fetch(attempt: int) -> str:
    ...     if attempt < 2:
    ...         raise ConnectionError("this failed")
    ...     return f"succeeded on attempt {attempt}"
    ...
    >>> retry(config, fetch)
    'succeeded on attempt 2'

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "AsyncRetryExecutor",
    "ExponentialBackoff",
    "FlatBackoff",
    "NonRetryableError",
    "RetryConfig",
    "RetryConfigBuilder",
    "RetryExecutor",
    "__version__",
    "retry",
    "retry_async",
    "retry_with_backoff",
    "retryable",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import ExponentialBackoff, FlatBackoff
from aretry.exceptions import NonRetryableError
from aretry.retry import (
    DEFAULT_MAX_ATTEMPTS,
    AsyncRetryExecutor,
    RetryConfig,
    RetryConfigBuilder,
    RetryExecutor,
)
from aretry.retry_func import retry, retry_async, retry_with_backoff, retryable

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
