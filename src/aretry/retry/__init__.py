r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryConfig: Immutable configuration for retry behavior
    - RetryConfigBuilder: Fluent builder for RetryConfig
    - RetryDecider: Logic for deciding whether to retry
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "AsyncRetryExecutor",
    "RetryConfig",
    "RetryConfigBuilder",
    "RetryDecider",
    "RetryExecutor",
]

from aretry.retry.config import DEFAULT_MAX_ATTEMPTS, RetryConfig, RetryConfigBuilder
from aretry.retry.decider import RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
