r"""Unit tests for the convenience retry entry points."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry import (
    DEFAULT_MAX_ATTEMPTS,
    NonRetryableError,
    RetryConfig,
    retry,
    retry_async,
    retry_with_backoff,
    retryable,
)
from aretry.backoff import ExponentialBackoff, FlatBackoff


def flaky(attempt: int) -> str:
    if attempt < 2:
        msg = "this failed"
        raise RuntimeError(msg)
    return f"succeeded on attempt {attempt}"


###########################
#     Tests for retry     #
###########################


def test_retry(mock_sleep: Mock, exponential_backoff: ExponentialBackoff) -> None:
    config = RetryConfig.builder(3, exponential_backoff).build()
    assert retry(config, flaky) == "succeeded on attempt 2"
    assert mock_sleep.call_args_list == [call(0.01), call(0.02)]


def test_retry_exhausted(mock_sleep: Mock, flat_backoff: FlatBackoff) -> None:
    with pytest.raises(RuntimeError, match=r"this failed"):
        retry(RetryConfig(max_attempts=2, backoff=flat_backoff), flaky)


#################################
#     Tests for retry_async     #
#################################


@pytest.mark.asyncio
async def test_retry_async(mock_asleep: Mock, flat_backoff: FlatBackoff) -> None:
    operation = AsyncMock(side_effect=[RuntimeError(), "ok"])
    assert await retry_async(RetryConfig(max_attempts=3, backoff=flat_backoff), operation) == "ok"
    assert operation.await_args_list == [call(0), call(1)]


########################################
#     Tests for retry_with_backoff     #
########################################


def test_retry_with_backoff(mock_sleep: Mock, exponential_backoff: ExponentialBackoff) -> None:
    assert retry_with_backoff(exponential_backoff, flaky, max_attempts=3) == (
        "succeeded on attempt 2"
    )


def test_retry_with_backoff_default_max_attempts(mock_sleep: Mock, flat_backoff: FlatBackoff) -> None:
    operation = Mock(side_effect=RuntimeError("this failed"))
    with pytest.raises(RuntimeError):
        retry_with_backoff(flat_backoff, operation)
    assert operation.call_count == DEFAULT_MAX_ATTEMPTS


def test_retry_with_backoff_non_retryable(mock_sleep: Mock, flat_backoff: FlatBackoff) -> None:
    operation = Mock(side_effect=NonRetryableError("stop"))
    with pytest.raises(NonRetryableError, match=r"stop"):
        retry_with_backoff(flat_backoff, operation, max_attempts=10)
    operation.assert_called_once_with(0)


def test_retry_with_backoff_invalid_max_attempts(flat_backoff: FlatBackoff) -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1, got 0"):
        retry_with_backoff(flat_backoff, flaky, max_attempts=0)


###############################
#     Tests for retryable     #
###############################


def test_retryable_passes_attempt_and_arguments(mock_sleep: Mock) -> None:
    calls = []

    @retryable(RetryConfig(max_attempts=3, backoff=FlatBackoff(timedelta(seconds=1))))
    def add(attempt: int, a: int, b: int = 0) -> int:
        calls.append((attempt, a, b))
        if attempt == 0:
            msg = "this failed"
            raise RuntimeError(msg)
        return a + b

    assert add(1, b=2) == 3
    assert calls == [(0, 1, 2), (1, 1, 2)]
    mock_sleep.assert_called_once_with(1.0)


def test_retryable_preserves_metadata(flat_backoff: FlatBackoff) -> None:
    @retryable(RetryConfig(max_attempts=3, backoff=flat_backoff))
    def compute(attempt: int) -> int:
        """Compute something."""
        return attempt

    assert compute.__name__ == "compute"
    assert compute.__doc__ == "Compute something."
    assert compute() == 0


def test_retry_zero_argument_operation(mock_sleep: Mock, flat_backoff: FlatBackoff) -> None:
    operation = Mock(side_effect=[RuntimeError(), "ok"])

    def fetch() -> str:
        return operation()

    assert retry(RetryConfig(max_attempts=3, backoff=flat_backoff), fetch) == "ok"
    assert operation.call_args_list == [call(), call()]


def test_retry_with_backoff_zero_argument_operation(
    mock_sleep: Mock, flat_backoff: FlatBackoff
) -> None:
    operation = Mock(side_effect=RuntimeError("this failed"))

    def fetch() -> None:
        operation()

    with pytest.raises(RuntimeError, match=r"this failed"):
        retry_with_backoff(flat_backoff, fetch)
    assert operation.call_count == DEFAULT_MAX_ATTEMPTS


@pytest.mark.asyncio
async def test_retry_async_zero_argument_operation(
    mock_asleep: Mock, flat_backoff: FlatBackoff
) -> None:
    operation = AsyncMock(side_effect=[RuntimeError(), "ok"])

    async def fetch() -> str:
        return await operation()

    assert await retry_async(RetryConfig(max_attempts=3, backoff=flat_backoff), fetch) == "ok"
    assert operation.await_args_list == [call(), call()]
