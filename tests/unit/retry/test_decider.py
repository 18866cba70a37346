r"""Unit tests for retry decision logic."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.exceptions import NonRetryableError
from aretry.retry import RetryDecider


def test_retry_decider_retryable_exception() -> None:
    decider = RetryDecider(should_retry=lambda exc: True)
    assert decider.should_retry_exception(RuntimeError(), attempt=0, max_attempts=3) == (
        True,
        "RuntimeError",
    )


def test_retry_decider_predicate_false() -> None:
    decider = RetryDecider(should_retry=lambda exc: False)
    assert decider.should_retry_exception(RuntimeError(), attempt=0, max_attempts=3) == (
        False,
        "should_retry returned False",
    )


@pytest.mark.parametrize(("attempt", "max_attempts"), [(0, 1), (2, 3), (9, 10)])
def test_retry_decider_last_attempt_skips_predicate(attempt: int, max_attempts: int) -> None:
    """Test that the predicate is not consulted on the last attempt."""
    predicate = Mock(return_value=True)
    decider = RetryDecider(should_retry=predicate)
    assert decider.should_retry_exception(
        RuntimeError(), attempt=attempt, max_attempts=max_attempts
    ) == (False, "max attempts exhausted")
    predicate.assert_not_called()


def test_retry_decider_non_retryable_error_skips_predicate() -> None:
    predicate = Mock(return_value=True)
    decider = RetryDecider(should_retry=predicate)
    assert decider.should_retry_exception(NonRetryableError(), attempt=0, max_attempts=100) == (
        False,
        "non-retryable error",
    )
    predicate.assert_not_called()


def test_retry_decider_passes_exception_to_predicate() -> None:
    predicate = Mock(return_value=True)
    exc = ValueError("boom")
    RetryDecider(should_retry=predicate).should_retry_exception(exc, attempt=0, max_attempts=2)
    predicate.assert_called_once_with(exc)
