from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.backoff import ExponentialBackoff, FlatBackoff

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def exponential_backoff() -> ExponentialBackoff:
    """Create an exponential backoff from 10ms to 100ms."""
    return ExponentialBackoff(
        base_delay=timedelta(milliseconds=10), max_delay=timedelta(milliseconds=100)
    )


@pytest.fixture
def flat_backoff() -> FlatBackoff:
    """Create a flat backoff without delay."""
    return FlatBackoff()


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing on_retry hooks."""
    return Mock()
