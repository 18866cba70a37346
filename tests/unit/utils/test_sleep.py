r"""Unit tests for sleep utilities."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

import pytest

from aretry.utils import sleep_for, sleep_for_async

if TYPE_CHECKING:
    from unittest.mock import Mock


def test_sleep_for(mock_sleep: Mock) -> None:
    sleep_for(timedelta(milliseconds=1500))
    mock_sleep.assert_called_once_with(1.5)


def test_sleep_for_logs_wait(mock_sleep: Mock, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="aretry"):
        sleep_for(timedelta(milliseconds=250))
    assert "Waiting 0.250s before retry" in caplog.text


@pytest.mark.asyncio
async def test_sleep_for_async(mock_asleep: Mock) -> None:
    await sleep_for_async(timedelta(seconds=2))
    mock_asleep.assert_awaited_once_with(2.0)
