r"""Utility functions for retry logic.

This package provides helper functions for validating retry parameters,
calling operations, and waiting between retry attempts.
"""

from __future__ import annotations

__all__ = [
    "bind_attempt",
    "sleep_for",
    "sleep_for_async",
    "takes_attempt",
    "validate_delay",
    "validate_max_attempts",
]

from aretry.utils.operation import bind_attempt, takes_attempt
from aretry.utils.sleep import sleep_for, sleep_for_async
from aretry.utils.validation import validate_delay, validate_max_attempts
