r"""Backoff strategies for retry delays.

This package provides stateful backoff strategies that produce the delay
to wait between retry attempts, including flat and exponential backoff
patterns.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff", "FlatBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.flat import FlatBackoff
