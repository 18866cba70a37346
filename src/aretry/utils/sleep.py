r"""Sleep utilities used to wait between retry attempts."""

from __future__ import annotations

__all__ = ["sleep_for", "sleep_for_async"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import timedelta

logger: logging.Logger = logging.getLogger(__name__)


def sleep_for(delay: timedelta) -> None:
    """Block the current thread for the given delay.

    Interruptions raised while sleeping (e.g. ``KeyboardInterrupt``) are
    not handled and propagate to the caller.

    Args:
        delay: The duration to wait.
    """
    seconds = delay.total_seconds()
    logger.debug(f"Waiting {seconds:.3f}s before retry")
    time.sleep(seconds)


async def sleep_for_async(delay: timedelta) -> None:
    """Asynchronously wait for the given delay.

    Cancellation of the waiting task propagates to the caller.

    Args:
        delay: The duration to wait.
    """
    seconds = delay.total_seconds()
    logger.debug(f"Waiting {seconds:.3f}s before retry")
    await asyncio.sleep(seconds)
