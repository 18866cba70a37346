r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import random
from datetime import timedelta

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_delay


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy with a maximum delay cap.

    The first call to ``next_delay`` returns ``base_delay``. Each subsequent
    call returns the previous delay doubled, capped at ``max_delay``.
    ``reset`` restores the cursor to ``base_delay``.

    Args:
        base_delay: The delay returned by the first call to ``next_delay``.
        max_delay: The maximum delay. Delays never grow beyond this value.
        jitter: Optional upper bound of a random delay added to each
            returned delay. The jitter does not affect the cursor.

    Raises:
        ValueError: If a delay is negative or if ``base_delay`` is greater
            than ``max_delay``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(
        ...     base_delay=timedelta(milliseconds=10), max_delay=timedelta(milliseconds=30)
        ... )
        >>> backoff.next_delay()
        datetime.timedelta(microseconds=10000)
        >>> backoff.next_delay()
        datetime.timedelta(microseconds=20000)
        >>> backoff.next_delay()  # Would be 40ms, but capped
        datetime.timedelta(microseconds=30000)
        >>> backoff.reset()
        >>> backoff.next_delay()
        datetime.timedelta(microseconds=10000)

        ```
    """

    def __init__(
        self,
        base_delay: timedelta,
        max_delay: timedelta,
        jitter: timedelta = timedelta(0),
    ) -> None:
        validate_delay(base_delay, name="base_delay")
        validate_delay(max_delay, name="max_delay")
        validate_delay(jitter, name="jitter")
        if base_delay > max_delay:
            msg = f"base_delay must be <= max_delay, got {base_delay} > {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self.jitter = jitter
        self.current_delay = base_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay!r}, "
            f"max_delay={self.max_delay!r}, jitter={self.jitter!r})"
        )

    def next_delay(self) -> timedelta:
        """Return the current delay and double the cursor.

        Returns:
            The current delay plus an optional random jitter.
        """
        delay = self.current_delay
        # Clamp before doubling, timedelta.max * 2 overflows
        if self.current_delay > self.max_delay - self.current_delay:
            self.current_delay = self.max_delay
        else:
            self.current_delay = self.current_delay * 2
        if self.jitter > timedelta(0):
            delay += self.jitter * random.uniform(0, 1)  # noqa: S311
        return delay

    def reset(self) -> None:
        self.current_delay = self.base_delay
