r"""Abstract base class for retry strategies."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from redo.utils.duration import sleep_seconds, to_timedelta
from redo.utils.validation import validate_max_retries

if TYPE_CHECKING:
    from datetime import timedelta

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy(ABC):
    """Abstract base class for retry strategies.

    A retry strategy answers two questions for the retry loop: whether to
    give up after a given attempt, and how long to wait before the next
    one. ``should_quit`` only depends on ``max_retries``; the wait time is
    computed by ``calculate`` and is always at least one millisecond.

    Args:
        max_retries: Maximum number of retries after the first attempt.
            Defaults to the current value of the default configuration store.
        delay: Base delay as a ``timedelta`` or a number of seconds.
            Defaults to the current value of the default configuration store.

    Raises:
        ValueError: If max_retries is negative.
    """

    def __init__(
        self, max_retries: int | None = None, delay: timedelta | float | None = None
    ) -> None:
        if max_retries is None or delay is None:
            from redo.defaults import DEFAULTS

            current = DEFAULTS.snapshot()
            max_retries = current.max_retries if max_retries is None else max_retries
            delay = current.delay if delay is None else delay

        validate_max_retries(max_retries)
        self.max_retries = max_retries
        self.delay = to_timedelta(delay)

    def should_quit(self, attempt: int) -> bool:
        """Indicate whether the retry loop should give up.

        Args:
            attempt: The attempt that just completed (1-indexed).

        Returns:
            ``True`` once ``attempt`` exceeds ``max_retries``.
        """
        return attempt > self.max_retries

    @abstractmethod
    def calculate(self, attempt: int) -> timedelta:
        """Calculate the sleep time after a given attempt.

        Args:
            attempt: The attempt that just completed (1-indexed).

        Returns:
            The time to wait before the next attempt.
        """

    def wait(self, attempt: int) -> None:
        """Block the calling thread before the next attempt.

        Args:
            attempt: The attempt that just completed (1-indexed).
        """
        sleep_time = self.calculate(attempt)
        logger.debug(f"Waiting {sleep_time.total_seconds():.3f}s after attempt {attempt}")
        time.sleep(sleep_seconds(sleep_time))

    async def wait_async(self, attempt: int) -> None:
        """Suspend the current task before the next attempt.

        Args:
            attempt: The attempt that just completed (1-indexed).
        """
        sleep_time = self.calculate(attempt)
        logger.debug(f"Waiting {sleep_time.total_seconds():.3f}s after attempt {attempt}")
        await asyncio.sleep(sleep_seconds(sleep_time))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_retries={self.max_retries}, delay={self.delay!r})"
