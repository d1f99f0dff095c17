r"""Constant delay retry strategy."""

from __future__ import annotations

__all__ = ["ConstantDelay"]

from typing import TYPE_CHECKING

from redo.strategy.base import RetryStrategy
from redo.utils.duration import clamp_delay

if TYPE_CHECKING:
    from datetime import timedelta


class ConstantDelay(RetryStrategy):
    """Constant/fixed delay retry strategy.

    Waits the same delay after every attempt, regardless of the attempt
    number. This is the strategy used when no other one is configured.

    Args:
        max_retries: Maximum number of retries after the first attempt.
            Defaults to the current default configuration.
        delay: The fixed delay as a ``timedelta`` or a number of seconds.
            Defaults to the current default configuration.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from redo.strategy import ConstantDelay
        >>> strategy = ConstantDelay(max_retries=3, delay=timedelta(milliseconds=250))
        >>> strategy.calculate(1)
        datetime.timedelta(microseconds=250000)
        >>> strategy.calculate(10)
        datetime.timedelta(microseconds=250000)
        >>> strategy.should_quit(3), strategy.should_quit(4)
        (False, True)

        ```
    """

    @staticmethod
    def calculate_sleep_time(
        attempt: int,  # noqa: ARG004
        delay: timedelta,
        scale_factor: float = 1.0,  # noqa: ARG004
    ) -> timedelta:
        """Calculate the constant sleep time.

        Args:
            attempt: The attempt that just completed (unused).
            delay: The base delay.
            scale_factor: Unused, accepted for a uniform signature.

        Returns:
            ``delay``, raised to at least one millisecond.
        """
        return clamp_delay(delay)

    def calculate(self, attempt: int) -> timedelta:
        return self.calculate_sleep_time(attempt, self.delay)
