r"""Progressive delay retry strategy."""

from __future__ import annotations

__all__ = ["ProgressiveDelay"]

from typing import TYPE_CHECKING

from redo.strategy.base import RetryStrategy
from redo.utils.duration import scale_delay
from redo.utils.validation import validate_scale_factor

if TYPE_CHECKING:
    from datetime import timedelta


class ProgressiveDelay(RetryStrategy):
    """Progressive delay retry strategy.

    Calculates the sleep time as: delay * max(1, scale_factor * (attempt - 1)).

    The first retry waits the base delay; from the second one onwards the
    delay grows by ``scale_factor`` base delays per attempt. Results that
    would overflow a ``timedelta`` are capped at ``timedelta.max``.

    Args:
        scale_factor: Growth rate of the delay.
        max_retries: Maximum number of retries after the first attempt.
            Defaults to the current default configuration.
        delay: The base delay as a ``timedelta`` or a number of seconds.
            Defaults to the current default configuration.

    Raises:
        ValueError: If max_retries is negative or scale_factor is NaN or
            infinite.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from redo.strategy import ProgressiveDelay
        >>> strategy = ProgressiveDelay(10, max_retries=5, delay=timedelta(milliseconds=2))
        >>> strategy.calculate(1)
        datetime.timedelta(microseconds=2000)
        >>> strategy.calculate(2)
        datetime.timedelta(microseconds=20000)
        >>> strategy.calculate(3)
        datetime.timedelta(microseconds=40000)

        ```
    """

    def __init__(
        self,
        scale_factor: float,
        max_retries: int | None = None,
        delay: timedelta | float | None = None,
    ) -> None:
        super().__init__(max_retries=max_retries, delay=delay)
        validate_scale_factor(scale_factor)
        self.scale_factor = scale_factor

    @staticmethod
    def calculate_sleep_time(attempt: int, delay: timedelta, scale_factor: float) -> timedelta:
        """Calculate the progressive sleep time.

        Args:
            attempt: The attempt that just completed (1-indexed).
            delay: The base delay.
            scale_factor: Growth rate of the delay.

        Returns:
            ``delay * max(1, scale_factor * (attempt - 1))``, at least one
            millisecond and at most ``timedelta.max``.
        """
        return scale_delay(delay, max(1, scale_factor * (attempt - 1)))

    def calculate(self, attempt: int) -> timedelta:
        return self.calculate_sleep_time(attempt, self.delay, self.scale_factor)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(scale_factor={self.scale_factor}, "
            f"max_retries={self.max_retries}, delay={self.delay!r})"
        )
