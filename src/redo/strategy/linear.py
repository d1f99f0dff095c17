r"""Linear delay retry strategy."""

from __future__ import annotations

__all__ = ["LinearDelay"]

from typing import TYPE_CHECKING

from redo.strategy.base import RetryStrategy
from redo.utils.duration import scale_delay
from redo.utils.validation import validate_scale_factor

if TYPE_CHECKING:
    from datetime import timedelta


class LinearDelay(RetryStrategy):
    """Linear delay retry strategy.

    Calculates the sleep time as: delay * scale_factor * attempt.

    This strategy provides evenly spaced growth, which suits services that
    recover quickly or callers that want predictable timing.

    Args:
        scale_factor: Multiplier applied to the delay for each attempt.
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
        >>> from redo.strategy import LinearDelay
        >>> strategy = LinearDelay(10, max_retries=5, delay=timedelta(milliseconds=10))
        >>> strategy.calculate(1)  # 10ms * 10 * 1
        datetime.timedelta(microseconds=100000)
        >>> strategy.calculate(3)  # 10ms * 10 * 3
        datetime.timedelta(microseconds=300000)

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
        """Calculate the linear sleep time.

        Args:
            attempt: The attempt that just completed (1-indexed).
            delay: The base delay.
            scale_factor: Multiplier applied per attempt.

        Returns:
            ``delay * scale_factor * attempt``, at least one millisecond and at
            most ``timedelta.max``.
        """
        return scale_delay(delay, scale_factor * attempt)

    def calculate(self, attempt: int) -> timedelta:
        return self.calculate_sleep_time(attempt, self.delay, self.scale_factor)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(scale_factor={self.scale_factor}, "
            f"max_retries={self.max_retries}, delay={self.delay!r})"
        )
