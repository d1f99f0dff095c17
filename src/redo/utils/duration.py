r"""Duration helpers shared by the retry strategies.

Delays are stored as ``datetime.timedelta``. Every computed sleep time is
clamped to the range ``[MIN_DELAY, datetime.timedelta.max]``.
"""

from __future__ import annotations

__all__ = [
    "MAX_DELAY",
    "MAX_SLEEP",
    "MIN_DELAY",
    "clamp_delay",
    "scale_delay",
    "sleep_seconds",
    "to_timedelta",
]

import math
import threading
from datetime import timedelta

# Smallest sleep time a strategy can return
MIN_DELAY = timedelta(milliseconds=1)

# Largest representable duration, returned when a computation overflows
MAX_DELAY = timedelta.max

# Longest single sleep handed to time.sleep or asyncio.sleep. Longer delays
# are capped to it: the platform sleep calls reject larger values
MAX_SLEEP = timedelta(seconds=min(threading.TIMEOUT_MAX, 100 * 365 * 24 * 3600))


def to_timedelta(value: timedelta | float) -> timedelta:
    """Convert a delay to a ``timedelta``.

    Args:
        value: A ``timedelta`` or a number of seconds.

    Returns:
        The delay as a ``timedelta``.

    Raises:
        TypeError: If ``value`` is neither a ``timedelta`` nor a number.

    Example:
        ```pycon
        >>> from redo.utils.duration import to_timedelta
        >>> to_timedelta(0.25)
        datetime.timedelta(microseconds=250000)
        >>> to_timedelta(to_timedelta(2))
        datetime.timedelta(seconds=2)

        ```
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"delay must be a timedelta or a number of seconds, got {value!r}"
        raise TypeError(msg)
    return timedelta(seconds=value)


def clamp_delay(delay: timedelta) -> timedelta:
    """Return ``delay`` raised to at least ``MIN_DELAY``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from redo.utils.duration import clamp_delay
        >>> clamp_delay(timedelta(0))
        datetime.timedelta(microseconds=1000)
        >>> clamp_delay(timedelta(seconds=3))
        datetime.timedelta(seconds=3)

        ```
    """
    return max(delay, MIN_DELAY)


def scale_delay(delay: timedelta, factor: float) -> timedelta:
    """Multiply ``delay`` by ``factor`` and clamp the result.

    Zero, negative and NaN products become ``MIN_DELAY``; products that do
    not fit in a ``timedelta`` become ``MAX_DELAY``.

    Args:
        delay: The base delay.
        factor: The multiplier.

    Returns:
        The scaled delay, within ``[MIN_DELAY, MAX_DELAY]``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from redo.utils.duration import scale_delay
        >>> scale_delay(timedelta(milliseconds=10), 3)
        datetime.timedelta(microseconds=30000)
        >>> scale_delay(timedelta.max, 2) == timedelta.max
        True

        ```
    """
    if math.isnan(factor):
        return MIN_DELAY
    try:
        scaled = delay * factor
    except OverflowError:
        return MAX_DELAY if (delay > timedelta(0)) == (factor > 0) else MIN_DELAY
    return clamp_delay(scaled)


def sleep_seconds(delay: timedelta) -> float:
    """Return the number of seconds to sleep for ``delay``.

    Delays longer than ``MAX_SLEEP`` are capped to it.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from redo.utils.duration import MAX_SLEEP, sleep_seconds
        >>> sleep_seconds(timedelta(milliseconds=250))
        0.25
        >>> sleep_seconds(timedelta.max) == MAX_SLEEP.total_seconds()
        True

        ```
    """
    return min(delay, MAX_SLEEP).total_seconds()
