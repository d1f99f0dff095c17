r"""Utility functions for the retry engine.

This package provides duration handling (coercion, floor and overflow
clamping) and parameter validation shared by the strategies and the
retry-loop driver.
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
    "validate_func",
    "validate_max_retries",
    "validate_scale_factor",
]

from redo.utils.duration import (
    MAX_DELAY,
    MAX_SLEEP,
    MIN_DELAY,
    clamp_delay,
    scale_delay,
    sleep_seconds,
    to_timedelta,
)
from redo.utils.validation import validate_func, validate_max_retries, validate_scale_factor
