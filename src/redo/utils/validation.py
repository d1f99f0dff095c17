r"""Parameter validation utilities for retry strategies and operations."""

from __future__ import annotations

__all__ = ["validate_func", "validate_max_retries", "validate_scale_factor"]

import math
from typing import Any


def validate_max_retries(max_retries: int) -> None:
    """Validate the maximum number of retries.

    Args:
        max_retries: Maximum number of retry attempts after the first one.
            Must be >= 0. A value of 0 means only the initial attempt.

    Raises:
        TypeError: If max_retries is not an integer.
        ValueError: If max_retries is negative.

    Example:
        ```pycon
        >>> from redo.utils.validation import validate_max_retries
        >>> validate_max_retries(3)
        >>> validate_max_retries(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an integer, got {max_retries!r}"
        raise TypeError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)


def validate_scale_factor(scale_factor: float) -> None:
    """Validate the scale factor of a linear or progressive strategy.

    Raises:
        TypeError: If scale_factor is not a number.
        ValueError: If scale_factor is NaN or infinite.
    """
    if isinstance(scale_factor, bool) or not isinstance(scale_factor, (int, float)):
        msg = f"scale_factor must be a number, got {scale_factor!r}"
        raise TypeError(msg)
    if not math.isfinite(scale_factor):
        msg = f"scale_factor must be finite, got {scale_factor}"
        raise ValueError(msg)

def validate_func(func: Any) -> None:
    """Validate the operation passed to ``running``.

    Raises:
        ValueError: If func is missing or not callable.
    """
    if func is None or not callable(func):
        msg = f"func must be callable, got {func!r}"
        raise ValueError(msg)
