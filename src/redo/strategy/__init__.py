r"""Retry strategies deciding when to give up and how long to wait.

This package provides the ``RetryStrategy`` abstraction and its constant,
linear and progressive delay implementations.
"""

from __future__ import annotations

__all__ = ["ConstantDelay", "LinearDelay", "ProgressiveDelay", "RetryStrategy"]

from redo.strategy.base import RetryStrategy
from redo.strategy.constant import ConstantDelay
from redo.strategy.linear import LinearDelay
from redo.strategy.progressive import ProgressiveDelay
