r"""redo - Retry unreliable operations until they succeed.

This package repeatedly invokes a caller-supplied operation until it
succeeds, a completion predicate is satisfied, or a retry strategy decides
to give up. It replaces hand-written loop, backoff and exception-filtering
code around unreliable operations such as network calls or transient I/O.

Key Features:
    - Fluent, immutable configuration: ``running(func).with_strategy(...).handle(...)``
    - Constant, linear and progressive delay strategies
    - Exception classification by class or predicate; unhandled kinds propagate at once
    - Exception listeners for logging and metrics
    - Process-wide defaults with a thread-safe store and ``reset``
    - Synchronous and asynchronous drivers
    - Helpers for retrying httpx requests

Example:
    ```pycon
    >>> from redo import running
    >>> from redo.strategy import ConstantDelay
    >>> attempts = []
    >>> def connect():
    ...     attempts.append(len(attempts) + 1)
    ...     if len(attempts) < 2:
    ...         raise ConnectionError("refused")
    ...     return "connected"
    ...
    >>> running(connect).with_strategy(ConstantDelay(max_retries=3, delay=0.001)).handle(
    ...     ConnectionError
    ... ).until_not_none()
    'connected'

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULTS",
    "ConstantDelay",
    "DefaultsStore",
    "ExceptionListener",
    "LinearDelay",
    "Operation",
    "ProgressiveDelay",
    "RetryDefaults",
    "RetryStrategy",
    "__version__",
    "log_exception",
    "run_until",
    "run_until_async",
    "running",
]

from importlib.metadata import PackageNotFoundError, version

from redo.defaults import DEFAULTS, DefaultsStore, RetryDefaults
from redo.listeners import ExceptionListener, log_exception
from redo.operation import Operation, running
from redo.run import run_until, run_until_async
from redo.strategy import ConstantDelay, LinearDelay, ProgressiveDelay, RetryStrategy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
