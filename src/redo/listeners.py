r"""Exception listeners for observability.

Listeners are notified of every handled exception before the retry loop
decides whether to retry or give up. They are presentation-only hooks
(logging, metrics, alerting) and never influence that decision.

Example:
    ```pycon
    >>> import logging
    >>> from redo import running
    >>> from redo.listeners import log_exception
    >>> from redo.strategy import ConstantDelay
    >>> attempts = iter([ConnectionError("boom"), ConnectionError("boom"), "ok"])
    >>> def flaky():
    ...     value = next(attempts)
    ...     if isinstance(value, Exception):
    ...         raise value
    ...     return value
    ...
    >>> running(flaky).with_strategy(ConstantDelay(max_retries=3, delay=0.001)).report(
    ...     log_exception(logging.getLogger("example"))
    ... ).until_not_none()
    'ok'

    ```
"""

from __future__ import annotations

__all__ = ["ExceptionListener", "log_exception", "notify"]

import logging
from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

ExceptionListener = Callable[[Exception], None]


def notify(listeners: tuple[ExceptionListener, ...], exc: Exception) -> None:
    """Invoke every listener, in order, with the exception.

    A listener that raises is logged and skipped, so it can neither stop the
    remaining listeners nor replace the exception being reported.

    Args:
        listeners: The resolved listeners.
        exc: The handled exception raised by the operation.
    """
    for listener in listeners:
        try:
            listener(exc)
        except Exception:
            logger.warning(
                f"Exception listener {listener!r} failed while reporting "
                f"{type(exc).__name__}",
                exc_info=True,
            )


def log_exception(
    log: logging.Logger | None = None, level: int = logging.WARNING
) -> ExceptionListener:
    """Create a listener that logs every reported exception.

    Args:
        log: The logger to write to. Defaults to this module's logger.
        level: The log level (default: ``logging.WARNING``).

    Returns:
        An exception listener.
    """
    target = log if log is not None else logger

    def _listener(exc: Exception) -> None:
        target.log(level, f"Retrying after {type(exc).__name__}: {exc}")

    return _listener
