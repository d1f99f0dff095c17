r"""Retry-loop driver.

This module implements the loop that repeatedly invokes an operation until
a completion predicate is satisfied or the retry strategy gives up.

Each iteration runs the following steps, with attempts numbered from 1:

1. Invoke the operation.
2. If it returned, evaluate the predicate on the result; stop and return the
   result if it is satisfied.
3. If it raised an exception that is not handled, propagate it at once.
   Otherwise notify every listener, then evaluate the predicate on ``None``;
   stop and return ``None`` if it is satisfied.
4. Ask the strategy whether to quit. If so, re-raise the exception of this
   iteration, or return the last result when the operation did not raise.
5. Wait as instructed by the strategy and start the next attempt.

Evaluating the predicate on ``None`` after a handled exception lets a
caller stop the loop without ever seeing the underlying exception, for
example ``until(lambda _: time.monotonic() > deadline)``.
"""

from __future__ import annotations

__all__ = ["run_until", "run_until_async"]

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from redo.handlers import matches
from redo.listeners import notify

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from redo.handlers import Handler
    from redo.listeners import ExceptionListener
    from redo.strategy.base import RetryStrategy

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_until(
    func: Callable[[], T],
    satisfied: Callable[[T | None], bool],
    *,
    strategy: RetryStrategy,
    handled: tuple[Handler, ...] = (),
    listeners: tuple[ExceptionListener, ...] = (),
) -> T | None:
    """Invoke ``func`` until ``satisfied`` holds or ``strategy`` quits.

    Args:
        func: The zero-argument operation to run.
        satisfied: Completion predicate. Receives the result of a successful
            attempt, or ``None`` after a handled exception.
        strategy: Decides when to give up and how long to wait.
        handled: Exception kinds to retry. Empty means every ``Exception``.
        listeners: Callbacks notified of every handled exception, in order.

    Returns:
        The first result satisfying the predicate, ``None`` if the predicate
        accepted ``None`` after an exception, or the last result when the
        strategy gave up on an attempt that did not raise.

    Raises:
        Exception: The operation's exception, unchanged, when its kind is not
            handled or when the strategy gives up on an attempt that raised.

    Example:
        ```pycon
        >>> from redo.run import run_until
        >>> from redo.strategy import ConstantDelay
        >>> values = iter([0, 1, 2, 3])
        >>> run_until(
        ...     lambda: next(values),
        ...     lambda value: value == 2,
        ...     strategy=ConstantDelay(max_retries=5, delay=0.001),
        ... )
        2

        ```
    """
    attempt = 1
    while True:
        error: Exception | None = None
        try:
            result = func()
        except Exception as exc:
            if not matches(handled, exc):
                logger.debug(f"Attempt {attempt} raised unhandled {type(exc).__name__}")
                raise
            logger.debug(f"Attempt {attempt} raised {type(exc).__name__}: {exc}")
            notify(listeners, exc)
            error = exc
            result = None

        if satisfied(result):
            logger.debug(f"Completion predicate satisfied after attempt {attempt}")
            return result

        if strategy.should_quit(attempt):
            logger.debug(f"Giving up after attempt {attempt}")
            if error is not None:
                raise error
            return result

        strategy.wait(attempt)
        attempt += 1


async def run_until_async(
    func: Callable[[], Awaitable[T] | T],
    satisfied: Callable[[T | None], bool],
    *,
    strategy: RetryStrategy,
    handled: tuple[Handler, ...] = (),
    listeners: tuple[ExceptionListener, ...] = (),
) -> T | None:
    """Asynchronous version of ``run_until``.

    ``func`` may be a coroutine function or a plain callable; awaitable
    results are awaited. The loop suspends with ``strategy.wait_async``
    between attempts and otherwise makes the same decisions, in the same
    order, as ``run_until``.
    """
    attempt = 1
    while True:
        error: Exception | None = None
        try:
            result: Any = func()
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            if not matches(handled, exc):
                logger.debug(f"Attempt {attempt} raised unhandled {type(exc).__name__}")
                raise
            logger.debug(f"Attempt {attempt} raised {type(exc).__name__}: {exc}")
            notify(listeners, exc)
            error = exc
            result = None

        if satisfied(result):
            logger.debug(f"Completion predicate satisfied after attempt {attempt}")
            return result

        if strategy.should_quit(attempt):
            logger.debug(f"Giving up after attempt {attempt}")
            if error is not None:
                raise error
            return result

        await strategy.wait_async(attempt)
        attempt += 1
