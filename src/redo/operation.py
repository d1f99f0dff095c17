r"""Fluent construction of retried operations.

``running`` wraps a zero-argument callable into an ``Operation``. The
operation is configured through chained calls, each returning a new
``Operation``, and executed by one of the terminal ``until*`` calls.

Example:
    ```pycon
    >>> from redo import running
    >>> from redo.strategy import LinearDelay
    >>> calls = []
    >>> def fetch():
    ...     calls.append(1)
    ...     if len(calls) < 3:
    ...         raise ConnectionError("not yet")
    ...     return {"status": "ready"}
    ...
    >>> running(fetch).with_strategy(LinearDelay(1, max_retries=5, delay=0.001)).handle(
    ...     ConnectionError
    ... ).until(lambda result: result is not None and result["status"] == "ready")
    {'status': 'ready'}
    >>> len(calls)
    3

    ```
"""

from __future__ import annotations

__all__ = ["Operation", "running"]

import inspect
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from redo.defaults import DEFAULTS, DefaultsStore
from redo.handlers import Handler, validate_handlers
from redo.run import run_until, run_until_async
from redo.utils.validation import validate_func

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from redo.listeners import ExceptionListener
    from redo.strategy.base import RetryStrategy

T = TypeVar("T")


@dataclass(frozen=True)
class Operation(Generic[T]):
    """A zero-argument callable together with its retry configuration.

    Every unset field falls back to the default configuration store when a
    terminal call runs the operation, not when the operation is built.

    Attributes:
        func: The operation to run. Its return value is the result passed
            to the completion predicate; side-effect-only callables return
            ``None``.
        strategy: Optional strategy override.
        handled: Optional handled exception kinds override, in registration
            order.
        listeners: Optional exception listeners override, in registration
            order.
        defaults: Optional default configuration store. Defaults to the
            process-wide store.
    """

    func: Callable[[], T | Awaitable[T]]
    strategy: RetryStrategy | None = None
    handled: tuple[Handler, ...] | None = None
    listeners: tuple[ExceptionListener, ...] | None = None
    defaults: DefaultsStore | None = None

    def __post_init__(self) -> None:
        validate_func(self.func)

    def with_strategy(self, strategy: RetryStrategy) -> Operation[T]:
        """Return a copy using ``strategy`` instead of the default one."""
        if strategy is None:
            msg = "strategy must not be None"
            raise ValueError(msg)
        return replace(self, strategy=strategy)

    def handle(self, *kinds: Handler) -> Operation[T]:
        """Return a copy that also retries the given exception kinds.

        Calls are cumulative. Once at least one kind is registered, the
        handled kinds of the default configuration are ignored and any other
        exception propagates at once. A predicate that raises is logged and
        treated as no match.

        Args:
            *kinds: ``Exception`` subclasses or predicates taking the
                exception. ``BaseException`` kinds such as
                ``KeyboardInterrupt`` always propagate.

        Raises:
            ValueError: If no kind is given.
            TypeError: If a kind is neither an ``Exception`` subclass nor
                callable.
        """
        if not kinds:
            msg = "handle() requires at least one exception kind"
            raise ValueError(msg)
        validate_handlers(kinds)
        return replace(self, handled=(self.handled or ()) + kinds)

    def report(self, listener: ExceptionListener) -> Operation[T]:
        """Return a copy that also notifies ``listener`` of handled exceptions.

        Calls are cumulative. Once at least one listener is registered, the
        listeners of the default configuration are not notified.

        Raises:
            TypeError: If listener is not callable.
        """
        if not callable(listener):
            msg = f"listener must be callable, got {listener!r}"
            raise TypeError(msg)
        return replace(self, listeners=(*(self.listeners or ()), listener))

    def using(self, defaults: DefaultsStore) -> Operation[T]:
        """Return a copy resolving unset fields from ``defaults``.

        Only the unset fields of this operation are resolved from
        ``defaults``; without a strategy override, the default strategy of
        ``defaults`` is built from its own ``max_retries`` and ``delay``. A
        strategy passed to ``with_strategy`` and built without
        ``max_retries`` or ``delay`` has already taken them from the
        process-wide store when it was constructed.
        """
        return replace(self, defaults=defaults)

    def _resolve(self) -> dict[str, Any]:
        current = (self.defaults if self.defaults is not None else DEFAULTS).snapshot()
        return {
            "strategy": self.strategy if self.strategy is not None else current.resolve_strategy(),
            "handled": self.handled if self.handled is not None else current.handled,
            "listeners": self.listeners if self.listeners is not None else current.listeners,
        }

    def until(self, satisfied: Callable[[T | None], bool]) -> T | None:
        """Run the operation until ``satisfied`` returns ``True``.

        The predicate receives each result, and ``None`` after every handled
        exception: returning ``True`` for ``None`` ends the loop with
        ``None`` even though the operation failed.

        Args:
            satisfied: The completion predicate.

        Returns:
            The result accepted by the predicate, or the last result if the
            strategy gave up on an attempt that did not raise.

        Raises:
            Exception: The original exception when it is not handled or when
                the strategy gave up on an attempt that raised.
        """
        return run_until(self.func, satisfied, **self._resolve())

    def until_not_none(self) -> T | None:
        """Run the operation until it returns something other than ``None``."""
        return self.until(_is_not_none)

    def until_success(self) -> T | None:
        """Run the operation until an attempt does not raise.

        This is the natural terminal call for side-effect-only operations.
        Unlike ``until(lambda _: True)``, a handled exception does not end
        the loop.

        Returns:
            The result of the first attempt that did not raise.
        """
        return replace(self, func=_boxed(self.func)).until_not_none()[0]

    async def until_async(self, satisfied: Callable[[T | None], bool]) -> T | None:
        """Asynchronous version of ``until``.

        ``func`` may be a coroutine function. The loop suspends between
        attempts instead of blocking the event loop.
        """
        return await run_until_async(self.func, satisfied, **self._resolve())

    async def until_not_none_async(self) -> T | None:
        """Asynchronous version of ``until_not_none``."""
        return await self.until_async(_is_not_none)

    async def until_success_async(self) -> T | None:
        """Asynchronous version of ``until_success``."""
        outcome = await replace(self, func=_boxed_async(self.func)).until_not_none_async()
        return outcome[0]


def _is_not_none(result: Any) -> bool:
    return result is not None


# A successful attempt is boxed in a 1-tuple so that it is never None, even
# when the operation itself returns None.
def _boxed(func: Callable[[], T]) -> Callable[[], tuple[T]]:
    def _func() -> tuple[T]:
        return (func(),)

    return _func


def _boxed_async(func: Callable[[], T | Awaitable[T]]) -> Callable[[], Awaitable[tuple[T]]]:
    async def _func() -> tuple[T]:
        result = func()
        if inspect.isawaitable(result):
            result = await result
        return (result,)

    return _func


def running(
    func: Callable[[], T | Awaitable[T]], *, defaults: DefaultsStore | None = None
) -> Operation[T]:
    """Wrap a zero-argument callable into a retried operation.

    Args:
        func: The operation to run.
        defaults: Optional default configuration store. Defaults to the
            process-wide store. See ``Operation.using``.

    Returns:
        An ``Operation`` ready to be configured and run.

    Raises:
        ValueError: If func is ``None`` or not callable.

    Example:
        ```pycon
        >>> from redo import running
        >>> running(lambda: 42).until_not_none()
        42

        ```
    """
    return Operation(func, defaults=defaults)
