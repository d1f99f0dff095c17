r"""Default configuration store for the retry engine.

The store holds the values used by every operation that does not override
them: the retry strategy, the handled exception kinds and the exception
listeners. Its state is an immutable ``RetryDefaults`` snapshot that is
replaced as a whole under a lock on every mutation, so a running retry loop
always sees a consistent set of values.

Example:
    ```pycon
    >>> from redo import defaults
    >>> from redo.strategy import LinearDelay
    >>> defaults.set_strategy(LinearDelay(2, max_retries=5, delay=0.01))
    >>> defaults.get_strategy()
    LinearDelay(scale_factor=2, max_retries=5, delay=datetime.timedelta(microseconds=10000))
    >>> defaults.reset()
    >>> defaults.get_strategy()
    ConstantDelay(max_retries=30, delay=datetime.timedelta(microseconds=100000))

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULTS",
    "DefaultsStore",
    "RetryDefaults",
    "add_handled",
    "add_listener",
    "get_strategy",
    "reset",
    "set_delay",
    "set_max_retries",
    "set_strategy",
]

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from redo.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES
from redo.handlers import Handler, validate_handlers
from redo.utils.duration import to_timedelta
from redo.utils.validation import validate_max_retries

if TYPE_CHECKING:
    from redo.listeners import ExceptionListener
    from redo.strategy.base import RetryStrategy

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryDefaults:
    """Immutable snapshot of the default configuration.

    Attributes:
        max_retries: Default maximum number of retries, used by strategies
            built without an explicit value.
        delay: Default base delay, used by strategies built without an
            explicit value.
        strategy: The default retry strategy, or ``None`` to use a
            ``ConstantDelay`` built from ``max_retries`` and ``delay``.
        handled: Handled exception kinds in registration order. Empty means
            every ``Exception`` is retried.
        listeners: Exception listeners in registration order.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    delay: timedelta = DEFAULT_DELAY
    strategy: RetryStrategy | None = None
    handled: tuple[Handler, ...] = field(default_factory=tuple)
    listeners: tuple[ExceptionListener, ...] = field(default_factory=tuple)

    def resolve_strategy(self) -> RetryStrategy:
        """Return the default strategy of this snapshot."""
        if self.strategy is not None:
            return self.strategy
        from redo.strategy.constant import ConstantDelay

        return ConstantDelay(max_retries=self.max_retries, delay=self.delay)


class DefaultsStore:
    """Thread-safe holder of the current ``RetryDefaults`` snapshot.

    Args:
        initial: The snapshot restored by ``reset``. Defaults to the
            built-in values.

    Example:
        ```pycon
        >>> from redo.defaults import DefaultsStore
        >>> store = DefaultsStore()
        >>> store.set_max_retries(5)
        >>> store.max_retries
        5
        >>> store.reset()
        >>> store.max_retries
        30

        ```
    """

    def __init__(self, initial: RetryDefaults | None = None) -> None:
        self._initial = initial if initial is not None else RetryDefaults()
        self._current = self._initial
        self._lock = threading.Lock()

    def snapshot(self) -> RetryDefaults:
        """Return the current immutable snapshot."""
        return self._current

    def _update(self, **changes: Any) -> None:
        with self._lock:
            self._current = replace(self._current, **changes)

    @property
    def strategy(self) -> RetryStrategy:
        return self._current.resolve_strategy()

    def set_strategy(self, strategy: RetryStrategy) -> None:
        """Replace the default retry strategy.

        Args:
            strategy: The strategy used by operations without an override.
        """
        self._update(strategy=strategy)

    @property
    def max_retries(self) -> int:
        return self._current.max_retries

    def set_max_retries(self, max_retries: int) -> None:
        """Set the default maximum number of retries.

        Strategies built afterwards without an explicit ``max_retries``
        use this value, and so does the implicit constant-delay default
        strategy when no strategy was set.

        Raises:
            ValueError: If max_retries is negative.
        """
        validate_max_retries(max_retries)
        self._update(max_retries=max_retries)

    @property
    def delay(self) -> timedelta:
        return self._current.delay

    def set_delay(self, delay: timedelta | float) -> None:
        """Set the default base delay.

        Args:
            delay: A ``timedelta`` or a number of seconds.
        """
        self._update(delay=to_timedelta(delay))

    @property
    def handled(self) -> tuple[Handler, ...]:
        return self._current.handled

    def add_handled(self, *kinds: Handler) -> None:
        """Register exception kinds retried by default.

        Registrations are cumulative.

        Args:
            *kinds: Exception classes or predicates taking the exception.

        Raises:
            TypeError: If a kind is neither an exception class nor callable.
        """
        validate_handlers(kinds)
        with self._lock:
            self._current = replace(self._current, handled=self._current.handled + kinds)

    @property
    def listeners(self) -> tuple[ExceptionListener, ...]:
        return self._current.listeners

    def add_listener(self, listener: ExceptionListener) -> None:
        """Register an exception listener notified by every operation.

        Raises:
            TypeError: If listener is not callable.
        """
        if not callable(listener):
            msg = f"listener must be callable, got {listener!r}"
            raise TypeError(msg)
        with self._lock:
            self._current = replace(
                self._current, listeners=(*self._current.listeners, listener)
            )

    def reset(self) -> None:
        """Restore the initial snapshot, discarding every mutation."""
        with self._lock:
            self._current = self._initial
        logger.debug("Default retry configuration reset")


# Process-wide store used when an operation is not bound to another one
DEFAULTS = DefaultsStore()


def get_strategy() -> RetryStrategy:
    """Return the process-wide default retry strategy."""
    return DEFAULTS.strategy


def set_strategy(strategy: RetryStrategy) -> None:
    """Replace the process-wide default retry strategy."""
    DEFAULTS.set_strategy(strategy)


def set_max_retries(max_retries: int) -> None:
    """Set the process-wide default maximum number of retries."""
    DEFAULTS.set_max_retries(max_retries)


def set_delay(delay: timedelta | float) -> None:
    """Set the process-wide default base delay."""
    DEFAULTS.set_delay(delay)


def add_handled(*kinds: Handler) -> None:
    """Register exception kinds retried by default in this process."""
    DEFAULTS.add_handled(*kinds)


def add_listener(listener: ExceptionListener) -> None:
    """Register a process-wide exception listener."""
    DEFAULTS.add_listener(listener)


def reset() -> None:
    """Restore the process-wide defaults to their built-in values."""
    DEFAULTS.reset()
