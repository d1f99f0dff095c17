r"""Classification of exceptions into retried and propagated ones.

A handler is either an ``Exception`` subclass, matched with ``isinstance``,
or a predicate receiving the exception. An empty set of handlers matches
every ``Exception``. ``BaseException`` kinds such as ``KeyboardInterrupt``
are never retried and cannot be registered.
"""

from __future__ import annotations

__all__ = ["Handler", "matches", "validate_handlers"]

import logging
from collections.abc import Callable, Iterable
from typing import Union

logger: logging.Logger = logging.getLogger(__name__)

Handler = Union[type[Exception], Callable[[Exception], bool]]


def validate_handlers(handlers: Iterable[Handler]) -> None:
    """Validate exception handlers before registering them.

    Args:
        handlers: Exception classes or predicates.

    Raises:
        TypeError: If a handler is neither an ``Exception`` subclass nor
            callable.
    """
    for handler in handlers:
        if isinstance(handler, type):
            if not issubclass(handler, Exception):
                msg = (
                    f"handler must be an exception class or a predicate, got {handler!r} "
                    "(only Exception subclasses can be retried)"
                )
                raise TypeError(msg)
        elif not callable(handler):
            msg = f"handler must be an exception class or a predicate, got {handler!r}"
            raise TypeError(msg)


def matches(handlers: tuple[Handler, ...], exc: Exception) -> bool:
    """Indicate whether an exception should be retried.

    Handlers are tested in registration order and the first match wins.
    A predicate that raises is logged and counts as no match, so the
    operation's own exception is the one that propagates.

    Args:
        handlers: The resolved handlers. An empty tuple matches everything.
        exc: The exception raised by the operation.

    Returns:
        ``True`` if the exception is handled, otherwise ``False``.

    Example:
        ```pycon
        >>> from redo.handlers import matches
        >>> matches((), KeyError("x"))
        True
        >>> matches((LookupError,), KeyError("x"))
        True
        >>> matches((ValueError,), KeyError("x"))
        False
        >>> matches((lambda exc: "retry" in str(exc),), RuntimeError("please retry"))
        True

        ```
    """
    if not handlers:
        return True
    for handler in handlers:
        if isinstance(handler, type):
            if isinstance(exc, handler):
                return True
            continue
        try:
            matched = handler(exc)
        except Exception:
            logger.warning(
                f"Exception handler {handler!r} failed while classifying {type(exc).__name__}",
                exc_info=True,
            )
            continue
        if matched:
            return True
    return False
