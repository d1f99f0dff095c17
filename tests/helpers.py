r"""Shared test helpers for the retry engine tests."""

from __future__ import annotations

__all__ = ["ErrorA", "ErrorB", "ErrorC", "quit_after", "raising", "sequence"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class ErrorA(Exception):
    """Exception kind used to test exception classification."""


class ErrorB(Exception):
    """Exception kind used to test exception classification."""


class ErrorC(Exception):
    """Exception kind used to test exception classification."""


def quit_after(retries: int) -> Callable[[int], bool]:
    """Create a ``should_quit`` side effect that quits once ``attempt > retries``."""
    return lambda attempt: attempt > retries


def raising(exc: BaseException) -> Callable[[], Any]:
    """Create an operation that always raises ``exc``."""

    def _func() -> Any:
        raise exc

    return _func


def sequence(outcomes: Iterable[Any]) -> Callable[[], Any]:
    """Create an operation returning, or raising, the given outcomes in turn."""
    iterator = iter(outcomes)

    def _func() -> Any:
        outcome = next(iterator)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    return _func
