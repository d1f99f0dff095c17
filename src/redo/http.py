r"""Retrying HTTP requests made with httpx.

This module adapts the retry engine to network calls: it classifies the
transient httpx errors and turns responses with a retryable status code
into ``RetryableStatusError`` so the retry loop treats both the same way.

Example:
    ```pycon
    >>> import httpx
    >>> from redo.http import running_request
    >>> from redo.strategy import ProgressiveDelay
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = (
    ...         running_request(client.get, "https://api.example.com/data")
    ...         .with_strategy(ProgressiveDelay(2, max_retries=5, delay=0.5))
    ...         .until_not_none()
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "TRANSIENT_ERRORS",
    "raise_for_retryable_status",
    "running_request",
]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from redo.exceptions import RetryableStatusError
from redo.operation import running

if TYPE_CHECKING:
    from collections.abc import Callable

    from redo.operation import Operation

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# Exceptions worth retrying: timeouts, connection and protocol errors,
# and responses rejected by raise_for_retryable_status
TRANSIENT_ERRORS = (httpx.TimeoutException, httpx.TransportError, RetryableStatusError)


def raise_for_retryable_status(
    response: httpx.Response, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> httpx.Response:
    """Raise ``RetryableStatusError`` if the status code should be retried.

    Other error statuses are returned unchanged: deciding what to do with
    them is left to the caller.

    Args:
        response: The HTTP response.
        status_forcelist: Status codes that trigger a retry.

    Returns:
        The response, unchanged.

    Raises:
        RetryableStatusError: If the status code is in ``status_forcelist``.
    """
    if response.status_code in status_forcelist:
        logger.debug(f"Received retryable status {response.status_code}")
        raise RetryableStatusError(response)
    return response


def running_request(
    request_func: Callable[..., httpx.Response],
    *args: Any,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    **kwargs: Any,
) -> Operation[httpx.Response]:
    """Build an operation sending an HTTP request with retries.

    The operation calls ``request_func(*args, **kwargs)``, rejects retryable
    status codes and handles ``TRANSIENT_ERRORS``; any other exception
    propagates at once.

    Args:
        request_func: The function sending the request, for example
            ``httpx.Client.get`` bound to a client.
        *args: Positional arguments passed to request_func.
        status_forcelist: Status codes that trigger a retry.
        **kwargs: Keyword arguments passed to request_func.

    Returns:
        An ``Operation`` ready to be configured further and run.
    """

    def _send() -> httpx.Response:
        return raise_for_retryable_status(request_func(*args, **kwargs), status_forcelist)

    return running(_send).handle(*TRANSIENT_ERRORS)
