r"""Exceptions raised by the retry engine's integrations.

The retry loop itself never wraps exceptions: when it gives up, the
operation's own exception propagates unchanged. The exceptions defined
here are raised by helpers that turn non-exceptional outcomes, such as an
HTTP response with a retryable status code, into exceptions the loop can
retry.
"""

from __future__ import annotations

__all__ = ["RetryableStatusError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class RetryableStatusError(Exception):
    """Exception raised for an HTTP response with a retryable status code.

    Args:
        response: The HTTP response.
        message: Optional error message. Defaults to a description of the
            request and status code.

    Attributes:
        response: The HTTP response.
        status_code: The response status code.

    Example:
        ```pycon
        >>> import httpx
        >>> from redo.exceptions import RetryableStatusError
        >>> response = httpx.Response(503, request=httpx.Request("GET", "https://example.com"))
        >>> error = RetryableStatusError(response)
        >>> error.status_code
        503
        >>> "failed with status 503" in str(error)
        True

        ```
    """

    def __init__(self, response: httpx.Response, message: str | None = None) -> None:
        if message is None:
            request = response.request
            message = f"{request.method} request to {request.url} failed with status {response.status_code}"
        super().__init__(message)
        self.response = response
        self.status_code = response.status_code
