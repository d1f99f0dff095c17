r"""Unit tests for the integration exceptions."""

from __future__ import annotations

import httpx
import pytest

from redo.exceptions import RetryableStatusError


@pytest.fixture
def response() -> httpx.Response:
    return httpx.Response(503, request=httpx.Request("POST", "https://api.example.com/data"))


def test_retryable_status_error_attributes(response: httpx.Response) -> None:
    """Test that the response and status code are stored."""
    error = RetryableStatusError(response)
    assert error.response is response
    assert error.status_code == 503


def test_retryable_status_error_default_message(response: httpx.Response) -> None:
    """Test the default message."""
    message = str(RetryableStatusError(response))
    assert message.startswith("POST request to https://api.example.com")
    assert message.endswith("failed with status 503")


def test_retryable_status_error_custom_message(response: httpx.Response) -> None:
    """Test a custom message."""
    assert str(RetryableStatusError(response, "service unavailable")) == "service unavailable"


def test_retryable_status_error_is_exception(response: httpx.Response) -> None:
    """Test that the error can be raised and caught as an Exception."""
    with pytest.raises(Exception, match=r"failed with status 503"):
        raise RetryableStatusError(response)
