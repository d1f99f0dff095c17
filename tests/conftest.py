from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

from redo import defaults
from redo.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_defaults() -> Generator[None, None, None]:
    """Restore the process-wide defaults after every test."""
    defaults.reset()
    yield
    defaults.reset()


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_strategy() -> Mock:
    """Create a mock retry strategy that never quits and never waits.

    Tests set ``should_quit.side_effect`` to control when the loop gives up.
    """
    strategy = Mock(spec=RetryStrategy)
    strategy.should_quit.return_value = False
    return strategy


@pytest.fixture
def mock_listener() -> Mock:
    """Create a mock exception listener."""
    return Mock()


@pytest.fixture
def mock_async_strategy(mock_strategy: Mock) -> Mock:
    """Create a mock retry strategy with an awaitable ``wait_async``."""
    mock_strategy.wait_async = AsyncMock(return_value=None)
    return mock_strategy
