r"""Unit tests for ConstantDelay strategy."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import Mock, patch

import pytest

from redo import defaults
from redo.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES
from redo.strategy.constant import ConstantDelay


def test_constant_delay_assigns_arguments() -> None:
    """Test that constructor arguments are assigned to attributes."""
    strategy = ConstantDelay(max_retries=7, delay=timedelta(milliseconds=250))
    assert strategy.max_retries == 7
    assert strategy.delay == timedelta(milliseconds=250)


def test_constant_delay_default_values() -> None:
    """Test constant delay with default values."""
    strategy = ConstantDelay()
    assert strategy.max_retries == DEFAULT_MAX_RETRIES
    assert strategy.delay == DEFAULT_DELAY


def test_constant_delay_uses_current_defaults() -> None:
    """Test that omitted values come from the default configuration."""
    defaults.set_max_retries(4)
    defaults.set_delay(2.5)
    strategy = ConstantDelay()
    assert strategy.max_retries == 4
    assert strategy.delay == timedelta(seconds=2.5)


def test_constant_delay_accepts_seconds() -> None:
    """Test that a number of seconds is converted to a timedelta."""
    assert ConstantDelay(max_retries=1, delay=0.5).delay == timedelta(milliseconds=500)


def test_constant_delay_invalid_max_retries() -> None:
    """Test that negative max_retries raises ValueError."""
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        ConstantDelay(max_retries=-1)


def test_constant_delay_should_quit() -> None:
    """Test should_quit around max_retries."""
    strategy = ConstantDelay()
    assert not strategy.should_quit(DEFAULT_MAX_RETRIES - 1)
    assert not strategy.should_quit(DEFAULT_MAX_RETRIES)
    assert strategy.should_quit(DEFAULT_MAX_RETRIES + 1)


def test_constant_delay_calculate_returns_delay() -> None:
    """Test that the delay does not depend on the attempt."""
    strategy = ConstantDelay(max_retries=3, delay=timedelta(milliseconds=40))
    assert strategy.calculate(1) == timedelta(milliseconds=40)
    assert strategy.calculate(2) == timedelta(milliseconds=40)
    assert strategy.calculate(100) == timedelta(milliseconds=40)


@pytest.mark.parametrize("scale_factor", [-3.0, 0.0, 1.0, 10.0])
def test_constant_delay_calculate_sleep_time_ignores_scale_factor(scale_factor: float) -> None:
    """Test that the scale factor has no effect."""
    delay = timedelta(milliseconds=15)
    assert ConstantDelay.calculate_sleep_time(5, delay, scale_factor) == delay


@pytest.mark.parametrize("delay", [timedelta(0), timedelta(milliseconds=-5)])
def test_constant_delay_calculate_sleep_time_is_at_least_one_millisecond(
    delay: timedelta,
) -> None:
    """Test that zero and negative delays are raised to one millisecond."""
    assert ConstantDelay.calculate_sleep_time(1, delay) == timedelta(milliseconds=1)


def test_constant_delay_wait_sleeps_for_calculated_time(mock_sleep: Mock) -> None:
    """Test that wait sleeps for the calculated delay."""
    ConstantDelay(max_retries=3, delay=timedelta(milliseconds=50)).wait(1)
    mock_sleep.assert_called_once_with(0.05)


def test_constant_delay_wait_calls_calculate_with_attempt(mock_sleep: Mock) -> None:
    """Test that wait passes the attempt to calculate."""
    strategy = ConstantDelay(max_retries=3, delay=timedelta(milliseconds=1))
    with patch.object(
        ConstantDelay, "calculate", return_value=timedelta(milliseconds=3)
    ) as calculate:
        strategy.wait(42)
    calculate.assert_called_once_with(42)
    mock_sleep.assert_called_once_with(0.003)


def test_constant_delay_repr() -> None:
    """Test the string representation."""
    assert repr(ConstantDelay(max_retries=2, delay=timedelta(seconds=1))) == (
        "ConstantDelay(max_retries=2, delay=datetime.timedelta(seconds=1))"
    )
