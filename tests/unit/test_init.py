r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import redo


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(redo.__version__, str)


def test_package_version_not_empty() -> None:
    """Test that __version__ is not empty."""
    assert len(redo.__version__) > 0


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in redo.__all__:
        assert hasattr(redo, name), f"{name} is in __all__ but not defined in module"


def test_public_api() -> None:
    """Test the entry points of the fluent API."""
    assert callable(redo.running)
    assert callable(redo.run_until)
    assert callable(redo.run_until_async)
    assert issubclass(redo.ConstantDelay, redo.RetryStrategy)
    assert issubclass(redo.LinearDelay, redo.RetryStrategy)
    assert issubclass(redo.ProgressiveDelay, redo.RetryStrategy)
    assert isinstance(redo.DEFAULTS, redo.DefaultsStore)
