r"""Unit tests for parameter validation."""

from __future__ import annotations

import math

import pytest

from redo.utils.validation import validate_func, validate_max_retries, validate_scale_factor

##########################################
#     Tests for validate_max_retries     #
##########################################


@pytest.mark.parametrize("max_retries", [0, 1, 3, 30])
def test_validate_max_retries_accepts_valid_values(max_retries: int) -> None:
    validate_max_retries(max_retries)


@pytest.mark.parametrize("max_retries", [-1, -10])
def test_validate_max_retries_rejects_negative_values(max_retries: int) -> None:
    with pytest.raises(ValueError, match=rf"max_retries must be >= 0, got {max_retries}"):
        validate_max_retries(max_retries)


@pytest.mark.parametrize("max_retries", [1.5, "3", None, True])
def test_validate_max_retries_rejects_non_integers(max_retries: object) -> None:
    with pytest.raises(TypeError, match=r"max_retries must be an integer"):
        validate_max_retries(max_retries)  # type: ignore[arg-type]


###################################
#     Tests for validate_func     #
###################################


def test_validate_func_accepts_callables() -> None:
    validate_func(lambda: None)
    validate_func(print)


@pytest.mark.parametrize("func", [None, 1, "func"])
def test_validate_func_rejects_non_callables(func: object) -> None:
    with pytest.raises(ValueError, match=r"func must be callable"):
        validate_func(func)


###########################################
#     Tests for validate_scale_factor     #
###########################################


@pytest.mark.parametrize("scale_factor", [0, 0.5, 10, -1.5])
def test_validate_scale_factor_accepts_finite_numbers(scale_factor: float) -> None:
    validate_scale_factor(scale_factor)


@pytest.mark.parametrize("scale_factor", [math.nan, math.inf, -math.inf])
def test_validate_scale_factor_rejects_non_finite_values(scale_factor: float) -> None:
    with pytest.raises(ValueError, match=r"scale_factor must be finite"):
        validate_scale_factor(scale_factor)


@pytest.mark.parametrize("scale_factor", ["2", None, True])
def test_validate_scale_factor_rejects_non_numbers(scale_factor: object) -> None:
    with pytest.raises(TypeError, match=r"scale_factor must be a number"):
        validate_scale_factor(scale_factor)  # type: ignore[arg-type]
