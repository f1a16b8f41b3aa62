"""Unit tests for predicate factories and combinators."""

from __future__ import annotations

import pytest

from core.errors import FunclabValueError
from functional.predicates import (
    both,
    either,
    is_all_upper_case,
    is_divisible_by,
    negate,
    positive_and_divisible_by_five,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("HELLO", True), ("Hello", False), ("", True), ("ABC 123!", True), ("abc", False)],
)
def test_is_all_upper_case(text: str, expected: bool) -> None:
    """Strings without lowercase letters count as uppercase."""
    assert is_all_upper_case()(text) is expected


@pytest.mark.parametrize(
    ("number", "expected"),
    [(10, True), (5, True), (0, False), (-5, False), (7, False)],
)
def test_positive_and_divisible_by_five(number: int, expected: bool) -> None:
    """Only positive multiples of five should pass."""
    assert positive_and_divisible_by_five()(number) is expected


def test_both_short_circuits_on_first_failure() -> None:
    """Second predicate should not run when the first fails."""
    seen: list[int] = []

    def _second(value: int) -> bool:
        seen.append(value)
        return True

    assert both(lambda value: False, _second)(3) is False
    assert seen == []


def test_either_and_negate_combine() -> None:
    """Either and negate should follow boolean logic."""
    is_small = lambda value: value < 3
    is_large = lambda value: value > 8

    outside = either(is_small, is_large)

    assert outside(1) and outside(9) and negate(outside)(5)


def test_is_divisible_by_rejects_zero() -> None:
    """Zero divisor should be rejected up front."""
    with pytest.raises(FunclabValueError):
        is_divisible_by(0)
