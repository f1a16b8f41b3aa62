"""Predicate factories and combinators."""

from __future__ import annotations

from typing import TypeVar

from core.errors import FunclabValueError
from core.types import Predicate

T = TypeVar("T")


def both(first: Predicate[T], second: Predicate[T]) -> Predicate[T]:
    """Return a predicate true when both inputs hold (short-circuits)."""
    return lambda value: first(value) and second(value)


def either(first: Predicate[T], second: Predicate[T]) -> Predicate[T]:
    """Return a predicate true when either input holds (short-circuits)."""
    return lambda value: first(value) or second(value)


def negate(predicate: Predicate[T]) -> Predicate[T]:
    return lambda value: not predicate(value)


def is_all_upper_case() -> Predicate[str]:
    """Return a predicate checking that a string has no lowercase letters.

    Strings without cased characters, including "", pass.
    """
    return lambda text: text == text.upper()


def is_positive() -> Predicate[int]:
    return lambda number: number > 0


def is_divisible_by(divisor: int) -> Predicate[int]:
    """Return a predicate checking divisibility by divisor.

    Raises:
        FunclabValueError: If divisor is zero.
    """
    if divisor == 0:
        raise FunclabValueError("Divisor must be non-zero.")
    return lambda number: number % divisor == 0


def is_longer_than(length: int) -> Predicate[str]:
    return lambda text: len(text) > length


def is_greater_than(threshold: int) -> Predicate[int]:
    return lambda number: number > threshold


def positive_and_divisible_by_five() -> Predicate[int]:
    """Return a predicate for numbers that are positive and a multiple of 5."""
    return both(is_positive(), is_divisible_by(5))
