"""Function composition helpers.

and_then runs its left function first; compose runs its right
function first. chain applies any number of functions left to right.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from core.types import Transform

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def and_then(first: Transform[A, B], second: Transform[B, C]) -> Transform[A, C]:
    """Return a function computing second(first(value))."""
    return lambda value: second(first(value))


def compose(outer: Transform[B, C], inner: Transform[A, B]) -> Transform[A, C]:
    """Return a function computing outer(inner(value))."""
    return lambda value: outer(inner(value))


def identity(value: A) -> A:
    return value


def chain(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right; an empty chain is the identity.

    Args:
        functions: Single-argument callables applied in order.

    Returns:
        Combined single-argument callable.
    """
    combined: Callable[[Any], Any] = identity
    for function in functions:
        combined = and_then(combined, function)
    return combined


def build_string_length_pipeline() -> Transform[str, int]:
    """Return a function that trims, lowercases, then measures a string.

    Returns:
        Function mapping raw text to the length of its normalized form.
    """
    trim: Transform[str, str] = str.strip
    lower: Transform[str, str] = str.lower
    length: Transform[str, int] = len
    return and_then(and_then(trim, lower), length)
