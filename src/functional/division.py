"""Absent-value arithmetic.

A zero denominator is a successful non-result, modeled as an empty
Maybe rather than an exception.
"""

from __future__ import annotations

from core.constants import DIVISION_FALLBACK, DIVISION_SCALE
from core.maybe import Maybe


def safe_divide(numerator: float, denominator: float) -> Maybe[float]:
    """Divide two numbers, returning empty when the denominator is zero.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        Present quotient as float, or empty.
    """
    if denominator == 0:
        return Maybe.empty()
    return Maybe.of(numerator / denominator)


def process_division(numerator: float, denominator: float) -> float:
    """Divide, scale a present result by 10, and fall back to -1.0."""
    return (
        safe_divide(numerator, denominator)
        .map(lambda quotient: quotient * DIVISION_SCALE)
        .or_else(DIVISION_FALLBACK)
    )
