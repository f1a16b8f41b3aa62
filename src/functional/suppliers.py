"""Supplier factories.

Suppliers take no input and produce a value on each call.
Randomness is injectable so callers can seed it for reproducibility.
"""

from __future__ import annotations

import random
from datetime import date
from typing import TypeVar

from core.constants import MAX_RANDOM_SCORE, MIN_RANDOM_SCORE
from core.errors import FunclabValueError
from core.types import Supplier

T = TypeVar("T")


def current_year_supplier() -> Supplier[int]:
    """Return a supplier of the current calendar year."""
    return lambda: date.today().year


def random_score_supplier(rng: random.Random | None = None) -> Supplier[int]:
    """Return a supplier of random scores between 1 and 100 inclusive.

    Args:
        rng: Optional random source; defaults to a fresh unseeded one.

    Returns:
        Score supplier.
    """
    return random_int_supplier(MIN_RANDOM_SCORE, MAX_RANDOM_SCORE, rng)


def random_int_supplier(
    lower: int,
    upper: int,
    rng: random.Random | None = None,
) -> Supplier[int]:
    """Return a supplier of random integers in [lower, upper].

    Raises:
        FunclabValueError: If the bounds are inverted.
    """
    if lower > upper:
        raise FunclabValueError(f"Invalid bounds: lower {lower} exceeds upper {upper}.")
    source = rng if rng is not None else random.Random()
    return lambda: source.randint(lower, upper)


def generate_values(supplier: Supplier[T], count: int) -> list[T]:
    """Call a supplier repeatedly and collect the results.

    Args:
        supplier: Value source.
        count: Number of calls.

    Returns:
        Values in generation order.

    Raises:
        FunclabValueError: If count is negative.
    """
    if count < 0:
        raise FunclabValueError(f"Invalid count {count}: expected a non-negative integer.")
    return [supplier() for _ in range(count)]
