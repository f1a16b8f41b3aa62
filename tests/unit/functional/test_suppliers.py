"""Unit tests for supplier factories."""

from __future__ import annotations

import random
from datetime import date

import pytest

from core.errors import FunclabValueError
from functional.suppliers import (
    current_year_supplier,
    generate_values,
    random_int_supplier,
    random_score_supplier,
)


def test_current_year_supplier_returns_this_year() -> None:
    """Supplier should report the current calendar year."""
    assert current_year_supplier()() == date.today().year


def test_random_score_supplier_stays_in_range() -> None:
    """Scores should always be between 1 and 100 inclusive."""
    supplier = random_score_supplier(random.Random(11))

    scores = generate_values(supplier, 500)

    assert min(scores) >= 1 and max(scores) <= 100


def test_random_score_supplier_is_reproducible_with_seed() -> None:
    """Equal seeds should produce equal score sequences."""
    first = generate_values(random_score_supplier(random.Random(5)), 10)
    second = generate_values(random_score_supplier(random.Random(5)), 10)

    assert first == second


def test_random_int_supplier_rejects_inverted_bounds() -> None:
    """Lower bound above upper bound is invalid."""
    with pytest.raises(FunclabValueError):
        random_int_supplier(10, 1)


def test_generate_values_calls_supplier_count_times() -> None:
    """Generation should call the supplier exactly count times."""
    counter = iter(range(100))

    values = generate_values(lambda: next(counter), 4)

    assert values == [0, 1, 2, 3]


def test_generate_values_rejects_negative_count() -> None:
    """Negative counts should raise a value error."""
    with pytest.raises(FunclabValueError):
        generate_values(lambda: 1, -1)
