"""Single-argument transform factories."""

from __future__ import annotations

from core.constants import FAHRENHEIT_OFFSET, FAHRENHEIT_SCALE, SCORE_LABEL_PREFIX, VOWELS
from core.types import Transform


def celsius_to_fahrenheit() -> Transform[float, float]:
    """Return a Celsius to Fahrenheit converter (F = C * 9/5 + 32)."""
    return lambda celsius: celsius * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET


def count_vowels() -> Transform[str, int]:
    """Return a case-insensitive vowel counter."""
    return lambda text: sum(1 for character in text.lower() if character in VOWELS)


def to_lower_case() -> Transform[str, str]:
    return str.lower


def format_score() -> Transform[int, str]:
    """Return a transform rendering a score as "Score: X"."""
    return lambda score: f"{SCORE_LABEL_PREFIX}{score}"
