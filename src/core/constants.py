"""Core constants used across Funclab modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

MIN_RANDOM_SCORE = 1
MAX_RANDOM_SCORE = 100
MIN_RAW_SCORE = 0
DEFAULT_SCORE_COUNT = 10
DEFAULT_SCORE_THRESHOLD = 50
FILTERED_SCORE_COUNT = 5
FILTERED_SCORE_THRESHOLD = 70
MIN_STRING_LENGTH = 3
SCORE_LABEL_PREFIX = "Score: "
STAR_DECORATION = "***"
VOWELS = "aeiou"
FAHRENHEIT_SCALE = 1.8
FAHRENHEIT_OFFSET = 32
DIVISION_SCALE = 10
DIVISION_FALLBACK = -1.0
UNSUPPORTED_VALUE_LABEL = "Unsupported"
MAX_ROUNDED_INT = 2**63 - 1
MIN_ROUNDED_INT = -(2**63)
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
