"""Runtime configuration model for Funclab.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SCORE_COUNT,
    DEFAULT_SCORE_THRESHOLD,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import FunclabConfigError


@dataclass(frozen=True)
class FunclabConfig:
    """Validated runtime configuration.

    Attributes:
        random_seed: Optional seed for reproducible score generation.
        score_count: Number of scores drawn by the score processor.
        score_threshold: Scores must exceed this value to be reported.
        log_level: Minimum structured log level written to stderr.
    """

    random_seed: int | None
    score_count: int
    score_threshold: int
    log_level: str

    @classmethod
    def from_env(cls) -> "FunclabConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FunclabConfigError: If environment values are invalid.
        """
        random_seed_value = os.getenv("FUNCLAB_RANDOM_SEED")
        random_seed = None
        if random_seed_value:
            random_seed = _parse_int("FUNCLAB_RANDOM_SEED", random_seed_value)
        score_count = _parse_int(
            "FUNCLAB_SCORE_COUNT", os.getenv("FUNCLAB_SCORE_COUNT", str(DEFAULT_SCORE_COUNT))
        )
        if score_count < 0:
            raise FunclabConfigError(
                f"Invalid FUNCLAB_SCORE_COUNT value: expected >= 0, got {score_count}."
            )
        score_threshold = _parse_int(
            "FUNCLAB_SCORE_THRESHOLD",
            os.getenv("FUNCLAB_SCORE_THRESHOLD", str(DEFAULT_SCORE_THRESHOLD)),
        )
        log_level = _parse_log_level(os.getenv("FUNCLAB_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            random_seed=random_seed,
            score_count=score_count,
            score_threshold=score_threshold,
            log_level=log_level,
        )


def _parse_int(variable_name: str, raw_value: str) -> int:
    """Parse an integer environment value.

    Args:
        variable_name: Environment variable name, used in errors.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        FunclabConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise FunclabConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name."""
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise FunclabConfigError(
            f"Invalid FUNCLAB_LOG_LEVEL value '{raw_value}'. Choose one of: {supported}."
        )
    return normalized
