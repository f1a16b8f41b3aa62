"""Applied pipelines built from injected behavior.

Each function defines its suppliers, predicates, transforms, and
consumers first and then hands them to the generic pipeline engine.
"""

from __future__ import annotations

import random
from typing import Iterable, TextIO

from core.constants import (
    FILTERED_SCORE_COUNT,
    FILTERED_SCORE_THRESHOLD,
    MAX_RANDOM_SCORE,
    MIN_RAW_SCORE,
    MIN_STRING_LENGTH,
)
from core.logging_config import get_logger
from core.types import ScoreProcessorOptions
from functional.composition import identity
from functional.consumers import CountingConsumer, inline_printer, line_printer
from functional.functions import format_score, to_lower_case
from functional.predicates import is_greater_than, is_longer_than
from functional.suppliers import generate_values, random_int_supplier, random_score_supplier
from pipeline.engine import pipeline

_LOGGER = get_logger(__name__)


def process_strings(values: Iterable[str], stream: TextIO | None = None) -> None:
    """Print strings longer than three characters, lowercased, back to back.

    Args:
        values: Input strings.
        stream: Output stream; stdout when omitted.
    """
    pipeline(
        values,
        is_longer_than(MIN_STRING_LENGTH),
        to_lower_case(),
        inline_printer(stream),
    )


def generate_and_filter_scores(
    rng: random.Random | None = None,
    stream: TextIO | None = None,
) -> None:
    """Draw five scores in [0, 100] and print those above 70, one per line."""
    score_supplier = random_int_supplier(MIN_RAW_SCORE, MAX_RANDOM_SCORE, rng)
    scores = generate_values(score_supplier, FILTERED_SCORE_COUNT)
    pipeline(scores, is_greater_than(FILTERED_SCORE_THRESHOLD), identity, line_printer(stream))


def run_score_processor(
    options: ScoreProcessorOptions | None = None,
    rng: random.Random | None = None,
    stream: TextIO | None = None,
) -> None:
    """Generate random scores and print the passing ones as "Score: X".

    The pipeline only orchestrates: it does not know how scores are
    produced or how they are formatted.

    Args:
        options: Score count and threshold; defaults when omitted.
        rng: Optional random source for reproducible runs.
        stream: Output stream; stdout when omitted.
    """
    resolved_options = options or ScoreProcessorOptions()
    score_supplier = random_score_supplier(rng)
    passing = is_greater_than(resolved_options.threshold)
    formatter = format_score()
    printer = CountingConsumer(line_printer(stream))
    scores = generate_values(score_supplier, resolved_options.score_count)
    pipeline(scores, passing, formatter, printer)
    _LOGGER.info(
        "score_processor_completed",
        score_count=resolved_options.score_count,
        threshold=resolved_options.threshold,
        passing_count=printer.count,
    )
