"""Public SDK surface for Funclab.

This module provides a stable import path for library users.
It re-exports the pipeline engine and the functional building blocks.
"""

from __future__ import annotations

from core.config import FunclabConfig
from core.maybe import Maybe
from core.types import ScoreProcessorOptions, TaggedValue, ValueKind
from functional.composition import and_then, build_string_length_pipeline, chain, compose
from functional.consumers import print_square, star_printer
from functional.division import process_division, safe_divide
from functional.functions import celsius_to_fahrenheit, count_vowels
from functional.predicates import is_all_upper_case, positive_and_divisible_by_five
from functional.suppliers import current_year_supplier, random_score_supplier
from functional.type_router import route_value, tag_value, transform_object
from pipeline.applications import (
    generate_and_filter_scores,
    process_strings,
    run_score_processor,
)
from pipeline.engine import build_element_consumer, pipeline

__all__ = [
    "FunclabConfig",
    "Maybe",
    "ScoreProcessorOptions",
    "TaggedValue",
    "ValueKind",
    "and_then",
    "build_element_consumer",
    "build_string_length_pipeline",
    "celsius_to_fahrenheit",
    "chain",
    "compose",
    "count_vowels",
    "current_year_supplier",
    "generate_and_filter_scores",
    "is_all_upper_case",
    "pipeline",
    "positive_and_divisible_by_five",
    "print_square",
    "process_division",
    "process_strings",
    "random_score_supplier",
    "route_value",
    "run_score_processor",
    "safe_divide",
    "star_printer",
    "tag_value",
    "transform_object",
]
