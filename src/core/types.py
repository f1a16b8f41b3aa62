"""Shared typed models.

This module defines the callable shapes and immutable data models
used by the functional building blocks and the pipeline engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar

from core.constants import DEFAULT_SCORE_COUNT, DEFAULT_SCORE_THRESHOLD

T = TypeVar("T")
R = TypeVar("R")

Supplier = Callable[[], T]
Predicate = Callable[[T], bool]
Transform = Callable[[T], R]
Consumer = Callable[[T], None]


class ValueKind(str, Enum):
    """Explicit value kinds used for tagged-variant dispatch."""

    INTEGER = "integer"
    TEXT = "text"
    FLOAT = "float"
    OTHER = "other"


@dataclass(frozen=True)
class TaggedValue:
    """A value paired with its dispatch tag.

    Attributes:
        kind: Variant tag that routing branches on.
        value: Raw payload.
    """

    kind: ValueKind
    value: Any


@dataclass(frozen=True)
class ScoreProcessorOptions:
    """Score processor options.

    Attributes:
        score_count: Number of random scores to draw.
        threshold: Scores must be strictly greater to be reported.
    """

    score_count: int = DEFAULT_SCORE_COUNT
    threshold: int = DEFAULT_SCORE_THRESHOLD
