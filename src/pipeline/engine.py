"""Generic filter-transform-consume pipeline.

This module owns the single reusable orchestration primitive. It never
inspects how the injected predicate, transform, or consumer work.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable, TypeVar

from core.errors import PipelineStageError
from core.logging_config import get_logger
from core.types import Consumer, Predicate, Transform

T = TypeVar("T")
R = TypeVar("R")

_LOGGER = get_logger(__name__)


def pipeline(
    input_items: Iterable[T],
    predicate: Predicate[T],
    transform: Transform[T, R],
    consume: Consumer[R],
) -> None:
    """Filter, transform, and consume each input element in order.

    Rejected elements never reach the transform or the consumer. The
    first failing stage aborts the whole pass.

    Args:
        input_items: Elements to process; iterated once.
        predicate: Keeps elements for which it returns true.
        transform: Maps a kept element to its output value.
        consume: Receives each output value, one at a time.

    Raises:
        PipelineStageError: If any injected function raises. The original
            exception is chained as the cause.
    """
    input_count = 0
    accepted_count = 0
    for index, item in enumerate(input_items):
        input_count += 1
        if _process_element(index, item, predicate, transform, consume):
            accepted_count += 1
    _LOGGER.debug(
        "pipeline_completed",
        input_count=input_count,
        accepted_count=accepted_count,
    )


def build_element_consumer(
    predicate: Predicate[T],
    transform: Transform[T, R],
    consume: Consumer[R],
) -> Consumer[T]:
    """Bundle the three stages into a per-element consumer.

    Stage errors report the element position as the number of earlier
    calls to the returned consumer.

    Args:
        predicate: Element filter.
        transform: Element mapper.
        consume: Output sink.

    Returns:
        Consumer applying the pipeline rule to a single element.
    """
    positions = itertools.count()

    def _accept(item: T) -> None:
        _process_element(next(positions), item, predicate, transform, consume)

    return _accept


def _process_element(
    index: int,
    item: T,
    predicate: Predicate[T],
    transform: Transform[T, R],
    consume: Consumer[R],
) -> bool:
    """Run one element through the stages; return whether it was accepted."""
    if not _run_stage("filter", index, predicate, item):
        return False
    transformed = _run_stage("transform", index, transform, item)
    _run_stage("consume", index, consume, transformed)
    return True


def _run_stage(stage: str, index: int, function: Callable[[Any], Any], argument: Any) -> Any:
    """Invoke one injected stage function, wrapping its failure."""
    try:
        return function(argument)
    except Exception as error:
        _LOGGER.error(
            "pipeline_stage_failed",
            stage=stage,
            index=index,
            error_type=type(error).__name__,
        )
        raise PipelineStageError(
            stage,
            index,
            f"Pipeline {stage} stage failed at element {index}: {error}",
        ) from error
