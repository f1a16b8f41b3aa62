"""Unit tests for the generic pipeline engine."""

from __future__ import annotations

import pytest

from core.errors import PipelineStageError
from pipeline.engine import build_element_consumer, pipeline


class _CallCounter:
    """Callable wrapper recording every argument it receives."""

    def __init__(self, function) -> None:
        self._function = function
        self.calls: list[object] = []

    def __call__(self, value):
        self.calls.append(value)
        return self._function(value)


def test_pipeline_even_numbers_times_ten() -> None:
    """Even filter with a x10 transform should capture 20, 40, 60."""
    output: list[int] = []

    pipeline([1, 2, 3, 4, 5, 6], lambda n: n % 2 == 0, lambda n: n * 10, output.append)

    assert output == [20, 40, 60]


def test_pipeline_rejecting_predicate_skips_transform_and_consumer() -> None:
    """Rejected elements must never reach transform or consumer."""
    transform = _CallCounter(lambda value: value)
    consumer = _CallCounter(lambda value: None)

    pipeline(["a", "b", "c"], lambda value: False, transform, consumer)

    assert transform.calls == [] and consumer.calls == []


def test_pipeline_accepting_predicate_consumes_each_element_in_order() -> None:
    """Accept-all should call the consumer once per element, in input order."""
    consumer = _CallCounter(lambda value: None)

    pipeline([3, 1, 2], lambda value: True, lambda value: value, consumer)

    assert consumer.calls == [3, 1, 2]


def test_pipeline_empty_input_never_calls_consumer() -> None:
    """Empty input should be a no-op without errors."""
    consumer = _CallCounter(lambda value: None)

    pipeline([], lambda value: True, lambda value: value, consumer)

    assert consumer.calls == []


def test_pipeline_only_transforms_qualifying_elements() -> None:
    """Transform should see exactly the qualifying elements, in order."""
    transform = _CallCounter(str.upper)
    output: list[str] = []

    pipeline(["ab", "abcd", "x", "wxyz"], lambda s: len(s) > 3, transform, output.append)

    assert transform.calls == ["abcd", "wxyz"] and output == ["ABCD", "WXYZ"]


def test_pipeline_is_repeatable_for_pure_inputs() -> None:
    """Two runs with the same pure inputs should yield the same calls."""
    first: list[int] = []
    second: list[int] = []
    values = [5, 10, 15, 20]

    pipeline(values, lambda n: n > 7, lambda n: n - 1, first.append)
    pipeline(values, lambda n: n > 7, lambda n: n - 1, second.append)

    assert first == second == [9, 14, 19]


def test_pipeline_accepts_generators() -> None:
    """Any iterable should work as input."""
    output: list[int] = []

    pipeline((n for n in range(5)), lambda n: n >= 3, lambda n: n, output.append)

    assert output == [3, 4]


def test_pipeline_aborts_on_first_transform_error() -> None:
    """A failing transform should stop the pass and report stage and index."""
    output: list[int] = []

    def _transform(value: int) -> int:
        if value == 2:
            raise ValueError("boom")
        return value

    with pytest.raises(PipelineStageError) as excinfo:
        pipeline([1, 2, 3], lambda value: True, _transform, output.append)

    assert output == [1]
    assert excinfo.value.stage == "transform" and excinfo.value.index == 1
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_pipeline_reports_filter_failures() -> None:
    """Predicate errors should be reported as filter stage failures."""
    with pytest.raises(PipelineStageError) as excinfo:
        pipeline([None], lambda value: value > 0, lambda value: value, lambda value: None)

    assert excinfo.value.stage == "filter"
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_pipeline_reports_consumer_failures() -> None:
    """Consumer errors should be reported as consume stage failures."""

    def _consume(value: int) -> None:
        raise RuntimeError("sink closed")

    with pytest.raises(PipelineStageError) as excinfo:
        pipeline([7], lambda value: True, lambda value: value, _consume)

    assert excinfo.value.stage == "consume" and excinfo.value.index == 0


def test_build_element_consumer_applies_rule_per_element() -> None:
    """Element consumer should filter and transform each accepted value."""
    output: list[str] = []
    accept = build_element_consumer(lambda n: n > 50, lambda n: f"Score: {n}", output.append)

    for score in [10, 60, 51, 50]:
        accept(score)

    assert output == ["Score: 60", "Score: 51"]


def test_build_element_consumer_reports_call_position_on_failure() -> None:
    """Errors should carry the position of the failing call, not zero."""

    def _transform(value: int) -> int:
        if value < 0:
            raise ValueError("negative")
        return value

    accept = build_element_consumer(lambda value: True, _transform, lambda value: None)
    accept(1)
    accept(2)

    with pytest.raises(PipelineStageError) as excinfo:
        accept(-3)

    assert excinfo.value.stage == "transform" and excinfo.value.index == 2
