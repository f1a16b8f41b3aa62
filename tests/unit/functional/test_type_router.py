"""Unit tests for tagged-variant value routing."""

from __future__ import annotations

import math

import pytest

from core.types import TaggedValue, ValueKind
from functional.type_router import (
    parse_tagged_value,
    round_half_up,
    route_value,
    tag_value,
    transform_object,
)


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (4, ValueKind.INTEGER),
        ("text", ValueKind.TEXT),
        (2.5, ValueKind.FLOAT),
        (True, ValueKind.OTHER),
        ([1, 2], ValueKind.OTHER),
        (None, ValueKind.OTHER),
    ],
)
def test_tag_value_classifies_kinds(value: object, kind: ValueKind) -> None:
    """Each raw value should receive the expected tag."""
    assert tag_value(value).kind is kind


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (7, 49),
        ("hello", "HELLO"),
        (2.5, 3),
        (-2.5, -2),
        (2.4, 2),
        (0.49999999999999994, 0),
        (4503599627370497.0, 4503599627370497),
        ([], "Unsupported"),
    ],
)
def test_transform_object(value: object, expected: object) -> None:
    """Routing should square ints, uppercase text, and round floats."""
    assert transform_object(value) == expected


def test_route_value_uses_tag_not_payload_type() -> None:
    """Dispatch should follow the tag even if the payload disagrees."""
    assert route_value(TaggedValue(kind=ValueKind.OTHER, value=3)) == "Unsupported"


def test_round_half_up_handles_special_floats() -> None:
    """NaN should round to zero and infinities should clamp."""
    assert round_half_up(math.nan) == 0
    assert round_half_up(math.inf) == 2**63 - 1
    assert round_half_up(-math.inf) == -(2**63)


@pytest.mark.parametrize(
    ("raw", "kind", "value"),
    [("12", ValueKind.INTEGER, 12), ("1.5", ValueKind.FLOAT, 1.5), ("abc", ValueKind.TEXT, "abc")],
)
def test_parse_tagged_value(raw: str, kind: ValueKind, value: object) -> None:
    """Command-line text should parse as int, then float, then text."""
    tagged = parse_tagged_value(raw)

    assert tagged.kind is kind and tagged.value == value
