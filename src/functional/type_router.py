"""Tagged-variant value routing.

Values are classified into a ValueKind once, at the boundary; routing
then branches on the tag alone through a handler table.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from core.constants import MAX_ROUNDED_INT, MIN_ROUNDED_INT, UNSUPPORTED_VALUE_LABEL
from core.types import TaggedValue, ValueKind


def tag_value(value: Any) -> TaggedValue:
    """Classify a raw value into a tagged variant.

    Booleans are tagged OTHER even though bool subclasses int.
    """
    if isinstance(value, bool):
        return TaggedValue(kind=ValueKind.OTHER, value=value)
    if isinstance(value, int):
        return TaggedValue(kind=ValueKind.INTEGER, value=value)
    if isinstance(value, str):
        return TaggedValue(kind=ValueKind.TEXT, value=value)
    if isinstance(value, float):
        return TaggedValue(kind=ValueKind.FLOAT, value=value)
    return TaggedValue(kind=ValueKind.OTHER, value=value)


def parse_tagged_value(raw: str) -> TaggedValue:
    """Build a tagged value from command-line text.

    Integers are tried first, then floats; anything else is text.
    """
    try:
        return TaggedValue(kind=ValueKind.INTEGER, value=int(raw))
    except ValueError:
        pass
    try:
        return TaggedValue(kind=ValueKind.FLOAT, value=float(raw))
    except ValueError:
        return TaggedValue(kind=ValueKind.TEXT, value=raw)


def route_value(tagged: TaggedValue) -> Any:
    """Dispatch a tagged value to the handler registered for its kind.

    Args:
        tagged: Classified value.

    Returns:
        Integer square, uppercase text, rounded float, or "Unsupported".
    """
    handler = _HANDLERS.get(tagged.kind, _unsupported)
    return handler(tagged.value)


def transform_object(value: Any) -> Any:
    return route_value(tag_value(value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties toward positive infinity.

    NaN maps to 0; infinities and overflow clamp to the signed 64-bit range.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return MAX_ROUNDED_INT if value > 0 else MIN_ROUNDED_INT
    floored = math.floor(value)
    rounded = floored + 1 if value - floored >= 0.5 else floored
    return max(MIN_ROUNDED_INT, min(MAX_ROUNDED_INT, rounded))


def _square(value: int) -> int:
    return value * value


def _upper(value: str) -> str:
    return value.upper()


def _unsupported(_value: Any) -> str:
    return UNSUPPORTED_VALUE_LABEL


_HANDLERS: dict[ValueKind, Callable[[Any], Any]] = {
    ValueKind.INTEGER: _square,
    ValueKind.TEXT: _upper,
    ValueKind.FLOAT: round_half_up,
    ValueKind.OTHER: _unsupported,
}
