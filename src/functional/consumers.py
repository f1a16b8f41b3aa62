"""Printing consumer factories.

Each consumer writes to the given stream, or stdout when omitted.
"""

from __future__ import annotations

from typing import Any, TextIO

from core.constants import STAR_DECORATION
from core.types import Consumer


def star_printer(stream: TextIO | None = None) -> Consumer[str]:
    """Return a consumer printing "*** value ***" on its own line."""

    def _print(value: str) -> None:
        print(f"{STAR_DECORATION} {value} {STAR_DECORATION}", file=stream)

    return _print


def print_square(stream: TextIO | None = None) -> Consumer[int]:
    """Return a consumer printing the square of an integer without a newline."""

    def _print(number: int) -> None:
        print(number * number, end="", file=stream)

    return _print


def line_printer(stream: TextIO | None = None) -> Consumer[Any]:
    def _print(value: Any) -> None:
        print(value, file=stream)

    return _print


def inline_printer(stream: TextIO | None = None) -> Consumer[Any]:
    def _print(value: Any) -> None:
        print(value, end="", file=stream)

    return _print


class CountingConsumer:
    """Consumer wrapper that counts the values it forwards.

    Attributes:
        count: Number of values passed to the wrapped consumer so far.
    """

    def __init__(self, consumer: Consumer[Any]) -> None:
        self._consumer = consumer
        self.count = 0

    def __call__(self, value: Any) -> None:
        self._consumer(value)
        self.count += 1
