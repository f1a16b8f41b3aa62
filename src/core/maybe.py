"""Optional value container.

Maybe models either a present value or explicit absence, so callers
can chain transforms without None checks and pick a default at the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from core.errors import FunclabValueError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """Immutable present-or-absent value.

    Attributes:
        value: Wrapped payload; always None when absent.
        present: Whether a value is held.
    """

    value: Any = None
    present: bool = False

    def __post_init__(self) -> None:
        if not self.present:
            object.__setattr__(self, "value", None)

    @classmethod
    def of(cls, value: T) -> "Maybe[T]":
        """Wrap a value, rejecting None."""
        if value is None:
            raise FunclabValueError("Maybe.of requires a non-None value; use of_nullable.")
        return cls(value=value, present=True)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Maybe[T]":
        """Wrap a value, treating None as absence."""
        if value is None:
            return cls.empty()
        return cls(value=value, present=True)

    @classmethod
    def empty(cls) -> "Maybe[T]":
        """Return the absent value."""
        return cls()

    def is_present(self) -> bool:
        return self.present

    def is_empty(self) -> bool:
        return not self.present

    def get(self) -> T:
        """Return the wrapped value.

        Raises:
            FunclabValueError: If no value is present.
        """
        if not self.present:
            raise FunclabValueError("No value present in empty Maybe.")
        return self.value

    def map(self, function: Callable[[T], R | None]) -> "Maybe[R]":
        """Transform the value if present; a None result becomes empty."""
        if not self.present:
            return Maybe.empty()
        return Maybe.of_nullable(function(self.value))

    def flat_map(self, function: Callable[[T], "Maybe[R]"]) -> "Maybe[R]":
        """Chain a Maybe-returning function if present."""
        if not self.present:
            return Maybe.empty()
        return function(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        """Keep the value only when it satisfies the predicate."""
        if self.present and predicate(self.value):
            return self
        return Maybe.empty()

    def or_else(self, default: T) -> T:
        """Return the value, or default when empty."""
        return self.value if self.present else default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value, or call supplier when empty."""
        return self.value if self.present else supplier()

    def if_present(self, consumer: Callable[[T], None]) -> None:
        """Pass the value to consumer when present."""
        if self.present:
            consumer(self.value)
