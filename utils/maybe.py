"""
utils/maybe.py
--------------
An explicit "zero or one value" container.

Single-row lookups return a Maybe so that "not found" is an ordinary
value the caller inspects, not ``None`` and not an exception.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_EMPTY: Any = object()


class Maybe(Generic[T]):
    """Holds either exactly one value (present) or nothing (empty)."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY):
        self._value = value

    @classmethod
    def of(cls, value: T) -> "Maybe[T]":
        """Wrap a value. ``None`` is rejected; use ``Maybe.empty()`` instead."""
        if value is None:
            raise ValueError("Maybe.of() requires a value, use Maybe.empty() for absence")
        return cls(value)

    @classmethod
    def empty(cls) -> "Maybe[T]":
        return cls()

    @classmethod
    def first(cls, items: Iterable[T]) -> "Maybe[T]":
        """Present with the first item of ``items``, empty if there is none."""
        for item in items:
            return cls.of(item)
        return cls.empty()

    def is_present(self) -> bool:
        return self._value is not _EMPTY

    def is_empty(self) -> bool:
        return self._value is _EMPTY

    def get(self) -> T:
        """
        Return the held value.

        Raises:
            LookupError: If the Maybe is empty.
        """
        if self._value is _EMPTY:
            raise LookupError("No value present")
        return self._value

    def or_else(self, default: U) -> "T | U":
        return self._value if self.is_present() else default

    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":
        if self.is_empty():
            return Maybe.empty()
        return Maybe.of(fn(self._value))

    def __bool__(self) -> bool:
        return self.is_present()

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value is other._value or (
            self.is_present() and other.is_present() and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((Maybe, self._value)) if self.is_present() else hash(Maybe)

    def __repr__(self) -> str:
        if self.is_empty():
            return "Maybe.empty()"
        return f"Maybe.of({self._value!r})"
