"""Cell values: fixed and variable length strings, and SQL-style comparison."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable, Protocol

DEFAULT_LENGTH = 100


class DataTypeError(ValueError):
    """Raised when a value breaks the rules of its SQL data type."""


class _LengthSource(Protocol):
    def char_type_length(self, name: str) -> int: ...


class Comparison(Enum):
    """The six comparison operators a cell value supports."""

    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    GREATER = ">"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="

    @property
    def mismatch(self) -> bool:
        """Result when the two sides are of incomparable types."""
        return self is Comparison.NOT_EQUAL

    @property
    def on_equal(self) -> bool:
        """Result when the two sides are indistinguishable."""
        return self in (
            Comparison.EQUAL,
            Comparison.LESS_EQUAL,
            Comparison.GREATER_EQUAL,
        )

    def apply(self, lhs: Any, rhs: Any) -> bool:
        return _OPERATORS[self](lhs, rhs)


_OPERATORS: dict[Comparison, Callable[[Any, Any], bool]] = {
    Comparison.EQUAL: operator.eq,
    Comparison.NOT_EQUAL: operator.ne,
    Comparison.LESS: operator.lt,
    Comparison.GREATER: operator.gt,
    Comparison.LESS_EQUAL: operator.le,
    Comparison.GREATER_EQUAL: operator.ge,
}


def _text_for(item: str | Varchar, other: str | Varchar) -> str:
    """The text of ``item`` as used when compared against ``other``."""
    if isinstance(item, SQLChar):
        return item.value if isinstance(other, SQLChar) else item.unpadded()
    if isinstance(item, Varchar):
        return item.value
    return item


class Varchar:
    """A string bounded by a maximum length."""

    def __init__(self, value: str = "", length: int | None = None) -> None:
        if length is None:
            length = len(value) if value else DEFAULT_LENGTH
        self.value = value
        self.length = length
        self._enforce_length()

    @classmethod
    def for_column(cls, table: _LengthSource, name: str, value: str = "") -> Varchar:
        """Build a value sized for the char-type column ``name`` of ``table``."""
        return cls(value, table.char_type_length(name))

    def _enforce_length(self) -> None:
        if len(self.value) > self.length:
            raise DataTypeError(
                f"length of {type(self).__name__} value exceeds the stipulated "
                f"length {self.length}"
            )

    def _compare(self, other: object, op: Comparison) -> Any:
        if not isinstance(other, (str, Varchar)):
            return NotImplemented
        return op.apply(_text_for(self, other), _text_for(other, self))

    def __eq__(self, other: object) -> Any:
        return self._compare(other, Comparison.EQUAL)

    def __ne__(self, other: object) -> Any:
        return self._compare(other, Comparison.NOT_EQUAL)

    def __lt__(self, other: object) -> Any:
        return self._compare(other, Comparison.LESS)

    def __le__(self, other: object) -> Any:
        return self._compare(other, Comparison.LESS_EQUAL)

    def __gt__(self, other: object) -> Any:
        return self._compare(other, Comparison.GREATER)

    def __ge__(self, other: object) -> Any:
        return self._compare(other, Comparison.GREATER_EQUAL)

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.length})"


class SQLChar(Varchar):
    """A fixed-length string, padded on the right with spaces."""

    def __init__(self, value: str = "", length: int | None = None) -> None:
        super().__init__(value, length)
        self.value = self.value.ljust(self.length, " ")

    def unpadded(self) -> str:
        """The value without its trailing spaces."""
        return self.value.rstrip(" ")

    def __hash__(self) -> int:
        return hash(self.unpadded())


def _is_text(value: object) -> bool:
    return isinstance(value, (str, Varchar))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float))


def compare(lhs: Any, rhs: Any, op: Comparison) -> bool:
    """Compare two cell values; incomparable kinds give ``op.mismatch``."""
    if _is_text(lhs) and _is_text(rhs):
        return op.apply(_text_for(lhs, rhs), _text_for(rhs, lhs))
    if _is_number(lhs) and _is_number(rhs):
        return op.apply(float(lhs), float(rhs))
    if lhs is None and rhs is None:
        return op.on_equal
    return op.mismatch


def sql_equal(lhs: Any, rhs: Any) -> bool:
    return compare(lhs, rhs, Comparison.EQUAL)


def sql_not_equal(lhs: Any, rhs: Any) -> bool:
    return compare(lhs, rhs, Comparison.NOT_EQUAL)


def sql_less(lhs: Any, rhs: Any) -> bool:
    return compare(lhs, rhs, Comparison.LESS)


def sql_greater(lhs: Any, rhs: Any) -> bool:
    return compare(lhs, rhs, Comparison.GREATER)


def sql_less_equal(lhs: Any, rhs: Any) -> bool:
    return compare(lhs, rhs, Comparison.LESS_EQUAL)


def sql_greater_equal(lhs: Any, rhs: Any) -> bool:
    return compare(lhs, rhs, Comparison.GREATER_EQUAL)


def format_value(value: Any) -> str:
    """Render a cell value as text for display."""
    if value is None:
        return "NULL"
    if isinstance(value, (str, Varchar)):
        return str(value)
    if isinstance(value, float):
        return f"{value:.4f}"
    if isinstance(value, int):
        return str(value)
    raise DataTypeError(f"unsupported cell value type: {type(value).__name__}")