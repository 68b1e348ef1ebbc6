"""An in-memory table of typed columns that can be rendered as text."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from enum import Enum
from typing import Any, TextIO

from tinysql.values import format_value

_NUM_HEADER = "#   "
_DELIMITER = " | "
_TRUNCATION_WARNING = (
    "\nWARNING: Had to cut out some values since they did not fit\n"
    "Consider making your column names longer\n"
)


class TableError(ValueError):
    """Raised when a table operation is invalid."""


class DataType(Enum):
    """The column data types a table supports."""

    INTEGER = "INTEGER"
    SMALLINT = "SMALLINT"
    BIGINT = "BIGINT"
    FLOAT = "FLOAT"
    TEXT = "TEXT"
    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    NULL = "NULL"

    @property
    def is_char_type(self) -> bool:
        return self in (DataType.CHAR, DataType.VARCHAR)


def _as_data_type(data_type: DataType | str) -> DataType:
    if isinstance(data_type, DataType):
        return data_type
    try:
        return DataType(data_type)
    except ValueError as exc:
        raise TableError(f"unsupported data type: {data_type!r}") from exc


class Table:
    """Columns of cell values; missing cells hold ``None`` (SQL NULL)."""

    def __init__(self) -> None:
        self._columns: dict[str, list[Any]] = {}
        self._types: dict[str, DataType] = {}
        self._char_lengths: dict[str, int] = {}
        self._order: list[int] = []
        self._row_count = 0

    def insert_column(
        self, name: str, data_type: DataType | str, length: int | None = None
    ) -> None:
        """Add a column; existing rows get NULL in it.

        ``length`` is given for, and only for, CHAR and VARCHAR columns.
        """
        kind = _as_data_type(data_type)
        if length is not None and not kind.is_char_type:
            raise TableError(
                f"a length can only be given for CHAR or VARCHAR, not {kind.value}"
            )
        if name in self._columns:
            raise TableError(f"column {name!r} already exists")
        self._columns[name] = [None] * self._row_count
        self._types[name] = kind
        if length is not None:
            self._char_lengths[name] = length

    def insert_row(self, row: Mapping[str, Any]) -> None:
        """Append a row; unknown keys are ignored, missing columns get NULL."""
        for name, cells in self._columns.items():
            cells.append(row.get(name))
        self._order.append(self._row_count)
        self._row_count += 1

    def char_type_length(self, name: str) -> int:
        """The declared length of the CHAR or VARCHAR column ``name``."""
        if name not in self._columns:
            raise TableError(f"no column named {name!r}")
        try:
            return self._char_lengths[name]
        except KeyError as exc:
            raise TableError(f"column {name!r} has no declared length") from exc

    def _check_consistency(self) -> None:
        for name, cells in self._columns.items():
            if len(cells) != self._row_count:
                raise TableError(
                    f"row count and number of entries misaligned in {name}"
                )

    def render(self) -> str:
        """The table as text, one line per row, columns as wide as their names."""
        self._check_consistency()
        names = list(self._columns)
        lines = [_NUM_HEADER + "".join(_DELIMITER + name for name in names)]
        total_size = len(_NUM_HEADER) + sum(len(name) for name in names)
        lines.append("=" * total_size)

        truncated = False
        for index in self._order:
            parts = [str(index).ljust(len(_NUM_HEADER))]
            for name in names:
                width = len(name)
                text = format_value(self._columns[name][index])
                if len(text) > width:
                    text = text[:width]
                    truncated = True
                parts.append(_DELIMITER + text.ljust(width))
            lines.append("".join(parts))

        output = "\n".join(lines) + "\n"
        if truncated:
            output += _TRUNCATION_WARNING
        return output

    def show(self, file: TextIO | None = None) -> None:
        """Write the rendered table to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.render())