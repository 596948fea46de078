"""Result sets built from the text rows a PostgreSQL server returns."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqtkit.odbctypes import ValueKind
from sqtkit.pgtypes import PgType, is_numeric_type, sql_type_to_variant

__all__ = ["ResultColumn", "ResultTable", "convert_value"]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_INTEGER_TYPES = frozenset({PgType.INT2, PgType.INT4, PgType.INT8})
_FLOAT_TYPES = frozenset({PgType.FLOAT4, PgType.FLOAT8})


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def convert_value(sql_type: int, text: str | None) -> Any:
    """Value of a field given in text form, typed after the column's type.

    Integers and floats take their leading number (0 when there is none),
    booleans are true when the text starts with ``t``, ``"char"`` values
    become their first character (``"\\0"`` when empty), and everything
    else, dates and times included, keeps its text. ``None`` stays ``None``.
    """
    if text is None:
        return None
    if sql_type in _INTEGER_TYPES:
        return _leading_int(text)
    if sql_type in _FLOAT_TYPES:
        return _leading_float(text)
    if sql_type == PgType.BOOL:
        return text.startswith("t")
    if sql_type == PgType.CHAR:
        return text[0] if text else "\0"
    return text


@dataclass(frozen=True)
class ResultColumn:
    """A column of a result set as the server describes it."""

    name: str
    sql_type: int
    modifier: int = -1
    nullable: bool = True

    @property
    def kind(self) -> ValueKind:
        """Kind of value this column holds."""
        return sql_type_to_variant(self.sql_type)

    @property
    def right_aligned(self) -> bool:
        """Whether values are shown aligned to the right (numbers are)."""
        return is_numeric_type(self.sql_type)


@dataclass
class ResultTable:
    """Columns and rows of one result set, possibly fetched in parts."""

    columns: list[ResultColumn] = field(default_factory=list)
    rows: list[list[Any]] = field(default_factory=list)

    def append(
        self,
        fields: Iterable[tuple[str, int, int]],
        rows: Iterable[Sequence[str | None]],
    ) -> int:
        """Add rows given as text, ``None`` standing for NULL.

        ``fields`` holds ``(name, type oid, type modifier)`` for each column.
        The first call defines the columns; later calls must match their
        count. Returns the number of rows added.
        """
        field_list = list(fields)
        if not self.columns:
            self.columns = [
                ResultColumn(name, sql_type, modifier)
                for name, sql_type, modifier in field_list
            ]
        if len(field_list) != len(self.columns):
            raise ValueError("source and destination resultsets do not match")

        width = len(self.columns)
        converted: list[list[Any]] = []
        for row in rows:
            if len(row) != width:
                raise ValueError(
                    f"row has {len(row)} fields, the result set has {width} columns"
                )
            converted.append(
                [convert_value(column.sql_type, value) for column, value in zip(self.columns, row)]
            )
        self.rows.extend(converted)
        return len(converted)

    @property
    def row_count(self) -> int:
        """Number of rows held."""
        return len(self.rows)

    @property
    def column_count(self) -> int:
        """Number of columns held."""
        return len(self.columns)