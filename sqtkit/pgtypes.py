"""PostgreSQL type codes and the descriptions derived from them."""

from __future__ import annotations

import enum
import re

from sqtkit.odbctypes import ValueKind

__all__ = [
    "PgType",
    "TransactionStatus",
    "is_numeric_type",
    "is_unquoted_type",
    "sql_type_to_variant",
    "final_connection_string",
    "decode_modifier",
    "describe_type",
    "transaction_status_text",
]

# Size of the varlena header included in type modifiers.
VARHDRSZ = 4


class PgType(enum.IntEnum):
    """Object identifiers of built-in PostgreSQL types."""

    BOOL = 16
    BYTEA = 17
    CHAR = 18
    NAME = 19
    INT8 = 20
    INT2 = 21
    INT4 = 23
    REGPROC = 24
    TEXT = 25
    OID = 26
    TID = 27
    XID = 28
    CID = 29
    JSON = 114
    XML = 142
    FLOAT4 = 700
    FLOAT8 = 701
    ABSTIME = 702
    BPCHAR = 1042
    VARCHAR = 1043
    DATE = 1082
    TIME = 1083
    TIMESTAMP = 1114
    TIMESTAMPTZ = 1184
    INTERVAL = 1186
    TIMETZ = 1266
    BIT = 1560
    VARBIT = 1562
    NUMERIC = 1700
    UUID = 2950
    JSONB = 3802


class TransactionStatus(enum.IntEnum):
    """Transaction state of a server connection as reported by the client library."""

    IDLE = 0
    ACTIVE = 1
    INTRANS = 2
    INERROR = 3
    UNKNOWN = 4


_NUMERIC_TYPES = frozenset(
    {
        PgType.INT2,
        PgType.INT4,
        PgType.INT8,
        PgType.OID,
        PgType.TID,
        PgType.XID,
        PgType.CID,
        PgType.FLOAT4,
        PgType.FLOAT8,
        PgType.NUMERIC,
    }
)

_VALUE_KINDS = {
    PgType.INT2: ValueKind.INT,
    PgType.INT4: ValueKind.INT,
    PgType.OID: ValueKind.UINT,
    PgType.REGPROC: ValueKind.UINT,
    PgType.XID: ValueKind.UINT,
    PgType.CID: ValueKind.UINT,
    PgType.ABSTIME: ValueKind.LONG_LONG,
    PgType.INT8: ValueKind.LONG_LONG,
    PgType.FLOAT4: ValueKind.DOUBLE,
    PgType.FLOAT8: ValueKind.DOUBLE,
    PgType.BOOL: ValueKind.BOOL,
    PgType.CHAR: ValueKind.CHAR,
    PgType.DATE: ValueKind.DATE,
    PgType.TIME: ValueKind.TIME,
    PgType.TIMESTAMP: ValueKind.DATETIME,
    PgType.TIMESTAMPTZ: ValueKind.DATETIME,
}

_STATUS_TEXTS = {
    TransactionStatus.ACTIVE: "active",
    TransactionStatus.INTRANS: "intrans",
    TransactionStatus.INERROR: "inerror",
}

_QUOTED_CHARS = re.compile(r"(['\\])")


def is_numeric_type(sql_type: int) -> bool:
    """Whether values of ``sql_type`` are numbers."""
    return sql_type in _NUMERIC_TYPES


def is_unquoted_type(sql_type: int) -> bool:
    """Whether literals of ``sql_type`` are written without quotes."""
    return sql_type == PgType.BOOL or is_numeric_type(sql_type)


def sql_type_to_variant(sql_type: int) -> ValueKind:
    """The kind of value that a column of ``sql_type`` is fetched as."""
    return _VALUE_KINDS.get(sql_type, ValueKind.STRING)


def final_connection_string(connection_string: str, database: str | None = None) -> str:
    """Connection string handed to the server, with application and database name."""
    result = "application_name=sqt " + connection_string
    if database:
        escaped = _QUOTED_CHARS.sub(r"\\\1", database)
        result += f" dbname='{escaped}'"
    return result


def decode_modifier(sql_type: int, modifier: int) -> tuple[int, int]:
    """Length and scale encoded in a column type modifier.

    ``-1`` stands for a part that the modifier does not give.
    """
    length = -1
    scale = -1
    if modifier >= 0:
        if sql_type == PgType.NUMERIC:
            length = modifier >> 16
            scale = (modifier - VARHDRSZ) & 0xFFFF
        elif sql_type in (PgType.BIT, PgType.VARBIT):
            length = modifier
        elif modifier >= VARHDRSZ:
            length = modifier - VARHDRSZ
    return length, scale


def describe_type(
    type_name: str, element_oid: int, modifier: int, length: int, scale: int
) -> str:
    """Readable type of a result column, as it would be written in DDL.

    Array types (named with a leading underscore and having an element
    type) are written as the element type followed by ``[]``.
    """
    description = type_name[1:] if type_name.startswith("_") else type_name
    if modifier >= 0:
        precision = f",{scale}" if scale > 0 else ""
        description += f"({length}{precision})"
    elif description == "char":
        description = '"char"'
    if element_oid > 0 and type_name.startswith("_"):
        description += "[]"
    return description


def transaction_status_text(status: int) -> str:
    """Short text of a transaction status; empty when idle or unknown."""
    try:
        return _STATUS_TEXTS.get(TransactionStatus(status), "")
    except ValueError:
        return ""