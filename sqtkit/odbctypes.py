"""ODBC data type codes and the descriptions derived from them."""

from __future__ import annotations

import enum

__all__ = [
    "ValueKind",
    "SqlType",
    "is_numeric_type",
    "is_unquoted_type",
    "sql_type_to_variant",
    "column_type_name",
    "final_connection_string",
    "dbms_info",
    "format_context",
]


class ValueKind(enum.Enum):
    """Kind of value a result column holds once fetched."""

    INT = "int"
    UINT = "uint"
    LONG_LONG = "longlong"
    DOUBLE = "double"
    BOOL = "bool"
    CHAR = "char"
    UCHAR = "uchar"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    STRING = "string"


class SqlType(enum.IntEnum):
    """ODBC SQL data type codes."""

    CHAR = 1
    NUMERIC = 2
    DECIMAL = 3
    INTEGER = 4
    SMALLINT = 5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    DATETIME = 9
    VARCHAR = 12
    TYPE_DATE = 91
    TYPE_TIME = 92
    TYPE_TIMESTAMP = 93
    LONGVARCHAR = -1
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    BIGINT = -5
    TINYINT = -6
    BIT = -7
    WCHAR = -8
    WVARCHAR = -9
    WLONGVARCHAR = -10
    GUID = -11
    VARIANT = -150
    SS_TIME2 = -154


_NUMERIC_TYPES = frozenset(
    {
        SqlType.DECIMAL,
        SqlType.NUMERIC,
        SqlType.TINYINT,
        SqlType.SMALLINT,
        SqlType.INTEGER,
        SqlType.BIGINT,
        SqlType.FLOAT,
        SqlType.DOUBLE,
        SqlType.REAL,
    }
)

_VALUE_KINDS = {
    SqlType.SMALLINT: ValueKind.INT,
    SqlType.INTEGER: ValueKind.INT,
    SqlType.BIGINT: ValueKind.LONG_LONG,
    SqlType.REAL: ValueKind.DOUBLE,
    SqlType.FLOAT: ValueKind.DOUBLE,
    SqlType.DOUBLE: ValueKind.DOUBLE,
    SqlType.BIT: ValueKind.BOOL,
    SqlType.TINYINT: ValueKind.UCHAR,
    SqlType.TYPE_DATE: ValueKind.DATE,
    SqlType.SS_TIME2: ValueKind.TIME,
    SqlType.TYPE_TIME: ValueKind.TIME,
    SqlType.TYPE_TIMESTAMP: ValueKind.DATETIME,
}

_FLOATING_TYPES = frozenset({SqlType.FLOAT, SqlType.REAL, SqlType.DOUBLE})

_SIZED_TYPES = frozenset(
    {
        SqlType.CHAR,
        SqlType.VARCHAR,
        SqlType.WCHAR,
        SqlType.WVARCHAR,
        SqlType.WLONGVARCHAR,
        SqlType.BINARY,
        SqlType.VARBINARY,
    }
)

# Column sizes drivers report for (n)varchar(max) and varbinary(max).
_MAX_SIZES = frozenset({536870911, 1073741823})

_FLOAT_NAMES = {24: "real", 53: "double precision"}


def is_numeric_type(sql_type: int) -> bool:
    """Whether values of ``sql_type`` are numbers."""
    return sql_type in _NUMERIC_TYPES


def is_unquoted_type(sql_type: int) -> bool:
    """Whether literals of ``sql_type`` are written without quotes."""
    return sql_type == SqlType.BIT or is_numeric_type(sql_type)


def sql_type_to_variant(sql_type: int) -> ValueKind:
    """The kind of value that a column of ``sql_type`` is fetched as."""
    return _VALUE_KINDS.get(sql_type, ValueKind.STRING)


def column_type_name(type_name: str, data_type: int, col_size: int, dec_digits: int) -> str:
    """Full type description of a result column, with size and precision."""
    if data_type in (SqlType.DECIMAL, SqlType.NUMERIC):
        scale = f",{dec_digits}" if dec_digits > 0 else ""
        return f"{type_name}({col_size}{scale})"
    if data_type in _FLOATING_TYPES and col_size in _FLOAT_NAMES:
        return _FLOAT_NAMES[col_size]
    if data_type in _FLOATING_TYPES or data_type in _SIZED_TYPES:
        if col_size > 0:
            size = "max" if col_size in _MAX_SIZES else str(col_size)
            return f"{type_name}({size})"
    return type_name


def final_connection_string(connection_string: str, database: str | None = None) -> str:
    """Connection string handed to the driver, with application and database."""
    suffix = f";Database={{{database}}};" if database else ""
    return f"APP=sqt;{connection_string}{suffix}"


def dbms_info(name: str, version: str) -> str:
    """Short description of the server product."""
    return f"{name} v.{version}"


def format_context(server: str | None, user: str | None, database: str | None) -> str:
    """Text of the ``user@server/database`` context of a connection."""
    context = server or ""
    if not context:
        context = database or ""
    elif database:
        context += "/" + database
    return (f"{user}@" if user else "") + context