"""Session-level helpers for PostgreSQL connections: stages, type catalog, messages."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Mapping
from typing import Optional

from sqtkit.pgresults import ResultColumn, ResultTable
from sqtkit.pgtypes import PgType

__all__ = [
    "AsyncStage",
    "TypeCatalog",
    "DBMS_INFO_PARAMETERS",
    "format_context",
    "format_dbms_info",
    "format_notification",
    "command_result_message",
    "classify_notice",
]

# Server parameters shown in the connection description, in display order.
DBMS_INFO_PARAMETERS = (
    "server_encoding",
    "client_encoding",
    "application_name",
    "is_superuser",
    "session_authorization",
    "DateStyle",
    "IntervalStyle",
    "TimeZone",
    "integer_datetimes",
    "standard_conforming_strings",
)

# Width the parameter names are padded to (the longest name fits).
_PARAMETER_NAME_WIDTH = 27

_TEXT_NOTICE_HINTS = frozenset({"script", "html"})

TYPE_CATALOG_QUERY = (
    "select t.oid, t.typname, el.oid "
    "from pg_type t "
    "   left join pg_type el on t.typelem = el.oid "
)

TypeRow = tuple[int, str, Optional[int]]
TypeLoader = Callable[[Optional[int]], Optional[Iterable[TypeRow]]]


class AsyncStage(enum.Enum):
    """Stage of an asynchronous exchange with the server."""

    NONE = "none"
    CONNECTING = "connecting"
    SENDING_QUERY = "sending_query"
    FLUSH = "flush"
    FLUSH_COPY = "flush_copy"
    WAIT_READY_READ = "wait_ready_read"
    COPY_OUT = "copy_out"
    COPY_IN = "copy_in"


class TypeCatalog:
    """Cache of type names and array element types, keyed by type oid.

    ``loader`` is called with ``None`` to fetch every type, or with an oid
    to fetch that type alone; it yields ``(oid, name, element oid or None)``
    rows, or returns ``None`` when the catalog cannot be read.
    """

    UNKNOWN = ("unknown", -1)

    def __init__(self, loader: TypeLoader) -> None:
        self._loader = loader
        self._types: dict[int, tuple[str, int]] = {}

    def lookup(self, oid: int) -> tuple[str, int]:
        """Name and element oid (-1 when none) of the type ``oid``."""
        cached = self._types.get(oid)
        if cached is not None:
            return cached

        rows = self._loader(oid if self._types else None)
        result = self.UNKNOWN
        for row_oid, name, element in rows or ():
            info = (name, -1 if element is None else int(element))
            self._types[int(row_oid)] = info
            if int(row_oid) == oid:
                result = info
        return result

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, oid: object) -> bool:
        return oid in self._types


def format_context(
    user: str | None, host: str | None, port: str | None, database: str | None
) -> str:
    """Text of the ``user@host:port/database`` context of a connection."""
    prefix = f"{user}@" if user else ""
    suffix = f":{port}/{database or ''}" if port else ""
    return prefix + (host or "") + suffix


def format_dbms_info(name: str, version: str, parameters: Mapping[str, str]) -> str:
    """Server description followed by the known session parameters it reports."""
    lines = [f"{name} v.{version}", ""]
    for parameter in DBMS_INFO_PARAMETERS:
        value = parameters.get(parameter)
        if value is None:
            continue
        lines.append(f"{parameter.ljust(_PARAMETER_NAME_WIDTH)}: {value}")
    return "\n".join(lines) + "\n"


def format_notification(pid: int, channel: str, payload: str) -> str:
    """Message shown when an asynchronous notification arrives."""
    return (
        "* notification received:\n"
        f"  server process id: {pid}\n"
        f"  channel: {channel}\n"
        f"  payload: {payload}"
    )


def command_result_message(tuples_affected: str | None) -> str:
    """Message for a finished command that returned no rows."""
    if tuples_affected:
        return f"{tuples_affected} rows affected"
    return "statement executed successfully"


def classify_notice(
    hint: str | None, primary: str | None, message: str
) -> ResultTable | str:
    """Turn a server notice into a text result set or a plain message.

    Notices whose hint is ``script`` or ``html`` carry content: they become
    a one-column, one-row result set named after the hint. Any other notice
    is returned as its message text.
    """
    if hint in _TEXT_NOTICE_HINTS:
        column = ResultColumn(hint, PgType.TEXT)
        return ResultTable(columns=[column], rows=[[primary or ""]])
    return message