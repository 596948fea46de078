"""Interpretation of ODBC batches, diagnostics and row counts."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "Severity",
    "DiagnosticRecord",
    "Diagnostic",
    "split_batches",
    "to_crlf",
    "interpret_diagnostics",
    "connection_broken",
    "rows_message",
]

_BATCH_SEPARATOR = re.compile(r"^go\s*$", re.IGNORECASE | re.MULTILINE)
_BARE_NEWLINE = re.compile(r"(?<!\r)\n")

_WARNING_STATES = frozenset({"01000", "00000"})
_CONNECTION_BROKEN_STATE = "08S01"

# "Statement(s) could not be prepared" follows every real error; it adds nothing.
_IGNORED_NATIVE_ERROR = 8180
_IGNORED_STATE = "42000"


class Severity(enum.Enum):
    """How a diagnostic is reported to the user."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class DiagnosticRecord:
    """One diagnostic record as returned by the driver."""

    sql_state: str
    native_error: int = 0
    message: str = ""


@dataclass(frozen=True)
class Diagnostic:
    """A diagnostic ready to be shown."""

    severity: Severity
    text: str


def split_batches(query: str) -> list[str]:
    """Split a script into batches at lines holding only ``go``.

    Empty batches are dropped.
    """
    return [part for part in _BATCH_SEPARATOR.split(query) if part]


def to_crlf(query: str) -> str:
    """Turn bare ``\\n`` line ends into ``\\r\\n``."""
    return _BARE_NEWLINE.sub("\r\n", query)


def _is_relevant(record: DiagnosticRecord) -> bool:
    if record.native_error == _IGNORED_NATIVE_ERROR and record.sql_state == _IGNORED_STATE:
        return False
    return bool(record.message) or bool(record.native_error)


def interpret_diagnostics(
    records: Iterable[DiagnosticRecord], statement: bool = True
) -> list[Diagnostic]:
    """Turn driver diagnostic records into messages for the user.

    ``statement`` selects the rules used for statement handles; other
    handles end every message with a newline and report plain ones as
    errors.
    """
    result: list[Diagnostic] = []
    for record in records:
        if not _is_relevant(record):
            continue
        is_warning = record.sql_state in _WARNING_STATES
        message = record.message if statement else record.message + "\n"
        if not is_warning or record.native_error:
            label = "warning" if is_warning else "error"
            text = f"{label} {record.native_error}, state {record.sql_state}: {message}"
            severity = Severity.WARNING if is_warning else Severity.ERROR
            result.append(Diagnostic(severity, text))
        elif statement:
            result.append(Diagnostic(Severity.INFO, message))
        else:
            result.append(Diagnostic(Severity.ERROR, message))
    return result


def connection_broken(records: Iterable[DiagnosticRecord]) -> bool:
    """Whether the records report a broken link to the server."""
    return any(
        _is_relevant(record) and record.sql_state == _CONNECTION_BROKEN_STATE
        for record in records
    )


def rows_message(column_count: int, row_count: int | None) -> str | None:
    """Summary of a finished result: rows fetched or rows affected.

    Returns ``None`` when a statement reports no row count.
    """
    if column_count:
        return f"{row_count} rows fetched"
    if row_count is None or row_count == -1:
        return None
    return f"{row_count} rows affected"