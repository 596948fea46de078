"""Query parameters in the text form the PostgreSQL client library takes."""

from __future__ import annotations

from typing import Any

__all__ = ["PgParams"]


def _to_text(param: Any) -> bytes | None:
    if param is None:
        return None
    if isinstance(param, (bytes, bytearray, memoryview)):
        return bytes(param)
    if isinstance(param, bool):
        return b"true" if param else b"false"
    return str(param).encode("utf-8")


class PgParams:
    """Ordered list of text parameters; ``None`` stands for SQL NULL."""

    def __init__(self) -> None:
        self._values: list[bytes | None] = []

    def add(self, param: Any) -> PgParams:
        """Append a parameter and return ``self`` for chaining.

        Strings are encoded as UTF-8, bytes are kept as they are,
        booleans become ``true``/``false`` and other values their text.
        """
        self._values.append(_to_text(param))
        return self

    def clear(self) -> PgParams:
        """Remove every parameter."""
        self._values.clear()
        return self

    def values(self) -> list[bytes | None]:
        """Parameter values in order, ``None`` for NULL."""
        return list(self._values)

    def lengths(self) -> list[int]:
        """Byte length of each parameter, 0 for NULL."""
        return [0 if value is None else len(value) for value in self._values]

    def __len__(self) -> int:
        return len(self._values)