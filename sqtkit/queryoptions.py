"""Extraction of query options embedded in ``/*sqt ... */`` comments."""

from __future__ import annotations

import json
import re
from typing import Any

__all__ = ["extract_query_options"]

_OPTIONS_COMMENT = re.compile(r"/\*sqt\b", re.ASCII)
_ARRAY_KEYS = frozenset({"copy_src", "copy_dst", "charts"})
_JSON_WHITESPACE = " \t\n\r"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _first_json_document(text: str) -> Any:
    """Parse the first JSON document in ``text``, ignoring whatever follows it.

    Returns ``None`` when no object or array can be parsed there.
    """
    start = len(text) - len(text.lstrip(_JSON_WHITESPACE))
    try:
        value, _ = _DECODER.raw_decode(text, start)
    except ValueError:
        return None
    if isinstance(value, (dict, list)):
        return value
    return None


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else [value]


def _merge(result: dict[str, Any], scope: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for key, value in scope.items():
        if key == "interval":
            if key not in result:
                merged[key] = value
        elif key in _ARRAY_KEYS:
            if key in result:
                merged[key] = _as_list(result[key]) + _as_list(value)
            else:
                merged[key] = _as_list(value)
    for key, value in result.items():
        merged.setdefault(key, value)
    return merged


def extract_query_options(query: str) -> dict[str, Any]:
    """Collect options from every ``/*sqt {json}`` comment in ``query``.

    The first ``interval`` found wins; ``copy_src``, ``copy_dst`` and
    ``charts`` values are accumulated into lists; other keys are ignored.
    Processing stops at the first comment whose JSON cannot be parsed.
    """
    result: dict[str, Any] = {}
    for match in _OPTIONS_COMMENT.finditer(query):
        document = _first_json_document(query[match.end():])
        if document is None:
            break
        if isinstance(document, dict):
            result = _merge(result, document)
    return result