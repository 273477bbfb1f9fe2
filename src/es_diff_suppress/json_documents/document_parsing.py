"""JSON text parsing into tagged document variants."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from .document_models import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)


class DocumentParseError(Exception):
    """Raised when text cannot be decoded into a JSON document."""


def parse_document(text: str | bytes) -> Document:
    """Parse JSON text into a document.

    Numbers are decoded as Decimal on every path so that `1` and `1.0` compare
    equal. NaN and Infinity literals are rejected because they are not JSON.

    Raises:
      DocumentParseError: If the input is not text or is not valid JSON.
    """
    if not isinstance(text, str | bytes | bytearray):
        raise DocumentParseError(f"Expected JSON text, got {type(text).__name__}.")
    try:
        decoded = json.loads(
            text,
            parse_float=Decimal,
            parse_int=Decimal,
            parse_constant=_reject_constant,
        )
        return to_document(decoded)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DocumentParseError(f"Invalid JSON document: {exc}") from exc
    except RecursionError as exc:
        raise DocumentParseError("JSON document is nested too deeply.") from exc


def to_document(value: Any) -> Document:
    """Convert a decoded JSON value (dict, list, str, number, bool, None) into a document.

    Containers are converted with an explicit stack, so nesting depth is bounded
    by memory rather than by the interpreter recursion limit.
    """
    pending: list[tuple[Any, bool]] = [(value, False)]
    built: list[Document] = []
    while pending:
        current, children_built = pending.pop()
        if isinstance(current, Mapping):
            if children_built:
                members = _take_built(built, len(current))
                built.append(JsonObject(members=dict(zip(current.keys(), members, strict=True))))
                continue
            for key in current:
                if not isinstance(key, str):
                    raise ValueError(f"JSON object keys must be strings, got {key!r}.")
            pending.append((current, True))
            pending.extend((member, False) for member in reversed(list(current.values())))
        elif isinstance(current, Sequence) and not isinstance(current, str):
            if children_built:
                built.append(JsonArray(items=tuple(_take_built(built, len(current)))))
                continue
            pending.append((current, True))
            pending.extend((item, False) for item in reversed(current))
        else:
            built.append(_scalar_document(current))
    return built[0]


def dump_document(document: Document, indent: int = 2) -> str:
    """Render a document as indented JSON text with sorted object keys.

    Numbers are written from their Decimal value, so the text carries exactly
    the value that is compared (`0.10000000000000000000001` stays as is, `1e400`
    is written as `1E+400`).
    """
    return _dump(document, indent, 0)


def _scalar_document(value: Any) -> Document:
    if value is None:
        return JsonNull()
    if isinstance(value, bool):
        return JsonBoolean(value=value)
    if isinstance(value, str):
        return JsonString(value=value)
    if isinstance(value, Decimal):
        return JsonNumber(value=value)
    if isinstance(value, int | float):
        return JsonNumber(value=Decimal(str(value)))
    raise ValueError(f"Unsupported JSON value type: {type(value).__name__}")


def _take_built(built: list[Document], count: int) -> list[Document]:
    start = len(built) - count
    children = built[start:]
    del built[start:]
    return children


def _dump(document: Document, indent: int, level: int) -> str:
    if isinstance(document, JsonObject):
        if not document.members:
            return "{}"
        lines = [
            f"{_json_string(key)}: {_dump(document.members[key], indent, level + 1)}"
            for key in sorted(document.members)
        ]
        return _wrap("{", lines, "}", indent, level)
    if isinstance(document, JsonArray):
        if not document.items:
            return "[]"
        lines = [_dump(item, indent, level + 1) for item in document.items]
        return _wrap("[", lines, "]", indent, level)
    if isinstance(document, JsonString):
        return _json_string(document.value)
    if isinstance(document, JsonNumber):
        return str(document.value)
    if isinstance(document, JsonBoolean):
        return "true" if document.value else "false"
    return "null"


def _wrap(opening: str, lines: list[str], closing: str, indent: int, level: int) -> str:
    inner = " " * (indent * (level + 1))
    separator = ",\n" + inner
    return f"{opening}\n{inner}{separator.join(lines)}\n{' ' * (indent * level)}{closing}"


def _json_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")
