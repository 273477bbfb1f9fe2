"""JSON document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class JsonObject:
    """JSON object; member order carries no meaning for equality."""

    members: Mapping[str, Document]


@dataclass(frozen=True)
class JsonArray:
    """JSON array; element order is significant."""

    items: tuple[Document, ...]


@dataclass(frozen=True)
class JsonString:
    """JSON string value."""

    value: str


@dataclass(frozen=True)
class JsonNumber:
    """JSON number, integers and fractions alike decoded as Decimal."""

    value: Decimal


@dataclass(frozen=True)
class JsonBoolean:
    """JSON boolean value."""

    value: bool


@dataclass(frozen=True)
class JsonNull:
    """JSON null."""


Document = JsonObject | JsonArray | JsonString | JsonNumber | JsonBoolean | JsonNull

EMPTY_OBJECT = JsonObject(members={})
