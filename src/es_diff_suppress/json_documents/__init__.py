"""JSON document domain exports."""

from .document_models import (
    EMPTY_OBJECT,
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)
from .document_parsing import DocumentParseError, dump_document, parse_document, to_document

__all__ = [
    "Document",
    "EMPTY_OBJECT",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "DocumentParseError",
    "parse_document",
    "to_document",
    "dump_document",
]
