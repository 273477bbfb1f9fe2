"""Structural equality over JSON documents."""

from __future__ import annotations

from typing import assert_never

from es_diff_suppress.json_documents import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)


def documents_equivalent(left: Document, right: Document) -> bool:
    """Return True when both documents have the same shape and values at every path.

    Nested pairs are compared from a worklist instead of by recursion, so deeply
    nested documents that parsed successfully can always be compared.
    """
    pending: list[tuple[Document, Document]] = [(left, right)]
    while pending:
        left_node, right_node = pending.pop()
        if not _node_equivalent(left_node, right_node, pending):
            return False
    return True


def _node_equivalent(
    left: Document, right: Document, pending: list[tuple[Document, Document]]
) -> bool:
    if isinstance(left, JsonObject):
        if not isinstance(right, JsonObject) or left.members.keys() != right.members.keys():
            return False
        pending.extend((member, right.members[key]) for key, member in left.members.items())
        return True
    if isinstance(left, JsonArray):
        if not isinstance(right, JsonArray) or len(left.items) != len(right.items):
            return False
        pending.extend(zip(left.items, right.items, strict=True))
        return True
    if isinstance(left, JsonString):
        return isinstance(right, JsonString) and left.value == right.value
    if isinstance(left, JsonNumber):
        return isinstance(right, JsonNumber) and left.value == right.value
    if isinstance(left, JsonBoolean):
        return isinstance(right, JsonBoolean) and left.value is right.value
    if isinstance(left, JsonNull):
        return isinstance(right, JsonNull)
    assert_never(left)
