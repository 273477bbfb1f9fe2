"""Rewrite dotted object keys into nested objects."""

from __future__ import annotations

from es_diff_suppress.json_documents import Document, JsonObject


def flatten_dotted_keys(document: JsonObject) -> JsonObject:
    """Return an equivalent object in which no key, at any object depth, contains a dot.

    `{"a.b": 1}` becomes `{"a": {"b": 1}}`. Arrays are kept as-is, objects nested
    inside them are not rewritten. Colliding keys resolve last-write-wins in
    document order: a dotted key merges into an object already present at its
    prefix and replaces anything else, a plain key replaces whatever is there.
    """
    result: dict[str, Document] = {}
    for key, value in document.members.items():
        if isinstance(value, JsonObject):
            value = flatten_dotted_keys(value)
        _insert_dotted(result, key, value)
    return JsonObject(members=result)


def _insert_dotted(target: dict[str, Document], key: str, value: Document) -> None:
    head, separator, rest = key.partition(".")
    if not separator:
        target[key] = value
        return
    existing = target.get(head)
    branch = dict(existing.members) if isinstance(existing, JsonObject) else {}
    _insert_dotted(branch, rest, value)
    target[head] = JsonObject(members=branch)
