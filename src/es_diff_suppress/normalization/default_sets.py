"""Default value injection for the configured side of a comparison."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from es_diff_suppress.json_documents import EMPTY_OBJECT, Document, JsonNumber, JsonObject


@dataclass(frozen=True)
class DefaultSet:
    """Named mapping of top-level keys to the value the API assumes when they are omitted."""

    name: str
    defaults: Mapping[str, Document]

    def apply(self, document: JsonObject) -> JsonObject:
        """Return a copy of `document` with every absent default key injected.

        Injected keys come first so that dotted members of the document such as
        `settings.index` are merged into the injected object during flattening.
        """
        missing = {
            key: value for key, value in self.defaults.items() if key not in document.members
        }
        if not missing:
            return document
        return JsonObject(members={**missing, **document.members})


TEMPLATE_DEFAULT_SET = DefaultSet(
    name="template",
    defaults={
        "order": JsonNumber(value=Decimal(0)),
        "settings": EMPTY_OBJECT,
        "mappings": EMPTY_OBJECT,
        "aliases": EMPTY_OBJECT,
    },
)
