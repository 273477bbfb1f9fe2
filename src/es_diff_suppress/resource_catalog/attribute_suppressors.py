"""Catalog of provider resource attributes and the predicate that suppresses their diffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from es_diff_suppress.equivalence import (
    DATA_STREAM_TEMPLATE_PROFILE,
    EQUIVALENT_JSON_PROFILE,
    INDEX_TEMPLATE_PROFILE,
    INGEST_PIPELINE_PROFILE,
    ComparisonProfile,
    suppress_data_stream_template,
    suppress_equivalent_json,
    suppress_index_template,
    suppress_ingest_pipeline,
    suppress_license,
)


class UnknownAttributeError(Exception):
    """Raised when no diff suppression is registered for a resource attribute."""


class SuppressorKind(str, Enum):
    """Supported diff suppression predicates."""

    INDEX_TEMPLATE = "index_template"
    DATA_STREAM_TEMPLATE = "data_stream_template"
    INGEST_PIPELINE = "ingest_pipeline"
    LICENSE = "license"
    EQUIVALENT_JSON = "equivalent_json"

    @property
    def requires_identifier(self) -> bool:
        """Return True when the stored document is keyed by resource identifier."""
        return self in (SuppressorKind.INDEX_TEMPLATE, SuppressorKind.DATA_STREAM_TEMPLATE)

    @property
    def profile(self) -> ComparisonProfile | None:
        """Return the normalization profile, or None for the license comparison."""
        return _PROFILES_BY_KIND.get(self)


_PROFILES_BY_KIND = {
    SuppressorKind.INDEX_TEMPLATE: INDEX_TEMPLATE_PROFILE,
    SuppressorKind.DATA_STREAM_TEMPLATE: DATA_STREAM_TEMPLATE_PROFILE,
    SuppressorKind.INGEST_PIPELINE: INGEST_PIPELINE_PROFILE,
    SuppressorKind.EQUIVALENT_JSON: EQUIVALENT_JSON_PROFILE,
}


@dataclass(frozen=True)
class AttributeSuppressor:
    """One string-valued JSON attribute of a provider resource."""

    resource_type: str
    attribute: str
    kind: SuppressorKind

    @property
    def requires_identifier(self) -> bool:
        """Return True when evaluation needs the resource identifier."""
        return self.kind.requires_identifier

    def evaluate(
        self, old_text: str | bytes, new_text: str | bytes, identifier: str | None = None
    ) -> bool:
        """Return True when the diff between both texts should be suppressed."""
        if self.kind == SuppressorKind.INDEX_TEMPLATE:
            return suppress_index_template(old_text, new_text, identifier)
        if self.kind == SuppressorKind.DATA_STREAM_TEMPLATE:
            return suppress_data_stream_template(old_text, new_text, identifier)
        if self.kind == SuppressorKind.INGEST_PIPELINE:
            return suppress_ingest_pipeline(old_text, new_text)
        if self.kind == SuppressorKind.LICENSE:
            return suppress_license(old_text, new_text)
        return suppress_equivalent_json(old_text, new_text)


def _entries(
    resource_type: str, kind: SuppressorKind, *attributes: str
) -> tuple[AttributeSuppressor, ...]:
    return tuple(
        AttributeSuppressor(resource_type=resource_type, attribute=attribute, kind=kind)
        for attribute in attributes
    )


_CATALOG: tuple[AttributeSuppressor, ...] = (
    *_entries("elasticsearch_index_template", SuppressorKind.INDEX_TEMPLATE, "template"),
    *_entries(
        "elasticsearch_xpack_data_stream_template",
        SuppressorKind.DATA_STREAM_TEMPLATE,
        "template",
    ),
    *_entries("elasticsearch_ingest_pipeline", SuppressorKind.INGEST_PIPELINE, "body"),
    *_entries("elasticsearch_license", SuppressorKind.LICENSE, "license"),
    *_entries("elasticsearch_index_lifecycle_policy", SuppressorKind.EQUIVALENT_JSON, "policy"),
    *_entries(
        "elasticsearch_role",
        SuppressorKind.EQUIVALENT_JSON,
        "metadata",
        "indices.query",
        "indices.field_security",
    ),
    *_entries("elasticsearch_role_mapping", SuppressorKind.EQUIVALENT_JSON, "rules", "metadata"),
    *_entries("elasticsearch_user", SuppressorKind.EQUIVALENT_JSON, "metadata"),
    *_entries(
        "elasticsearch_watcher",
        SuppressorKind.EQUIVALENT_JSON,
        "trigger",
        "input",
        "condition",
        "actions",
        "metadata",
        "throttle_period",
    ),
)

_CATALOG_BY_KEY = {(entry.resource_type, entry.attribute): entry for entry in _CATALOG}


def list_attribute_suppressors() -> tuple[AttributeSuppressor, ...]:
    """Return every registered attribute in deterministic order."""
    return _CATALOG


def find_attribute_suppressor(resource_type: str, attribute: str) -> AttributeSuppressor:
    """Look up the suppression registered for one resource attribute.

    Raises:
      UnknownAttributeError: If the attribute has no registered suppression.
    """
    entry = _CATALOG_BY_KEY.get((resource_type, attribute))
    if entry is None:
        raise UnknownAttributeError(
            f"No diff suppression registered for {resource_type}.{attribute}."
        )
    return entry


def should_suppress_diff(
    resource_type: str,
    attribute: str,
    old_text: str | bytes,
    new_text: str | bytes,
    identifier: str | None = None,
) -> bool:
    """Return True when a planned change of `resource_type.attribute` is only superficial."""
    suppressor = find_attribute_suppressor(resource_type, attribute)
    return suppressor.evaluate(old_text, new_text, identifier)
