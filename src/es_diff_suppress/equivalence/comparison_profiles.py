"""Normalization rules applied per kind of compared document."""

from __future__ import annotations

from dataclasses import dataclass

from es_diff_suppress.normalization import TEMPLATE_DEFAULT_SET, DefaultSet


@dataclass(frozen=True)
class ComparisonProfile:
    """How both sides are normalized before they are compared.

    `default_set` and `flatten_dotted_keys` apply to the configured (new) side only.
    With `scope_to_identifier` the stored (old) side is a document keyed by resource
    identifier and only the member under that identifier is compared.
    """

    name: str
    default_set: DefaultSet | None = None
    flatten_dotted_keys: bool = False
    scope_to_identifier: bool = False

    @property
    def requires_objects(self) -> bool:
        """Return True when both sides must decode to JSON objects."""
        return self.default_set is not None or self.flatten_dotted_keys or self.scope_to_identifier


INDEX_TEMPLATE_PROFILE = ComparisonProfile(
    name="index_template",
    default_set=TEMPLATE_DEFAULT_SET,
    flatten_dotted_keys=True,
    scope_to_identifier=True,
)

DATA_STREAM_TEMPLATE_PROFILE = ComparisonProfile(
    name="data_stream_template",
    default_set=TEMPLATE_DEFAULT_SET,
    flatten_dotted_keys=True,
    scope_to_identifier=True,
)

EQUIVALENT_JSON_PROFILE = ComparisonProfile(name="equivalent_json")

INGEST_PIPELINE_PROFILE = ComparisonProfile(name="ingest_pipeline")
