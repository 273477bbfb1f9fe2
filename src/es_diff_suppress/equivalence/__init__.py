"""Equivalence domain exports."""

from .comparison_profiles import (
    DATA_STREAM_TEMPLATE_PROFILE,
    EQUIVALENT_JSON_PROFILE,
    INDEX_TEMPLATE_PROFILE,
    INGEST_PIPELINE_PROFILE,
    ComparisonProfile,
)
from .document_comparator import documents_equivalent
from .license_models import LicenseFormatError, LicenseSpec
from .suppression_adapters import (
    DocumentShapeError,
    normalize_and_compare,
    normalize_configured_document,
    suppress_data_stream_template,
    suppress_equivalent_json,
    suppress_index_template,
    suppress_ingest_pipeline,
    suppress_license,
)

__all__ = [
    "ComparisonProfile",
    "DATA_STREAM_TEMPLATE_PROFILE",
    "EQUIVALENT_JSON_PROFILE",
    "INDEX_TEMPLATE_PROFILE",
    "INGEST_PIPELINE_PROFILE",
    "DocumentShapeError",
    "LicenseFormatError",
    "LicenseSpec",
    "documents_equivalent",
    "normalize_and_compare",
    "normalize_configured_document",
    "suppress_data_stream_template",
    "suppress_equivalent_json",
    "suppress_index_template",
    "suppress_ingest_pipeline",
    "suppress_license",
]
