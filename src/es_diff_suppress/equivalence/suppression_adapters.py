"""Diff suppression predicates for stored vs configured JSON documents.

Every predicate takes the stored (old) text and the configured (new) text and
returns True when the change is only superficial. Malformed input on either
side never raises: it is reported as a difference so that a real change is
never hidden.
"""

from __future__ import annotations

import logging

from es_diff_suppress.json_documents import (
    Document,
    DocumentParseError,
    JsonObject,
    parse_document,
)
from es_diff_suppress.normalization import flatten_dotted_keys

from .comparison_profiles import (
    DATA_STREAM_TEMPLATE_PROFILE,
    EQUIVALENT_JSON_PROFILE,
    INDEX_TEMPLATE_PROFILE,
    INGEST_PIPELINE_PROFILE,
    ComparisonProfile,
)
from .document_comparator import documents_equivalent
from .license_models import (
    LicenseFormatError,
    license_spec_from_document,
    unwrap_license_envelope,
)

_LOGGER = logging.getLogger(__name__)


class DocumentShapeError(Exception):
    """Raised when a parsed document does not have the shape a profile expects."""


def normalize_configured_document(new_text: str | bytes, profile: ComparisonProfile) -> Document:
    """Parse the configured side and apply the profile's defaults and flattening.

    Raises:
      DocumentParseError: If the text is not valid JSON.
      DocumentShapeError: If the profile needs an object and the document is not one.
    """
    document = parse_document(new_text)
    if not profile.requires_objects:
        return document
    if not isinstance(document, JsonObject):
        raise DocumentShapeError(f"Configured {profile.name} document must be a JSON object.")
    if profile.default_set is not None:
        document = profile.default_set.apply(document)
    if profile.flatten_dotted_keys:
        document = flatten_dotted_keys(document)
    return document


def normalize_and_compare(
    old_text: str | bytes,
    new_text: str | bytes,
    profile: ComparisonProfile,
    identifier: str | None = None,
) -> bool:
    """Return True when the stored and configured documents are equivalent under `profile`."""
    try:
        new_document = normalize_configured_document(new_text, profile)
        old_document = _select_comparison_scope(parse_document(old_text), profile, identifier)
        return documents_equivalent(old_document, new_document)
    except (DocumentParseError, DocumentShapeError) as exc:
        _LOGGER.debug("Reporting %s documents as different: %s", profile.name, exc)
        return False
    except RecursionError:
        _LOGGER.debug("Reporting %s documents as different: nesting too deep", profile.name)
        return False


def suppress_index_template(
    old_text: str | bytes, new_text: str | bytes, identifier: str | None
) -> bool:
    """Compare an index template body against the stored `{identifier: template}` document."""
    return normalize_and_compare(old_text, new_text, INDEX_TEMPLATE_PROFILE, identifier)


def suppress_data_stream_template(
    old_text: str | bytes, new_text: str | bytes, identifier: str | None
) -> bool:
    """Compare a data-stream template body against the stored `{identifier: template}` document."""
    return normalize_and_compare(old_text, new_text, DATA_STREAM_TEMPLATE_PROFILE, identifier)


def suppress_equivalent_json(old_text: str | bytes, new_text: str | bytes) -> bool:
    """Compare two arbitrary JSON values without any normalization."""
    return normalize_and_compare(old_text, new_text, EQUIVALENT_JSON_PROFILE)


def suppress_ingest_pipeline(old_text: str | bytes, new_text: str | bytes) -> bool:
    """Compare two ingest pipeline bodies structurally, without defaults or flattening."""
    return normalize_and_compare(old_text, new_text, INGEST_PIPELINE_PROFILE)


def suppress_license(old_text: str | bytes, new_text: str | bytes) -> bool:
    """Compare a stored license with a configured `{"license": {...}}` document.

    Signatures are cleared on both sides because the API rotates them.
    """
    try:
        old_spec = license_spec_from_document(parse_document(old_text))
        new_spec = license_spec_from_document(unwrap_license_envelope(parse_document(new_text)))
    except (DocumentParseError, LicenseFormatError) as exc:
        _LOGGER.debug("Reporting license documents as different: %s", exc)
        return False
    return old_spec.without_signature() == new_spec.without_signature()


def _select_comparison_scope(
    document: Document, profile: ComparisonProfile, identifier: str | None
) -> Document:
    if not profile.requires_objects:
        return document
    if not isinstance(document, JsonObject):
        raise DocumentShapeError(f"Stored {profile.name} document must be a JSON object.")
    if not profile.scope_to_identifier:
        return document
    if identifier is None:
        raise DocumentShapeError(f"{profile.name} comparison requires a resource identifier.")
    scoped = document.members.get(identifier)
    if scoped is None:
        raise DocumentShapeError(f"Stored {profile.name} document has no member '{identifier}'.")
    return scoped
