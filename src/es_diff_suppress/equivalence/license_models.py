"""Cluster license entities."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import Decimal

from es_diff_suppress.json_documents import (
    Document,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)

LICENSE_ENVELOPE_KEY = "license"


class LicenseFormatError(Exception):
    """Raised when a document does not have the shape of a license."""


@dataclass(frozen=True)
class LicenseSpec:  # pylint: disable=too-many-instance-attributes
    """License fields as reported by the license API."""

    uid: str = ""
    type: str = ""
    issue_date_in_millis: Decimal = Decimal(0)
    expiry_date_in_millis: Decimal = Decimal(0)
    max_nodes: Decimal = Decimal(0)
    issued_to: str = ""
    issuer: str = ""
    signature: str = ""
    start_date_in_millis: Decimal = Decimal(0)

    def without_signature(self) -> LicenseSpec:
        """Return a copy with the signature cleared."""
        return replace(self, signature="")


_STRING_FIELDS = frozenset(
    field.name for field in fields(LicenseSpec) if isinstance(field.default, str)
)


def license_spec_from_document(document: Document) -> LicenseSpec:
    """Read a license spec from a JSON object.

    Unknown keys are ignored and null members keep the field default.

    Raises:
      LicenseFormatError: If the document is not an object or a member has the wrong type.
    """
    if not isinstance(document, JsonObject):
        raise LicenseFormatError("License must be a JSON object.")
    values: dict[str, object] = {}
    for field in fields(LicenseSpec):
        member = document.members.get(field.name)
        if member is None or isinstance(member, JsonNull):
            continue
        if field.name in _STRING_FIELDS:
            if not isinstance(member, JsonString):
                raise LicenseFormatError(f"License field '{field.name}' must be a string.")
            values[field.name] = member.value
        else:
            if not isinstance(member, JsonNumber):
                raise LicenseFormatError(f"License field '{field.name}' must be a number.")
            values[field.name] = member.value
    return LicenseSpec(**values)  # type: ignore[arg-type]


def unwrap_license_envelope(document: Document) -> Document:
    """Return the value of the `license` key of a `{"license": {...}}` envelope.

    Raises:
      LicenseFormatError: If the envelope is not an object or has no license member.
    """
    if not isinstance(document, JsonObject):
        raise LicenseFormatError("License envelope must be a JSON object.")
    spec = document.members.get(LICENSE_ENVELOPE_KEY)
    if spec is None or isinstance(spec, JsonNull):
        raise LicenseFormatError("License envelope has no 'license' member.")
    return spec
