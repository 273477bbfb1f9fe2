"""License entity tests."""

from __future__ import annotations

from decimal import Decimal

import pytest
from es_diff_suppress.equivalence import LicenseFormatError, LicenseSpec
from es_diff_suppress.equivalence.license_models import (
    license_spec_from_document,
    unwrap_license_envelope,
)
from es_diff_suppress.json_documents import parse_document


def test_reads_known_fields_and_ignores_unknown_ones() -> None:
    spec = license_spec_from_document(
        parse_document(
            '{"uid": "x", "type": "basic", "max_nodes": 1000, "status": "active",'
            ' "issue_date_in_millis": 1600000000000}'
        )
    )

    assert spec == LicenseSpec(
        uid="x",
        type="basic",
        max_nodes=Decimal(1000),
        issue_date_in_millis=Decimal(1600000000000),
    )


def test_null_members_keep_defaults() -> None:
    spec = license_spec_from_document(parse_document('{"uid": null, "max_nodes": null}'))

    assert spec == LicenseSpec()


@pytest.mark.parametrize(
    "text",
    ['{"uid": 1}', '{"max_nodes": "10"}', '{"signature": false}', "[]", '"license"'],
)
def test_rejects_wrong_member_types(text: str) -> None:
    with pytest.raises(LicenseFormatError):
        license_spec_from_document(parse_document(text))


def test_without_signature_clears_only_the_signature() -> None:
    spec = LicenseSpec(uid="x", signature="SIG")

    assert spec.without_signature() == LicenseSpec(uid="x")


def test_unwraps_license_envelope() -> None:
    inner = unwrap_license_envelope(parse_document('{"license": {"uid": "x"}}'))

    assert inner == parse_document('{"uid": "x"}')


@pytest.mark.parametrize("text", ['{"uid": "x"}', '{"license": null}', "[]"])
def test_rejects_envelope_without_license(text: str) -> None:
    with pytest.raises(LicenseFormatError):
        unwrap_license_envelope(parse_document(text))
