"""Drift-check manifest loader service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from es_diff_suppress.resource_catalog import (
    AttributeSuppressor,
    UnknownAttributeError,
    find_attribute_suppressor,
)

from .runtime_settings import Configuration, DocumentCheck, DocumentSource


class ConfigurationError(Exception):
    """Raised when the drift-check manifest is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the drift-check manifest (YAML or JSON)."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    checks = _parse_checks_section(parsed.get("checks"), path.parent)
    return Configuration(path=path, checks=checks)


def _parse_checks_section(value: Any, base_path: Path) -> tuple[DocumentCheck, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str) or not value:
        raise ConfigurationError("Configuration section 'checks' must be a non-empty list.")

    checks: list[DocumentCheck] = []
    seen_names: set[str] = set()
    for index, entry in enumerate(value, start=1):
        check = _parse_check(entry, index, base_path)
        if check.name in seen_names:
            raise ConfigurationError(f"Duplicate check name: {check.name}")
        seen_names.add(check.name)
        checks.append(check)
    return tuple(checks)


def _parse_check(value: Any, index: int, base_path: Path) -> DocumentCheck:
    section = _require_mapping(value, f"checks[{index}]")
    label = f"checks[{index}]"
    resource_type = _require_non_empty_string(section.get("resource"), f"{label}.resource")
    attribute = _require_non_empty_string(section.get("attribute"), f"{label}.attribute")
    suppressor = _resolve_suppressor(resource_type, attribute)
    identifier = _optional_string(section.get("identifier"), f"{label}.identifier")
    if suppressor.requires_identifier and identifier is None:
        raise ConfigurationError(
            f"{label}.identifier is required for {resource_type}.{attribute}."
        )
    name = _optional_string(section.get("name"), f"{label}.name") or _default_check_name(
        suppressor, identifier, index
    )
    return DocumentCheck(
        name=name,
        suppressor=suppressor,
        identifier=identifier,
        old=_load_document_source(section.get("old"), f"{label}.old", base_path),
        new=_load_document_source(section.get("new"), f"{label}.new", base_path),
    )


def _resolve_suppressor(resource_type: str, attribute: str) -> AttributeSuppressor:
    try:
        return find_attribute_suppressor(resource_type, attribute)
    except UnknownAttributeError as exc:
        raise ConfigurationError(str(exc)) from exc


def _default_check_name(
    suppressor: AttributeSuppressor, identifier: str | None, index: int
) -> str:
    target = identifier or str(index)
    return f"{suppressor.resource_type}.{suppressor.attribute}[{target}]"


def _load_document_source(definition: Any, label: str, base_path: Path) -> DocumentSource:
    if isinstance(definition, str):
        return DocumentSource(text=definition, source_path=None)
    mapping = _require_mapping(definition, label)
    has_inline = "inline" in mapping
    path_value = mapping.get("path")
    if has_inline and path_value:
        raise ConfigurationError(f"{label} must not set both inline and path.")
    if has_inline:
        return DocumentSource(text=_inline_text(mapping["inline"], label), source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError(f"{label}.path must be a string.")
        document_path = _resolve_path(base_path, path_value)
        if not document_path.exists():
            raise ConfigurationError(f"Document file not found: {document_path}")
        return DocumentSource(
            text=document_path.read_text(encoding="utf-8"),
            source_path=document_path,
        )
    raise ConfigurationError(f"{label} requires either inline or path.")


def _inline_text(value: Any, label: str) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{label}.inline cannot be encoded as JSON: {exc}") from exc


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
