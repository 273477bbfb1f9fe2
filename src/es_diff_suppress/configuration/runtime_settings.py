"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from es_diff_suppress.resource_catalog import AttributeSuppressor


@dataclass(frozen=True)
class DocumentSource:
    """Normalized document text and where it was read from."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class DocumentCheck:
    """One stored vs configured document pair to compare."""

    name: str
    suppressor: AttributeSuppressor
    identifier: str | None
    old: DocumentSource
    new: DocumentSource


@dataclass(frozen=True)
class Configuration:
    """Top-level drift-check manifest aggregate."""

    path: Path
    checks: tuple[DocumentCheck, ...]
