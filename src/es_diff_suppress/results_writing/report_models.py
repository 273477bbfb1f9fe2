"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class CheckStatus(str, Enum):
    """Rendered status in output workbook status column."""

    EQUIVALENT = "EQUIVALENT"
    DIFFERENT = "DIFFERENT"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one drift check."""

    name: str
    resource_type: str
    attribute: str
    identifier: str | None
    status: CheckStatus


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    config_path: Path
    output_path: Path
