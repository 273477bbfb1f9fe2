"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one drift-check run."""

    config_path: str
    output_dir: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path
    equivalent: int
    different: int

    @property
    def has_differences(self) -> bool:
        """Return True when at least one check reported a difference."""
        return self.different > 0
