"""Drift-check run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from es_diff_suppress.configuration import (
    ConfigurationError,
    DocumentCheck,
    load_configuration,
)
from es_diff_suppress.results_writing import (
    CheckResult,
    CheckStatus,
    RunMetadata,
    write_results_workbook,
)

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_drift_check_run(request: RunRequest) -> RunOutcome:
    """Evaluate every check of a manifest and write the results workbook."""
    try:
        configuration = load_configuration(request.config_path)
    except (ConfigurationError, OSError, UnicodeDecodeError) as exc:
        raise RunExecutionError(str(exc)) from exc

    run_start = datetime.now(UTC)
    _LOGGER.info("Evaluating %d checks from %s", len(configuration.checks), configuration.path)
    results = evaluate_checks(configuration.checks)

    output_path = _resolve_output_path(request.config_path, request.output_dir)
    run_metadata = RunMetadata(
        run_start=run_start,
        config_path=Path(request.config_path).resolve(),
        output_path=output_path.resolve(),
    )
    try:
        write_results_workbook(output_path, results, run_metadata)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write results workbook: {exc}") from exc

    equivalent = sum(1 for result in results if result.status == CheckStatus.EQUIVALENT)
    different = len(results) - equivalent
    _LOGGER.info("Run finished: %d equivalent, %d different", equivalent, different)
    return RunOutcome(
        output_path=output_path.resolve(),
        equivalent=equivalent,
        different=different,
    )


def evaluate_checks(checks: Sequence[DocumentCheck]) -> tuple[CheckResult, ...]:
    """Evaluate each check through its registered suppression predicate."""
    return tuple(_evaluate_check(check) for check in checks)


def _evaluate_check(check: DocumentCheck) -> CheckResult:
    suppressed = check.suppressor.evaluate(check.old.text, check.new.text, check.identifier)
    status = CheckStatus.EQUIVALENT if suppressed else CheckStatus.DIFFERENT
    _LOGGER.debug("Check %s: %s", check.name, status.value)
    return CheckResult(
        name=check.name,
        resource_type=check.suppressor.resource_type,
        attribute=check.suppressor.attribute,
        identifier=check.identifier,
        status=status,
    )


def _resolve_output_path(config_path: str, output_dir: str | None) -> Path:
    config_file = Path(config_path)
    destination = Path(output_dir) if output_dir else config_file.parent
    timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S-%f")
    return destination / f"{config_file.stem}-results-{timestamp}.xlsx"
