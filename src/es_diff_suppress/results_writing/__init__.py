"""Results writing domain exports."""

from .report_models import CheckResult, CheckStatus, RunMetadata
from .run_report_writer import (
    CHECK_COLUMNS,
    CHECKS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_results_workbook,
)

__all__ = [
    "CHECK_COLUMNS",
    "CHECKS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "CheckResult",
    "CheckStatus",
    "RunMetadata",
    "write_results_workbook",
]
