"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import PatternFill
from openpyxl.utils import get_column_letter

from .report_models import CheckResult, CheckStatus, RunMetadata

CHECKS_SHEET_NAME = "Checks"
RUN_INFO_SHEET_NAME = "RunInfo"
CHECK_COLUMNS = ("NAME", "RESOURCE", "ATTRIBUTE", "IDENTIFIER", "STATUS")

_STATUS_FILLS = {
    CheckStatus.EQUIVALENT: PatternFill(fill_type="solid", fgColor="C6EFCE"),
    CheckStatus.DIFFERENT: PatternFill(fill_type="solid", fgColor="FFC7CE"),
}


def write_results_workbook(
    output_path: Path | str,
    results: Sequence[CheckResult],
    run_metadata: RunMetadata,
) -> None:
    """Write the drift-check results workbook with Checks and RunInfo sheets."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = CHECKS_SHEET_NAME
    _write_header(sheet)
    for row, result in enumerate(results, start=2):
        _write_result_row(sheet, row, result)
    sheet.freeze_panes = "A2"

    _write_run_info_sheet(workbook, run_metadata, results)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def _write_header(sheet) -> None:
    for column, label in enumerate(CHECK_COLUMNS, start=1):
        sheet.cell(row=1, column=column, value=label)
        sheet.cell(row=1, column=column).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column)].width = 18 if column > 1 else 40


def _write_result_row(sheet, row: int, result: CheckResult) -> None:
    values = (
        result.name,
        result.resource_type,
        result.attribute,
        result.identifier or "",
        result.status.value,
    )
    for column, value in enumerate(values, start=1):
        sheet.cell(row=row, column=column, value=value)
    sheet.cell(row=row, column=len(values)).fill = _STATUS_FILLS[result.status]


def _write_run_info_sheet(
    workbook,
    run_metadata: RunMetadata,
    results: Sequence[CheckResult],
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    equivalent = sum(1 for result in results if result.status == CheckStatus.EQUIVALENT)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("config_path", str(run_metadata.config_path)),
        ("output_path", str(run_metadata.output_path)),
        ("total", len(results)),
        ("equivalent", equivalent),
        ("different", len(results) - equivalent),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
