"""Field schema coverage workbook writer."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from openapi_json_schema.document_injection.injection_outcomes import FieldCoverage, SchemaOrigin

COVERAGE_SHEET_NAME = "Coverage"
RUN_INFO_SHEET_NAME = "RunInfo"
COVERAGE_COLUMNS: tuple[str, ...] = ("Field", "Schema", "Origin", "Schema file")


def write_coverage_workbook(
    target_cls: type,
    coverage: Sequence[FieldCoverage],
    output_path: Path | str,
    *,
    generated_at: datetime | None = None,
) -> Path:
    """Write one row per marked field plus a RunInfo summary sheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = COVERAGE_SHEET_NAME

    for column_index, name in enumerate(COVERAGE_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 3"
    for row_index, item in enumerate(coverage, start=2):
        values = (
            item.field_name,
            item.schema_name,
            item.origin.value,
            str(item.schema_file) if item.schema_file is not None else None,
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
    _fit_column_widths(sheet, len(COVERAGE_COLUMNS))

    _write_run_info_sheet(workbook, target_cls, coverage, generated_at or datetime.now(UTC))

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _fit_column_widths(sheet: Worksheet, column_count: int) -> None:
    for column_index in range(1, column_count + 1):
        longest = max(
            len(str(cell.value or ""))
            for (cell,) in sheet.iter_rows(min_col=column_index, max_col=column_index)
        )
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(longest + 4, 80)
        )


def _write_run_info_sheet(
    workbook: Workbook,
    target_cls: type,
    coverage: Sequence[FieldCoverage],
    generated_at: datetime,
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries: list[tuple[str, object]] = [
        ("generated_at", generated_at.isoformat()),
        ("class", f"{target_cls.__module__}.{target_cls.__qualname__}"),
        ("marked_fields", len(coverage)),
    ]
    entries.extend(
        (origin.value, sum(1 for item in coverage if item.origin is origin))
        for origin in SchemaOrigin
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
