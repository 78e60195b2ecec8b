"""Coverage reporting exports."""

from .coverage_report_writer import (
    COVERAGE_COLUMNS,
    COVERAGE_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_coverage_workbook,
)

__all__ = [
    "COVERAGE_COLUMNS",
    "COVERAGE_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "write_coverage_workbook",
]
