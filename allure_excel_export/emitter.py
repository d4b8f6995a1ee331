"""Write report rows and summary to an Excel workbook."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from allure_excel_export.models.report import ReportRow, ReportSummary

log = logging.getLogger(__name__)

RESULTS_SHEET = "Test Results"
SUMMARY_SHEET = "Summary"

RESULTS_COLUMNS: Sequence[tuple[str, int]] = (
    ("Test Name", 50),
    ("Status", 12),
    ("Duration (s)", 14),
    ("Suite", 30),
    ("Feature", 25),
    ("Start Time", 22),
    ("End Time", 22),
    ("Error Message", 60),
)
SUMMARY_COLUMNS: Sequence[tuple[str, int]] = (
    ("Metric", 25),
    ("Value", 20),
)


def write_report(
    rows: Sequence[ReportRow], summary: ReportSummary, output_file: Path
) -> Path:
    """Save a two-sheet workbook with per-test rows and the run summary.

    An existing file at ``output_file`` is overwritten.

    Args:
        rows: Detail rows, already in display order
        summary: Totals for the summary sheet
        output_file: Destination ``.xlsx`` path

    Returns:
        The path the workbook was saved to.

    Raises:
        OSError: If the file cannot be written

    """
    workbook = Workbook()

    results_sheet = workbook.active
    results_sheet.title = RESULTS_SHEET
    _write_table(results_sheet, RESULTS_COLUMNS, (row.values() for row in rows))

    summary_sheet = workbook.create_sheet(SUMMARY_SHEET)
    _write_table(summary_sheet, SUMMARY_COLUMNS, summary.metrics())

    log.info("Writing %d row(s) to %s", len(rows), output_file)
    workbook.save(output_file)
    return output_file


def _write_table(
    sheet: Worksheet,
    columns: Sequence[tuple[str, int]],
    records: Iterable[Sequence[str | int | float]],
) -> None:
    """Append a header row followed by records and set column widths."""
    sheet.append([header for header, _ in columns])
    for record in records:
        sheet.append([_clean(value) for value in record])

    for index, (_, width) in enumerate(columns, start=1):
        sheet.column_dimensions[get_column_letter(index)].width = width


def _clean(value: str | int | float) -> str | int | float:
    """Strip control characters, such as ANSI colour codes, that xlsx rejects."""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value
