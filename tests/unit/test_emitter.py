"""Tests for the Excel report writer."""

from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import load_workbook

from allure_excel_export.emitter import write_report
from allure_excel_export.models.report import ReportRow, ReportSummary

GENERATED_AT = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def rows() -> list[ReportRow]:
    """Two display rows."""
    return [
        ReportRow(
            test_name="valid login test",
            status="PASSED",
            duration=2.0,
            suite="login",
            feature="auth",
            start_time="start-1",
            end_time="end-1",
            error_message="",
        ),
        ReportRow(
            test_name="invalid login test",
            status="FAILED",
            duration=0.45,
            suite="login",
            feature="",
            start_time="start-2",
            end_time="end-2",
            error_message="Expected flash message",
        ),
    ]


@pytest.fixture
def summary() -> ReportSummary:
    """Summary matching the rows fixture."""
    return ReportSummary(
        total=2,
        passed=1,
        failed=1,
        skipped=0,
        pass_rate=50.0,
        total_duration=2.45,
        generated_at=GENERATED_AT,
    )


def test_writes_results_sheet(
    tmp_path: Path, rows: list[ReportRow], summary: ReportSummary
) -> None:
    """Details sheet has the fixed header and one row per result."""
    output = write_report(rows, summary, tmp_path / "report.xlsx")

    workbook = load_workbook(output)
    assert workbook.sheetnames == ["Test Results", "Summary"]

    values = list(workbook["Test Results"].iter_rows(values_only=True))
    assert values[0] == (
        "Test Name",
        "Status",
        "Duration (s)",
        "Suite",
        "Feature",
        "Start Time",
        "End Time",
        "Error Message",
    )
    assert values[1][:3] == ("valid login test", "PASSED", 2)
    assert values[2][:4] == ("invalid login test", "FAILED", 0.45, "login")
    assert values[2][4] in (None, "")
    assert values[2][5:] == ("start-2", "end-2", "Expected flash message")
    assert len(values) == 3


def test_writes_summary_sheet(
    tmp_path: Path, rows: list[ReportRow], summary: ReportSummary
) -> None:
    """Summary sheet lists metrics in fixed order."""
    output = write_report(rows, summary, tmp_path / "report.xlsx")

    values = list(load_workbook(output)["Summary"].iter_rows(values_only=True))
    assert values == [
        ("Metric", "Value"),
        ("Total Tests", 2),
        ("Passed", 1),
        ("Failed", 1),
        ("Skipped", 0),
        ("Pass Rate", "50.0%"),
        ("Total Duration (s)", "2.45"),
        ("Report Generated", GENERATED_AT.strftime("%c")),
    ]


def test_sets_column_widths(
    tmp_path: Path, rows: list[ReportRow], summary: ReportSummary
) -> None:
    """Applies the column width layout to both sheets."""
    output = write_report(rows, summary, tmp_path / "report.xlsx")

    workbook = load_workbook(output)
    results_sheet = workbook["Test Results"]
    assert results_sheet.column_dimensions["A"].width == 50
    assert results_sheet.column_dimensions["H"].width == 60
    assert workbook["Summary"].column_dimensions["A"].width == 25


def test_empty_report(tmp_path: Path, summary: ReportSummary) -> None:
    """Writes headers only when there are no rows."""
    output = write_report([], summary, tmp_path / "report.xlsx")

    values = list(load_workbook(output)["Test Results"].iter_rows(values_only=True))
    assert len(values) == 1
    assert values[0][0] == "Test Name"


def test_overwrites_existing_file(
    tmp_path: Path, rows: list[ReportRow], summary: ReportSummary
) -> None:
    """Replaces a previous report at the same path."""
    output = tmp_path / "report.xlsx"
    write_report(rows, summary, output)
    write_report(rows[:1], summary, output)

    values = list(load_workbook(output)["Test Results"].iter_rows(values_only=True))
    assert len(values) == 2


def test_raises_for_unwritable_path(
    tmp_path: Path, rows: list[ReportRow], summary: ReportSummary
) -> None:
    """Write failures propagate."""
    with pytest.raises(FileNotFoundError):
        write_report(rows, summary, tmp_path / "missing" / "report.xlsx")


def test_strips_control_characters(tmp_path: Path, summary: ReportSummary) -> None:
    """ANSI colour codes in failure messages do not abort the export."""
    row = ReportRow(
        test_name="valid login test",
        status="FAILED",
        duration=1.0,
        suite="login\x00",
        feature="",
        start_time="start",
        end_time="end",
        error_message="\x1b[31mError: expect(locator).toContainText\x1b[39m",
    )

    output = write_report([row], summary, tmp_path / "report.xlsx")

    values = list(load_workbook(output)["Test Results"].iter_rows(values_only=True))
    assert values[1][3] == "login"
    assert values[1][7] == "[31mError: expect(locator).toContainText[39m"
