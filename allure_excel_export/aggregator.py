"""Turn parsed results into report rows and a run summary."""

from collections.abc import Sequence
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from allure_excel_export.models.report import (
    TIMESTAMP_FORMAT,
    ReportRow,
    ReportSummary,
)
from allure_excel_export.models.result import AllureResult

FAILED_STATUSES = frozenset({"failed", "broken"})


def round_half_up(value: Decimal, places: int) -> float:
    """Round a decimal with halves away from zero, as JavaScript toFixed does."""
    return float(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def millis_to_seconds(millis: int) -> float:
    """Convert a millisecond span to seconds rounded to two places."""
    return round_half_up(Decimal(millis) / 1000, 2)


def sort_results(results: Sequence[AllureResult]) -> Sequence[AllureResult]:
    """Order results by start time, keeping input order for ties."""
    return sorted(results, key=lambda result: result.start)


def format_timestamp(value: int | datetime) -> str:
    """Render epoch milliseconds or a datetime in the locale's format."""
    if not isinstance(value, datetime):
        value = datetime.fromtimestamp(value / 1000)
    return value.strftime(TIMESTAMP_FORMAT)


def build_row(result: AllureResult) -> ReportRow:
    """Derive the display row for a single result."""
    return ReportRow(
        test_name=result.name,
        status=result.status.upper(),
        duration=millis_to_seconds(result.stop - result.start),
        suite=result.label_value("suite"),
        feature=result.label_value("feature"),
        start_time=format_timestamp(result.start),
        end_time=format_timestamp(result.stop),
        error_message=result.error_message,
    )


def build_rows(results: Sequence[AllureResult]) -> Sequence[ReportRow]:
    """Build one row per result, ordered by start time."""
    return [build_row(result) for result in sort_results(results)]


def build_summary(
    results: Sequence[AllureResult], generated_at: datetime | None = None
) -> ReportSummary:
    """Compute run totals over all results.

    Broken tests count as failures. The pass rate of an empty run is 0.

    """
    total = len(results)
    passed = sum(1 for r in results if r.status == "passed")
    failed = sum(1 for r in results if r.status in FAILED_STATUSES)
    skipped = sum(1 for r in results if r.status == "skipped")
    pass_rate = round_half_up(Decimal(passed * 100) / total, 1) if total else 0.0
    total_duration = sum(r.stop - r.start for r in results)

    return ReportSummary(
        total=total,
        passed=passed,
        failed=failed,
        skipped=skipped,
        pass_rate=pass_rate,
        total_duration=millis_to_seconds(total_duration),
        generated_at=datetime.now() if generated_at is None else generated_at,
    )
