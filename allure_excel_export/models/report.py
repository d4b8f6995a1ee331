"""Models for the rows and summary written to the spreadsheet report."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

TIMESTAMP_FORMAT = "%c"


@dataclass(frozen=True, kw_only=True)
class ReportRow:
    """Display row for one test result on the details sheet."""

    test_name: str
    status: str
    duration: float
    suite: str
    feature: str
    start_time: str
    end_time: str
    error_message: str

    def values(self) -> tuple[str | float, ...]:
        """Cell values in column order."""
        return (
            self.test_name,
            self.status,
            self.duration,
            self.suite,
            self.feature,
            self.start_time,
            self.end_time,
            self.error_message,
        )


@dataclass(frozen=True, kw_only=True)
class ReportSummary:
    """Aggregate metrics over every result of a run.

    ``failed`` includes broken tests.
    """

    total: int
    passed: int
    failed: int
    skipped: int
    pass_rate: float
    total_duration: float
    generated_at: datetime

    def metrics(self) -> Sequence[tuple[str, str | int]]:
        """Metric/value pairs in the order they appear on the summary sheet."""
        return [
            ("Total Tests", self.total),
            ("Passed", self.passed),
            ("Failed", self.failed),
            ("Skipped", self.skipped),
            ("Pass Rate", f"{self.pass_rate:.1f}%"),
            ("Total Duration (s)", f"{self.total_duration:.2f}"),
            ("Report Generated", self.generated_at.strftime(TIMESTAMP_FORMAT)),
        ]
