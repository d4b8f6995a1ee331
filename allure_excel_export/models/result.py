"""Models for Allure result files (``*-result.json``)."""

from collections.abc import Sequence
from typing import Literal, Self

from pydantic import Field, model_validator

from allure_excel_export.models.base import Model

ResultStatus = Literal["passed", "failed", "broken", "skipped"]

# Latest instant a datetime can hold: 9999-12-31T00:00:00Z, leaving room for
# local UTC offsets.
MAX_EPOCH_MILLIS = 253_402_214_400_000


class Label(Model):
    """Free-form name/value tag attached to a result."""

    name: str
    value: str


class StatusDetails(Model):
    """Failure detail reported for failed or broken tests."""

    message: str | None = None
    trace: str | None = None


class AllureResult(Model):
    """Outcome of a single executed test case."""

    uuid: str = Field(..., description="Identifier, unique within a run")
    name: str = Field(..., description="Display name of the test")
    status: ResultStatus = Field(..., description="Execution outcome")
    stage: str | None = Field(default=None, description="Lifecycle stage")
    start: int = Field(
        ..., ge=0, le=MAX_EPOCH_MILLIS, description="Start time in epoch milliseconds"
    )
    stop: int = Field(
        ..., ge=0, le=MAX_EPOCH_MILLIS, description="End time in epoch milliseconds"
    )
    full_name: str | None = Field(default=None, description="Qualified name")
    labels: Sequence[Label] = Field(default_factory=tuple)
    status_details: StatusDetails | None = None

    @model_validator(mode="after")
    def _check_interval(self) -> Self:
        if self.stop < self.start:
            raise ValueError(f"stop ({self.stop}) precedes start ({self.start})")
        return self

    @property
    def duration(self) -> float:
        """Elapsed time in seconds."""
        return (self.stop - self.start) / 1000

    @property
    def error_message(self) -> str:
        """Failure message, or an empty string when none was reported."""
        if self.status_details is None or self.status_details.message is None:
            return ""
        return self.status_details.message

    def label_value(self, name: str) -> str:
        """Return the value of the first label called ``name``, or ``""``."""
        for label in self.labels:
            if label.name == name:
                return label.value
        return ""
