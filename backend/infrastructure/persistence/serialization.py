"""
Persistence models for the last health report.

Pydantic models describe the stored JSON record
{"inputs": {...}, "results": {...}, "date": "YYYY-MM-DD"} and convert
to and from domain values. Floats are kept at full precision so a
stored pair reads back field-for-field equal.
"""

from __future__ import annotations

from datetime import date as DateType

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.health_metrics.core.entities.health_report import HealthReport
from domain.health_metrics.core.exceptions.domain_errors import (
    HealthMetricsError,
    MalformedPersistedStateError,
)
from domain.health_metrics.core.value_objects.bmi_category import BMICategory
from domain.health_metrics.core.value_objects.health_input import HealthInput
from domain.health_metrics.core.value_objects.health_result import HealthResult


class StoredHealthInput(BaseModel):
    """Stored form of HealthInput."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    age: int
    gender: str
    height_cm: float
    weight_kg: float
    activity_factor: float
    goal: str
    diet_preference: str

    @classmethod
    def from_domain(cls, health_input: HealthInput) -> StoredHealthInput:
        return cls(
            age=health_input.age,
            gender=health_input.gender.value,
            height_cm=health_input.height_cm,
            weight_kg=health_input.weight_kg,
            activity_factor=health_input.activity_factor,
            goal=health_input.goal.value,
            diet_preference=health_input.diet_preference.value,
        )

    def to_domain(self) -> HealthInput:
        """Rebuild HealthInput; domain validation runs again."""
        return HealthInput(
            age=self.age,
            gender=self.gender,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_factor=self.activity_factor,
            goal=self.goal,
            diet_preference=self.diet_preference,
        )


class StoredHealthResult(BaseModel):
    """Stored form of HealthResult."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bmi: float = Field(..., gt=0)
    bmi_category: BMICategory
    daily_calorie_target: int
    bmr: float
    tdee: float

    @classmethod
    def from_domain(cls, result: HealthResult) -> StoredHealthResult:
        return cls(
            bmi=result.bmi,
            bmi_category=result.bmi_category,
            daily_calorie_target=result.daily_calorie_target,
            bmr=result.bmr,
            tdee=result.tdee,
        )

    def to_domain(self) -> HealthResult:
        """Rebuild HealthResult.

        Raises:
            MalformedPersistedStateError: If the category does not match bmi
        """
        if BMICategory.from_bmi(self.bmi) is not self.bmi_category:
            raise MalformedPersistedStateError(
                f"category {self.bmi_category.value!r} does not match bmi {self.bmi}"
            )
        return HealthResult(
            bmi=self.bmi,
            bmi_category=self.bmi_category,
            daily_calorie_target=self.daily_calorie_target,
            bmr=self.bmr,
            tdee=self.tdee,
        )


class StoredHealthReport(BaseModel):
    """Stored record for the single report slot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    inputs: StoredHealthInput
    results: StoredHealthResult
    date: str

    @field_validator("date")
    @classmethod
    def iso_date(cls, v: str) -> str:
        """Ensure date is an ISO calendar date."""
        DateType.fromisoformat(v)
        return v

    @classmethod
    def from_domain(cls, report: HealthReport) -> StoredHealthReport:
        return cls(
            inputs=StoredHealthInput.from_domain(report.inputs),
            results=StoredHealthResult.from_domain(report.results),
            date=report.date,
        )

    def to_domain(self) -> HealthReport:
        return HealthReport(
            inputs=self.inputs.to_domain(),
            results=self.results.to_domain(),
            date=self.date,
        )


def serialize_report(report: HealthReport) -> str:
    """
    Serialize a report to its JSON record.

    Args:
        report: Report to store

    Returns:
        JSON string
    """
    return StoredHealthReport.from_domain(report).model_dump_json()


def deserialize_report(payload: str | bytes) -> HealthReport:
    """
    Parse a JSON record back into a report.

    Args:
        payload: JSON string produced by serialize_report

    Returns:
        HealthReport equal to the one serialized

    Raises:
        MalformedPersistedStateError: If payload is not a valid record
    """
    try:
        stored = StoredHealthReport.model_validate_json(payload)
    except ValidationError as e:
        raise MalformedPersistedStateError(f"{e.error_count()} validation error(s)") from e

    try:
        return stored.to_domain()
    except MalformedPersistedStateError:
        raise
    except HealthMetricsError as e:
        raise MalformedPersistedStateError(str(e)) from e
