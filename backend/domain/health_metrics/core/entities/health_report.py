"""HealthReport - the persisted input/result pair of the last session."""

from dataclasses import dataclass

from ..value_objects.health_input import HealthInput
from ..value_objects.health_result import HealthResult


@dataclass(frozen=True)
class HealthReport:
    """Last computed report.

    Exactly one input/result pair; storing a new report replaces the
    previous one.

    Attributes:
        inputs: Input the result was computed from
        results: Engine output, stored as-is and never recomputed
        date: ISO date (YYYY-MM-DD) of the computation
    """

    inputs: HealthInput
    results: HealthResult
    date: str

    def __str__(self) -> str:
        return (
            f"Report {self.date} - BMI {self.results.bmi_display} "
            f"({self.results.bmi_category.value}) - "
            f"Target: {self.results.daily_calorie_target} kcal"
        )
