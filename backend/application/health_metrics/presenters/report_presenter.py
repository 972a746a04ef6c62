"""ReportPresenter - display-ready values for a HealthAnalysis."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from domain.health_metrics.core.value_objects.bmi_category import BMICategory

from ..orchestrators.health_report_orchestrator import HealthAnalysis


@dataclass(frozen=True)
class CategoryDisplay:
    """Label and badge colour for a BMI category."""

    label: str
    color: str


DEFAULT_CATEGORY_DISPLAY: Mapping[BMICategory, CategoryDisplay] = MappingProxyType(
    {
        BMICategory.UNDERWEIGHT: CategoryDisplay(label="Underweight", color="#60a5fa"),
        BMICategory.NORMAL: CategoryDisplay(label="Healthy", color="#34d399"),
        BMICategory.OVERWEIGHT: CategoryDisplay(label="Overweight", color="#fbbf24"),
        BMICategory.OBESE: CategoryDisplay(label="Obese", color="#f87171"),
    }
)


@dataclass(frozen=True)
class ReportView:
    """Formatted strings and series, no rendering.

    Attributes:
        bmi: BMI with one decimal, e.g. "24.2"
        bmi_label: Category label, e.g. "Healthy"
        bmi_color: Category badge colour
        calories: Calorie target with thousands separator, e.g. "2,759"
        meal_lines: Numbered meals, e.g. "Meal 01: Tofu Scramble"
        guidance: Diet guidance lines
        projection_labels: Period labels for the weight chart
        projection_weights: Projected weights for the weight chart
    """

    bmi: str
    bmi_label: str
    bmi_color: str
    calories: str
    meal_lines: tuple[str, ...]
    guidance: tuple[str, ...]
    projection_labels: tuple[str, ...]
    projection_weights: tuple[float, ...]


class ReportPresenter:
    """Turn a HealthAnalysis into a ReportView."""

    def __init__(
        self,
        category_display: Mapping[BMICategory, CategoryDisplay] = DEFAULT_CATEGORY_DISPLAY,
    ):
        self._category_display = category_display

    def present(self, analysis: HealthAnalysis) -> ReportView:
        result = analysis.result
        display = self._category_display[result.bmi_category]

        return ReportView(
            bmi=result.bmi_display,
            bmi_label=display.label,
            bmi_color=display.color,
            calories=f"{result.daily_calorie_target:,}",
            meal_lines=tuple(
                f"Meal {idx:02d}: {meal}"
                for idx, meal in enumerate(analysis.diet_plan.meals, start=1)
            ),
            guidance=analysis.diet_plan.guidance,
            projection_labels=tuple(analysis.projection.labels()),
            projection_weights=tuple(analysis.projection.weights()),
        )
