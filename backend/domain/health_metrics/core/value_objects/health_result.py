"""HealthResult value object - metrics derived from a HealthInput."""

from dataclasses import dataclass

from ..rounding import round_to_tenth
from .bmi_category import BMICategory


@dataclass(frozen=True)
class HealthResult:
    """Engine output for one HealthInput.

    Attributes:
        bmi: Body Mass Index at full precision
        bmi_category: Category derived from bmi
        daily_calorie_target: Goal-adjusted TDEE, rounded to whole kcal
        bmr: Basal Metabolic Rate (kcal/day)
        tdee: Total Daily Energy Expenditure (kcal/day)
    """

    bmi: float
    bmi_category: BMICategory
    daily_calorie_target: int
    bmr: float
    tdee: float

    @property
    def bmi_display(self) -> str:
        """BMI rounded half up to one decimal place, e.g. "24.3" for 24.25."""
        return f"{round_to_tenth(self.bmi):.1f}"
