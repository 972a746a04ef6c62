"""MetricsEngine - derive HealthResult from HealthInput."""

import math
from typing import Optional

from ..core.exceptions.domain_errors import InvalidInputError
from ..core.ports.calculators import IBMICalculator, IBMRCalculator, ITDEECalculator
from ..core.rounding import round_half_up
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.health_input import HealthInput
from ..core.value_objects.health_result import HealthResult
from .bmi_service import BMIService
from .bmr_service import BMRService
from .tdee_service import TDEEService


class MetricsEngine:
    """Compute health metrics for a validated input.

    Pure: no I/O, no hidden state, same input gives the same result.

    Flow:
    1. BMI from height and weight, classified into a category
    2. BMR from weight, height, age and gender
    3. TDEE from BMR and activity factor
    4. Goal adjustment applied to TDEE, rounded to whole kcal

    The calorie target never depends on BMI.
    """

    def __init__(
        self,
        bmi_service: Optional[IBMICalculator] = None,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
    ):
        self._bmi_service = bmi_service or BMIService()
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()

    def compute(self, health_input: HealthInput) -> HealthResult:
        """Compute metrics for one input.

        Args:
            health_input: Validated biometric input

        Returns:
            HealthResult: Fresh result value

        Raises:
            InvalidInputError: If health_input is not a HealthInput, or the
                calculators produce a non-finite BMI or TDEE

        Example:
            >>> engine = MetricsEngine()
            >>> result = engine.compute(HealthInput(
            ...     age=30, gender="male", height_cm=180, weight_kg=80,
            ...     activity_factor=1.55, goal="maintain", diet_preference="veg",
            ... ))
            >>> result.daily_calorie_target
            2759
        """
        if not isinstance(health_input, HealthInput):
            raise InvalidInputError(
                "input", f"expected HealthInput, got {type(health_input).__name__}"
            )

        bmi = self._bmi_service.calculate(
            height_cm=health_input.height_cm,
            weight_kg=health_input.weight_kg,
        )

        bmr = self._bmr_service.calculate(
            weight_kg=health_input.weight_kg,
            height_cm=health_input.height_cm,
            age=health_input.age,
            gender=health_input.gender,
        )

        tdee = self._tdee_service.calculate(
            bmr=bmr,
            activity_factor=health_input.activity_factor,
        )

        calories_target = health_input.goal.calorie_adjustment(tdee.value)

        if not (math.isfinite(bmi) and math.isfinite(calories_target)):
            raise InvalidInputError(
                "input", f"metrics out of computable range (bmi={bmi}, tdee={tdee.value})"
            )

        return HealthResult(
            bmi=bmi,
            bmi_category=BMICategory.from_bmi(bmi),
            daily_calorie_target=round_half_up(calories_target),
            bmr=bmr.value,
            tdee=tdee.value,
        )


_default_engine = MetricsEngine()


def compute_metrics(health_input: HealthInput) -> HealthResult:
    """Compute metrics with the default calculation services.

    Args:
        health_input: Validated biometric input

    Returns:
        HealthResult: Derived metrics
    """
    return _default_engine.compute(health_input)
