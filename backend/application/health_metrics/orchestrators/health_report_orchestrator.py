"""HealthReportOrchestrator - coordinates engine, projection and diet."""

import logging
from dataclasses import dataclass

from domain.health_metrics.calculation.metrics_engine import MetricsEngine
from domain.health_metrics.core.entities.health_report import HealthReport
from domain.health_metrics.core.value_objects.diet_plan import DietPlan
from domain.health_metrics.core.value_objects.health_input import HealthInput
from domain.health_metrics.core.value_objects.health_result import HealthResult
from domain.health_metrics.core.value_objects.weight_projection import (
    WeightProjection,
)
from domain.health_metrics.projection.projection_service import (
    DEFAULT_PERIODS,
    WeightProjectionService,
)
from domain.health_metrics.recommendation.diet_service import (
    DietRecommendationService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthAnalysis:
    """Combined output handed to the presentation layer."""

    inputs: HealthInput
    result: HealthResult
    projection: WeightProjection
    diet_plan: DietPlan


class HealthReportOrchestrator:
    """
    Orchestrates the health metrics services for one submission.

    Flow:
    1. Compute BMI, BMR, TDEE and calorie target via the engine
    2. Project weight trend from starting weight and goal
    3. Recommend meals from diet preference and goal
    """

    def __init__(
        self,
        engine: MetricsEngine,
        projection_service: WeightProjectionService,
        diet_service: DietRecommendationService,
        projection_periods: int = DEFAULT_PERIODS,
    ):
        self._engine = engine
        self._projection_service = projection_service
        self._diet_service = diet_service
        self._projection_periods = projection_periods

    def analyze(self, health_input: HealthInput) -> HealthAnalysis:
        """
        Run the full analysis for a validated input.

        Args:
            health_input: Biometric input

        Returns:
            HealthAnalysis with result, projection and diet plan

        Raises:
            InvalidInputError: If the input violates a domain constraint
            UnknownPreferenceError: If the diet preference is not in the catalog
        """
        result = self._engine.compute(health_input)

        logger.info(
            "Health metrics computed",
            extra={
                "bmi": result.bmi_display,
                "bmi_category": result.bmi_category.value,
                "calorie_target": result.daily_calorie_target,
                "goal": health_input.goal.value,
            },
        )

        return self._assemble(health_input, result)

    def rebuild(self, report: HealthReport) -> HealthAnalysis:
        """
        Rebuild an analysis from a stored report.

        The stored result is used as-is; projection and diet plan are
        derived again from the stored inputs.

        Args:
            report: Previously persisted report

        Returns:
            HealthAnalysis for the stored pair
        """
        return self._assemble(report.inputs, report.results)

    def _assemble(self, health_input: HealthInput, result: HealthResult) -> HealthAnalysis:
        projection = self._projection_service.project(
            starting_weight_kg=health_input.weight_kg,
            goal=health_input.goal,
            periods=self._projection_periods,
        )
        diet_plan = self._diet_service.recommend(
            preference=health_input.diet_preference,
            goal=health_input.goal,
        )

        return HealthAnalysis(
            inputs=health_input,
            result=result,
            projection=projection,
            diet_plan=diet_plan,
        )
