"""DietRecommendationService - meal suggestions per preference and goal."""

from typing import Union

from ..core.exceptions.domain_errors import InvalidInputError, UnknownPreferenceError
from ..core.value_objects.diet_plan import DietPlan
from ..core.value_objects.diet_preference import DietPreference
from ..core.value_objects.goal import Goal
from .catalog import DEFAULT_DIET_CATALOG, DietCatalog

HYDRATION_TIP = "Keep hydration above 3L/day."


class DietRecommendationService:
    """Select meals from a static catalog and annotate the weekly target.

    Meals depend on preference only; goal drives the annotation:
    - MAINTAIN: "0 kg/week"
    - LOSE / GAIN: "0.5 kg/week" (magnitude only, direction implied by goal)
    """

    def __init__(self, catalog: DietCatalog = DEFAULT_DIET_CATALOG):
        self._catalog = catalog

    def recommend(
        self,
        preference: Union[DietPreference, str],
        goal: Union[Goal, str],
    ) -> DietPlan:
        """Build a diet plan.

        Args:
            preference: Dietary preference (member or its string value)
            goal: Weight objective (member or its string value)

        Returns:
            DietPlan: Catalog meals plus annotation and guidance

        Raises:
            UnknownPreferenceError: If preference is not in the catalog
            InvalidInputError: If goal is not recognized

        Example:
            >>> plan = DietRecommendationService().recommend("vegan", "gain")
            >>> plan.weekly_target_change
            '0.5 kg/week'
        """
        try:
            preference = DietPreference(preference)
        except ValueError:
            raise UnknownPreferenceError(preference) from None
        if preference not in self._catalog:
            raise UnknownPreferenceError(preference.value)

        try:
            goal = Goal(goal)
        except ValueError:
            raise InvalidInputError("goal", f"unknown goal {goal!r}") from None

        annotation = self.weekly_target_change(goal)

        return DietPlan(
            preference=preference,
            goal=goal,
            meals=self._catalog.meals_for(preference),
            weekly_target_change=annotation,
            guidance=(
                f"Based on your {preference.value} preference and {goal.value} goal",
                f"Target change: {annotation}",
                HYDRATION_TIP,
            ),
        )

    @staticmethod
    def weekly_target_change(goal: Goal) -> str:
        """Annotation text for a goal, without sign."""
        if goal is Goal.MAINTAIN:
            return "0 kg/week"
        return f"{abs(goal.weekly_weight_change())} kg/week"


_default_service = DietRecommendationService()


def recommend_diet(
    preference: Union[DietPreference, str],
    goal: Union[Goal, str],
) -> DietPlan:
    """Recommend a diet plan from the default catalog."""
    return _default_service.recommend(preference, goal)
