"""Unit tests for DietRecommendationService and the catalog."""

import pytest

from domain.health_metrics.core.exceptions.domain_errors import (
    InvalidInputError,
    UnknownPreferenceError,
)
from domain.health_metrics.core.value_objects import DietPreference, Goal
from domain.health_metrics.recommendation.catalog import (
    DEFAULT_DIET_CATALOG,
    DietCatalog,
)
from domain.health_metrics.recommendation.diet_service import (
    DietRecommendationService,
    recommend_diet,
)


class TestRecommendDiet:
    """Test diet plan selection."""

    def test_vegan_gain(self):
        """Test vegan catalog is returned unchanged with unsigned annotation."""
        plan = recommend_diet("vegan", "gain")

        assert plan.meals == (
            "Tofu Scramble",
            "Sweet Potato & Black Bean Tacos",
            "Tempeh Buddha Bowl",
        )
        assert plan.weekly_target_change == "0.5 kg/week"
        assert plan.preference is DietPreference.VEGAN
        assert plan.goal is Goal.GAIN

    @pytest.mark.parametrize("goal", list(Goal))
    def test_meals_independent_of_goal(self, goal):
        """Test goal never changes the meals."""
        plan = recommend_diet(DietPreference.VEG, goal)

        assert plan.meals == DEFAULT_DIET_CATALOG.meals_for(DietPreference.VEG)

    def test_annotation_per_goal(self):
        """Test maintain is 0, lose and gain share the same text."""
        assert recommend_diet("veg", "maintain").weekly_target_change == "0 kg/week"
        assert recommend_diet("veg", "lose").weekly_target_change == "0.5 kg/week"
        assert recommend_diet("veg", "gain").weekly_target_change == "0.5 kg/week"

    def test_non_veg_catalog(self):
        """Test non-veg meals."""
        plan = recommend_diet("non-veg", "lose")

        assert plan.meals[0] == "Grilled Salmon with Asparagus"
        assert len(plan.meals) == 3

    def test_guidance_lines(self):
        """Test supporting guidance text."""
        plan = recommend_diet("vegan", "lose")

        assert plan.guidance == (
            "Based on your vegan preference and lose goal",
            "Target change: 0.5 kg/week",
            "Keep hydration above 3L/day.",
        )

    @pytest.mark.parametrize("goal", ["lose", "maintain", "gain"])
    def test_unknown_preference(self, goal):
        """Test unknown preference fails whatever the goal."""
        with pytest.raises(UnknownPreferenceError) as exc_info:
            recommend_diet("invalid-pref", goal)

        assert exc_info.value.preference == "invalid-pref"

    def test_unknown_goal(self):
        """Test unknown goal."""
        with pytest.raises(InvalidInputError):
            recommend_diet("veg", "shred")


class TestDietCatalog:
    """Test catalog configuration."""

    def test_default_catalog_covers_all_preferences(self):
        """Test every preference has three meals."""
        for preference in DietPreference:
            assert len(DEFAULT_DIET_CATALOG.meals_for(preference)) == 3

    def test_catalog_is_read_only(self):
        """Test catalog mapping cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_DIET_CATALOG.meals[DietPreference.VEG] = ("a", "b", "c")  # type: ignore[index]

    def test_wrong_meal_count_rejected(self):
        """Test entries must have three meals."""
        with pytest.raises(ValueError, match="must have 3 meals"):
            DietCatalog(meals={DietPreference.VEG: ("only one",)})

    def test_injected_catalog(self):
        """Test service reads from injected catalog."""
        catalog = DietCatalog(meals={"veg": ["Dal", "Paneer Tikka", "Poha"]})
        service = DietRecommendationService(catalog=catalog)

        plan = service.recommend("veg", "maintain")

        assert plan.meals == ("Dal", "Paneer Tikka", "Poha")

    def test_preference_missing_from_injected_catalog(self):
        """Test a known preference absent from the catalog is unknown."""
        catalog = DietCatalog(meals={DietPreference.VEG: ("Dal", "Paneer Tikka", "Poha")})
        service = DietRecommendationService(catalog=catalog)

        with pytest.raises(UnknownPreferenceError):
            service.recommend("vegan", "maintain")
