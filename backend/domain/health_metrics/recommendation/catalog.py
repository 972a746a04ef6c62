"""Static meal catalog keyed by diet preference."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..core.value_objects.diet_preference import DietPreference

MEALS_PER_PREFERENCE = 3


@dataclass(frozen=True)
class DietCatalog:
    """Immutable preference -> meals mapping.

    Configuration data, injected into DietRecommendationService.

    Attributes:
        meals: Exactly MEALS_PER_PREFERENCE meal names per preference
    """

    meals: Mapping[DietPreference, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {}
        for preference, items in self.meals.items():
            items = tuple(items)
            if len(items) != MEALS_PER_PREFERENCE:
                raise ValueError(
                    f"Catalog entry {preference} must have {MEALS_PER_PREFERENCE} "
                    f"meals, got {len(items)}"
                )
            frozen[DietPreference(preference)] = items
        object.__setattr__(self, "meals", MappingProxyType(frozen))

    def meals_for(self, preference: DietPreference) -> tuple[str, ...]:
        """Get the meals for a preference.

        Raises:
            KeyError: If the preference has no catalog entry
        """
        return self.meals[preference]

    def __contains__(self, preference: object) -> bool:
        return preference in self.meals


DEFAULT_DIET_CATALOG = DietCatalog(
    meals={
        DietPreference.NON_VEG: (
            "Grilled Salmon with Asparagus",
            "Chicken Quinoa Bowl",
            "Greek Yogurt & Berries",
        ),
        DietPreference.VEG: (
            "Lentil Curry with Brown Rice",
            "Roasted Chickpea Salad",
            "Cottage Cheese Stir-fry",
        ),
        DietPreference.VEGAN: (
            "Tofu Scramble",
            "Sweet Potato & Black Bean Tacos",
            "Tempeh Buddha Bowl",
        ),
    }
)
