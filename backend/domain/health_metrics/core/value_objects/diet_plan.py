"""DietPlan value object - meal suggestions for a preference and goal."""

from dataclasses import dataclass

from .diet_preference import DietPreference
from .goal import Goal


@dataclass(frozen=True)
class DietPlan:
    """Meal suggestions plus weekly target annotation.

    The annotation carries magnitude only ("0.5 kg/week"); the direction
    is implied by goal.

    Attributes:
        preference: Dietary preference the meals were chosen for
        goal: Goal the annotation was derived from
        meals: Catalog meals, in catalog order
        weekly_target_change: "0 kg/week" or "0.5 kg/week"
        guidance: Supporting guidance lines
    """

    preference: DietPreference
    goal: Goal
    meals: tuple[str, ...]
    weekly_target_change: str
    guidance: tuple[str, ...] = ()
