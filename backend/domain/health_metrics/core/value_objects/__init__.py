"""Value objects for health metrics domain."""

from .activity_level import ActivityLevel
from .bmi_category import BMICategory
from .bmr import BMR
from .diet_plan import DietPlan
from .diet_preference import DietPreference
from .gender import Gender
from .goal import Goal
from .health_input import HealthInput
from .health_result import HealthResult
from .tdee import TDEE
from .weight_projection import ProjectionPoint, WeightProjection

__all__ = [
    "ActivityLevel",
    "BMICategory",
    "BMR",
    "DietPlan",
    "DietPreference",
    "Gender",
    "Goal",
    "HealthInput",
    "HealthResult",
    "ProjectionPoint",
    "TDEE",
    "WeightProjection",
]
