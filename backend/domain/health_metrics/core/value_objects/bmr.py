"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the calories needed for basic bodily functions at rest.
    No sign check: the Mifflin-St Jeor equation is linear and the engine
    must stay total over every valid HealthInput.

    Attributes:
        value: BMR in kcal/day
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
