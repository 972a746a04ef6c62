"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × activity factor

    Attributes:
        value: TDEE in kcal/day
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
