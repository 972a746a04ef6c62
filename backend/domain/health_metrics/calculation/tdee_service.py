"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × activity factor

    Typical factors range from 1.2 (sedentary) to 1.9 (very active),
    see ActivityLevel for the standard presets.
    """

    def calculate(self, bmr: BMR, activity_factor: float) -> TDEE:
        """Calculate TDEE from BMR and activity factor.

        Args:
            bmr: Basal metabolic rate
            activity_factor: Activity multiplier

        Returns:
            TDEE: Total daily energy expenditure in kcal/day

        Example:
            >>> TDEEService().calculate(BMR(value=1780.0), 1.55).value
            2759.0  # 1780 × 1.55
        """
        return TDEE(value=bmr.value * activity_factor)
