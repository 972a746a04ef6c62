"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.gender import Gender


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, weight_kg: float, height_cm: float, age: int, gender: Gender) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            weight_kg: Weight in kilograms
            height_cm: Height in centimeters
            age: Age in years
            gender: Biological sex

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Example:
            >>> BMRService().calculate(80.0, 180.0, 30, Gender.MALE).value
            1780.0
        """
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        return BMR(value=base + gender.bmr_offset())
