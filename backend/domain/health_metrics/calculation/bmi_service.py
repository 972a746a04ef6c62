"""BMIService - Body Mass Index calculation."""

from ..core.ports.calculators import IBMICalculator


class BMIService(IBMICalculator):
    """Calculate Body Mass Index.

    Formula:
        BMI = weight(kg) / height(m)²
    """

    def calculate(self, height_cm: float, weight_kg: float) -> float:
        """Calculate BMI from height and weight.

        Args:
            height_cm: Height in centimeters (> 0)
            weight_kg: Weight in kilograms

        Returns:
            float: BMI at full precision

        Example:
            >>> BMIService().calculate(height_cm=200.0, weight_kg=100.0)
            25.0
        """
        height_m = height_cm / 100.0
        return weight_kg / (height_m * height_m)
