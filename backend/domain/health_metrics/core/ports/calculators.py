"""Calculator ports - interfaces for BMI/BMR/TDEE calculations."""

from abc import ABC, abstractmethod

from ..value_objects.bmr import BMR
from ..value_objects.gender import Gender
from ..value_objects.tdee import TDEE


class IBMICalculator(ABC):
    """Port for Body Mass Index calculation."""

    @abstractmethod
    def calculate(self, height_cm: float, weight_kg: float) -> float:
        """Calculate BMI.

        Args:
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms

        Returns:
            float: BMI at full precision
        """
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, weight_kg: float, height_cm: float, age: int, gender: Gender) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            weight_kg: Weight in kilograms
            height_cm: Height in centimeters
            age: Age in years
            gender: Biological sex

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity_factor: float) -> TDEE:
        """Calculate TDEE from BMR and activity factor.

        Args:
            bmr: Basal metabolic rate
            activity_factor: Activity multiplier

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass
