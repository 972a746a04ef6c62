"""BMICategory value object - WHO-style BMI classification."""

from enum import Enum


class BMICategory(str, Enum):
    """BMI classification with half-open ranges.

    - UNDERWEIGHT: bmi < 18.5
    - NORMAL: 18.5 <= bmi < 25
    - OVERWEIGHT: 25 <= bmi < 30
    - OBESE: bmi >= 30
    """

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        """Classify a BMI value.

        Args:
            bmi: Body Mass Index at full precision

        Returns:
            BMICategory: Matching category

        Example:
            >>> BMICategory.from_bmi(18.5)
            <BMICategory.NORMAL: 'normal'>
        """
        if bmi < 18.5:
            return cls.UNDERWEIGHT
        elif bmi < 25.0:
            return cls.NORMAL
        elif bmi < 30.0:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE
