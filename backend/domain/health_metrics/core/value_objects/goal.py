"""Goal value object - user's weight objective."""

from enum import Enum


class Goal(str, Enum):
    """User's goal determining calorie adjustment and projected trend.

    - LOSE: calorie deficit of 500 kcal/day, -0.5 kg per period
    - MAINTAIN: eat at TDEE, no projected change
    - GAIN: calorie surplus of 500 kcal/day, +0.5 kg per period
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    def calorie_adjustment(self, tdee: float) -> float:
        """Apply calorie adjustment to TDEE based on goal.

        Args:
            tdee: Total Daily Energy Expenditure (kcal/day)

        Returns:
            float: Adjusted calories target

        Example:
            >>> Goal.LOSE.calorie_adjustment(2759.0)
            2259.0
        """
        adjustments = {
            Goal.LOSE: -500,
            Goal.MAINTAIN: 0,
            Goal.GAIN: +500,
        }
        return tdee + adjustments[self]

    def weekly_weight_change(self) -> float:
        """Get the signed weight change per projection period in kg.

        Returns:
            float: -0.5, 0.0 or +0.5
        """
        changes = {
            Goal.LOSE: -0.5,
            Goal.MAINTAIN: 0.0,
            Goal.GAIN: 0.5,
        }
        return changes[self]
