"""Gender value object - selects the Mifflin-St Jeor offset."""

from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR equation.

    The Mifflin-St Jeor equation only defines two offsets, so this
    enumeration is deliberately closed to two values.
    """

    MALE = "male"
    FEMALE = "female"

    def bmr_offset(self) -> float:
        """Get the constant added to the Mifflin-St Jeor base value.

        Returns:
            float: +5 for male, -161 for female

        Example:
            >>> Gender.FEMALE.bmr_offset()
            -161.0
        """
        offsets = {
            Gender.MALE: 5.0,
            Gender.FEMALE: -161.0,
        }
        return offsets[self]
