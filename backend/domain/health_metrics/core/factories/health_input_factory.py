"""HealthInputFactory - build HealthInput from raw form values."""

from typing import Any, Mapping

from ..exceptions.domain_errors import InvalidInputError
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.health_input import HealthInput


class HealthInputFactory:
    """Factory for creating HealthInput from untyped form data.

    Form fields arrive as strings; numeric strings are parsed, the
    activity field accepts either a multiplier or a preset name.
    Validation itself stays in HealthInput.
    """

    @staticmethod
    def from_form(data: Mapping[str, Any]) -> HealthInput:
        """Create HealthInput from a form mapping.

        Expected keys: age, gender, height, weight, activity, goal,
        preference.

        Args:
            data: Raw form values

        Returns:
            HealthInput: Validated input

        Raises:
            InvalidInputError: If a field is missing or malformed
            UnknownPreferenceError: If preference is not recognized

        Example:
            >>> HealthInputFactory.from_form({
            ...     "age": "30", "gender": "male", "height": "180",
            ...     "weight": "80", "activity": "1.55", "goal": "maintain",
            ...     "preference": "veg",
            ... }).activity_factor
            1.55
        """
        return HealthInput(
            age=HealthInputFactory._parse_int(_field(data, "age"), "age"),
            gender=_field(data, "gender"),
            height_cm=HealthInputFactory._parse_float(_field(data, "height"), "height_cm"),
            weight_kg=HealthInputFactory._parse_float(_field(data, "weight"), "weight_kg"),
            activity_factor=HealthInputFactory._parse_activity(_field(data, "activity")),
            goal=_field(data, "goal"),
            diet_preference=_field(data, "preference"),
        )

    @staticmethod
    def _parse_int(value: Any, field: str) -> int:
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise InvalidInputError(field, f"must be an integer, got {value!r}") from None
        return value

    @staticmethod
    def _parse_float(value: Any, field: str) -> float:
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                raise InvalidInputError(field, f"must be a number, got {value!r}") from None
        return value

    @staticmethod
    def _parse_activity(value: Any) -> float:
        if isinstance(value, ActivityLevel):
            return value.pal_multiplier()
        if isinstance(value, str):
            preset = value.strip().lower()
            if preset in {level.value for level in ActivityLevel}:
                return ActivityLevel(preset).pal_multiplier()
        return HealthInputFactory._parse_float(value, "activity_factor")


def _field(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise InvalidInputError(key, "is required")
    return data[key]
