"""HealthInput value object - validated biometric input."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Type, TypeVar

from ..exceptions.domain_errors import InvalidInputError, UnknownPreferenceError
from .diet_preference import DietPreference
from .gender import Gender
from .goal import Goal

MAX_AGE = 150

# Inclusive (min, max) per measurement; keeps every derived metric finite.
MEASUREMENT_LIMITS = {
    "height_cm": (1.0, 300.0),
    "weight_kg": (None, 1000.0),
    "activity_factor": (None, 10.0),
}

E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_cls: Type[E], value: object, field: str) -> E:
    """Resolve an enum member from a member or its string value.

    Raises:
        InvalidInputError: If value is not a recognized member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidInputError(field, f"must be one of {allowed}, got {value!r}") from None


def _require_positive(value: object, field: str) -> float:
    """Check a measurement is a finite number strictly above zero.

    Values outside MEASUREMENT_LIMITS are rejected as well.

    Raises:
        InvalidInputError: If value is not a positive finite number in range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, f"must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(field, f"must be finite, got {value}")
    if value <= 0:
        raise InvalidInputError(field, f"must be positive, got {value}")

    low, high = MEASUREMENT_LIMITS[field]
    if low is not None and value < low:
        raise InvalidInputError(field, f"must be at least {low}, got {value}")
    if value > high:
        raise InvalidInputError(field, f"must be at most {high}, got {value}")
    return float(value)


@dataclass(frozen=True)
class HealthInput:
    """Biometric data for one calculation request.

    Immutable value object. String values are accepted for the
    enumerated fields and converted to their enum members.

    Attributes:
        age: Age in years (1-149)
        gender: Biological sex, selects the BMR offset
        height_cm: Height in centimeters (1-300)
        weight_kg: Body weight in kilograms (> 0, at most 1000)
        activity_factor: TDEE multiplier (> 0, at most 10, typically 1.2-1.9)
        goal: Weight objective
        diet_preference: Dietary style for meal suggestions

    Raises:
        InvalidInputError: If any field violates its constraint
        UnknownPreferenceError: If diet_preference is not recognized
    """

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    activity_factor: float
    goal: Goal
    diet_preference: DietPreference

    def __post_init__(self) -> None:
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidInputError("age", f"must be an integer, got {self.age!r}")
        if not (0 < self.age < MAX_AGE):
            raise InvalidInputError("age", f"must be between 1 and {MAX_AGE - 1}, got {self.age}")

        object.__setattr__(self, "height_cm", _require_positive(self.height_cm, "height_cm"))
        object.__setattr__(self, "weight_kg", _require_positive(self.weight_kg, "weight_kg"))
        object.__setattr__(
            self, "activity_factor", _require_positive(self.activity_factor, "activity_factor")
        )

        object.__setattr__(self, "gender", _coerce_enum(Gender, self.gender, "gender"))
        object.__setattr__(self, "goal", _coerce_enum(Goal, self.goal, "goal"))

        if not isinstance(self.diet_preference, DietPreference):
            try:
                preference = DietPreference(self.diet_preference)
            except ValueError:
                raise UnknownPreferenceError(self.diet_preference) from None
            object.__setattr__(self, "diet_preference", preference)
