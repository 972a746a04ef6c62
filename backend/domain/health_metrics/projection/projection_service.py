"""WeightProjectionService - linear weight trend per goal."""

import math
from typing import Union

from ..core.exceptions.domain_errors import InvalidInputError
from ..core.rounding import round_to_tenth
from ..core.value_objects.goal import Goal
from ..core.value_objects.weight_projection import ProjectionPoint, WeightProjection

DEFAULT_PERIODS = 4


class WeightProjectionService:
    """Project weight over a fixed number of periods.

    Linear, non-adaptive model: every period adds the goal's fixed
    delta (-0.5 kg lose, 0 maintain, +0.5 kg gain). The starting weight
    itself is not emitted; "Period 1" already includes one delta.
    """

    def __init__(self, label_prefix: str = "Period"):
        self._label_prefix = label_prefix

    def project(
        self,
        starting_weight_kg: float,
        goal: Union[Goal, str],
        periods: int = DEFAULT_PERIODS,
    ) -> WeightProjection:
        """Project weight for each period.

        Args:
            starting_weight_kg: Current weight in kg (> 0)
            goal: Weight objective (member or its string value)
            periods: Number of periods to emit (>= 1)

        Returns:
            WeightProjection: Points rounded to one decimal

        Raises:
            InvalidInputError: If weight, goal or periods is invalid

        Example:
            >>> service = WeightProjectionService()
            >>> service.project(80.0, Goal.LOSE).weights()
            [79.5, 79.0, 78.5, 78.0]
        """
        if isinstance(starting_weight_kg, bool) or not isinstance(
            starting_weight_kg, (int, float)
        ):
            raise InvalidInputError(
                "starting_weight_kg", f"must be a number, got {starting_weight_kg!r}"
            )
        if not math.isfinite(starting_weight_kg) or starting_weight_kg <= 0:
            raise InvalidInputError(
                "starting_weight_kg", f"must be positive, got {starting_weight_kg}"
            )
        if isinstance(periods, bool) or not isinstance(periods, int) or periods < 1:
            raise InvalidInputError("periods", f"must be a positive integer, got {periods!r}")

        try:
            goal = Goal(goal)
        except ValueError:
            raise InvalidInputError("goal", f"unknown goal {goal!r}") from None

        delta = goal.weekly_weight_change()
        current = float(starting_weight_kg)
        points = []
        for period in range(1, periods + 1):
            current += delta
            points.append(
                ProjectionPoint(
                    label=f"{self._label_prefix} {period}",
                    weight_kg=round_to_tenth(current),
                )
            )

        return WeightProjection(points=tuple(points))


_default_service = WeightProjectionService()


def project_weight(
    starting_weight_kg: float,
    goal: Union[Goal, str],
    periods: int = DEFAULT_PERIODS,
) -> WeightProjection:
    """Project weight with the default "Period N" labels."""
    return _default_service.project(starting_weight_kg, goal, periods)
