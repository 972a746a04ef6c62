"""WeightProjection value object - linear weight forecast."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ProjectionPoint:
    """One projected period.

    Attributes:
        label: Period label ("Period 1", "Period 2", ...)
        weight_kg: Projected weight, rounded to one decimal
    """

    label: str
    weight_kg: float


@dataclass(frozen=True)
class WeightProjection:
    """Ordered sequence of projected weights, first period first."""

    points: tuple[ProjectionPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ProjectionPoint]:
        return iter(self.points)

    def labels(self) -> list[str]:
        """Get period labels in order.

        Returns:
            list[str]: Chart x-axis labels, e.g. ["Period 1", "Period 2"]
        """
        return [p.label for p in self.points]

    def weights(self) -> list[float]:
        """Get projected weights in order.

        Returns:
            list[float]: Weights in kg, one decimal each
        """
        return [p.weight_kg for p in self.points]
