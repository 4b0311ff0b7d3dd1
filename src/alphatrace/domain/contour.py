"""Geometric types for traced contours.

This module defines the fundamental geometric types used throughout alphatrace:
- Point: A 2D point in continuous coordinates
- Contour: An ordered walk of boundary pixels
"""

from dataclasses import dataclass
from typing import Any

from alphatrace.domain.raster import Pixel

MIN_CONTOUR_POINTS = 3


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate (grows downwards, like image rows)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass
class Contour:
    """An ordered walk of boundary pixels.

    The seed pixel is recorded once. Pixels the walk crosses a second time are
    not recorded again, so a concave contour may jump between points that are
    not neighbours.

    Attributes:
        points: Pixels in traversal order
        closed: True when the walk returned to its seed, False when a dead
            end or cycle guard ended it
    """

    points: list[Pixel]
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def is_degenerate(self) -> bool:
        """Check whether the contour is too short to describe an area."""
        return len(self.points) < MIN_CONTOUR_POINTS
