"""Corner-preserving path simplification.

The simplified path keeps the first point, every sharp corner, and then
fills the remaining budget with points sampled at even index intervals.
When corners use up part of the budget, the samples are thinned evenly over
the whole path rather than cut from its end.
Chosen points are returned in their original order so the outline keeps its
traversal direction.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

from alphatrace.core.geometry import Coordinate, round_half_up, turning_angle
from alphatrace.domain import MIN_CONTOUR_POINTS

P = TypeVar("P", bound=Coordinate)

DEFAULT_CORNER_ANGLE = math.pi / 4


def find_corners(
    points: Sequence[Coordinate],
    threshold: float = DEFAULT_CORNER_ANGLE,
) -> list[int]:
    """Find interior indices where the path turns more sharply than threshold.

    The first and last points have only one neighbour and are never corners.

    Args:
        points: Path in traversal order
        threshold: Turning angle in radians

    Returns:
        Corner indices in ascending order
    """
    return [
        i
        for i in range(1, len(points) - 1)
        if turning_angle(points[i - 1], points[i], points[i + 1]) > threshold
    ]


def simplify_path(
    points: Sequence[P],
    target_count: int,
    corner_angle: float = DEFAULT_CORNER_ANGLE,
) -> Sequence[P]:
    """Reduce a path to about target_count points, keeping its corners.

    Corners are always kept, so the result can be longer than target_count
    when the path has many of them.

    Args:
        points: Path in traversal order
        target_count: Desired number of points (clamped to at least 3)
        corner_angle: Turning angle in radians above which a point is a corner

    Returns:
        The input itself when it already has at most target_count points,
        otherwise a new list of points in original order

    Examples:
        >>> line = [Point(float(i), 0.0) for i in range(10)]
        >>> [p.x for p in simplify_path(line, 4)]
        [0.0, 3.0, 6.0, 9.0]
    """
    if len(points) <= target_count:
        return points

    target = max(MIN_CONTOUR_POINTS, min(target_count, len(points)))

    included: set[int] = {0}
    included.update(find_corners(points, corner_angle))

    step = (len(points) - 1) / (target - 1)
    candidates = sorted(
        {round_half_up(i * step) for i in range(1, target)} - included
    )
    budget = target - len(included)
    if budget <= 0:
        candidates = []
    elif len(candidates) > budget:
        spacing = len(candidates) / budget
        candidates = [candidates[round_half_up(j * spacing)] for j in range(budget)]
    included.update(candidates)

    return [points[i] for i in sorted(included)]
