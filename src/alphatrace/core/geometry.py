"""Geometric operations for contour simplification and outline building.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Turning angles between consecutive segments
- Outward normal computation
- Bounding boxes over pixel cells

All functions are pure and stateless. They accept anything with `x` and `y`
attributes, so both Pixel and Point sequences work.
"""

import math
from collections.abc import Sequence

from alphatrace.domain import BoundingBox, Pixel, Point

Coordinate = Point | Pixel

_EPSILON = 1e-10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values.

    Python's round() uses banker's rounding, which would make index sampling
    depend on the parity of the integer part.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(3.5)
        4
    """
    return math.floor(value + 0.5)


def signed_area(points: Sequence[Coordinate]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    With image coordinates (y grows downwards) a positive area means the
    polygon winds clockwise on screen.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # clockwise on screen
        1.0
        >>> signed_area([p1, p4, p3, p2])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def normalize_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle


def turning_angle(prev: Coordinate, current: Coordinate, nxt: Coordinate) -> float:
    """Calculate how sharply a path turns at `current`.

    Args:
        prev: Point before the vertex
        current: The vertex
        nxt: Point after the vertex

    Returns:
        Absolute turning angle in [0, pi]; 0 for a straight continuation

    Examples:
        >>> turning_angle(Point(0, 0), Point(1, 0), Point(2, 0))
        0.0
        >>> round(turning_angle(Point(0, 0), Point(1, 0), Point(1, 1)), 4)
        1.5708
    """
    incoming = math.atan2(current.y - prev.y, current.x - prev.x)
    outgoing = math.atan2(nxt.y - current.y, nxt.x - current.x)
    return abs(normalize_angle(outgoing - incoming))


def outward_normal(
    prev: Coordinate,
    current: Coordinate,
    nxt: Coordinate,
    orientation: float,
) -> tuple[float, float]:
    """Calculate the unit normal at a polygon vertex pointing away from its interior.

    The incoming and outgoing edge vectors are averaged and rotated 90
    degrees; `orientation` (the polygon's signed area) decides which of the
    two perpendiculars faces outwards.

    Args:
        prev: Previous vertex (cyclic)
        current: The vertex
        nxt: Next vertex (cyclic)
        orientation: Signed area of the polygon

    Returns:
        Tuple (nx, ny) of unit length, or (0.0, 0.0) when the averaged
        direction vanishes
    """
    avg_dx = ((current.x - prev.x) + (nxt.x - current.x)) / 2
    avg_dy = ((current.y - prev.y) + (nxt.y - current.y)) / 2

    # Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)
    perp_x = -avg_dy
    perp_y = avg_dx

    # Clockwise-on-screen polygons have their interior on that side
    if orientation > 0:
        perp_x, perp_y = -perp_x, -perp_y

    length = math.hypot(perp_x, perp_y)
    if length < _EPSILON:
        return (0.0, 0.0)

    return (perp_x / length, perp_y / length)


def pixel_bounding_box(
    points: Sequence[Coordinate],
    scale_x: float = 1.0,
    scale_y: float = 1.0,
) -> BoundingBox:
    """Calculate the box covering the pixel cells of scaled points.

    A point at (x, y) stands for the cell spanning [x, x + scale_x) by
    [y, y + scale_y), so a run of ten pixels has extent ten.

    Args:
        points: Points already multiplied by the scale
        scale_x: Width of one cell
        scale_y: Height of one cell

    Returns:
        BoundingBox covering every cell

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot calculate bounding box of an empty path")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox(
        min_x=min(xs),
        min_y=min(ys),
        max_x=max(xs) + scale_x,
        max_y=max(ys) + scale_y,
    )
