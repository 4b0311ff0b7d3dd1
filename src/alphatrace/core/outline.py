"""Outline geometry: from a simplified pixel path to renderer coordinates.

The simplified path lives in processing-raster pixels. Building the outline
scales it back up to source image pixels, measures its bounding box, pushes
every vertex a fraction of a pixel outwards (a centred stroke would otherwise
bite into the silhouette) and maps the result into destination coordinates
relative to the box origin.
"""

from collections.abc import Sequence

from alphatrace.core.geometry import (
    Coordinate,
    outward_normal,
    pixel_bounding_box,
    signed_area,
)
from alphatrace.domain import OutlineGeometry, Point, TraceFrame
from alphatrace.exceptions import DegenerateContourError

DEFAULT_OFFSET_PIXELS = 0.5


def build_outline(
    path: Sequence[Coordinate],
    frame: TraceFrame,
    offset_pixels: float = DEFAULT_OFFSET_PIXELS,
) -> OutlineGeometry:
    """Transform a simplified path into an OutlineGeometry.

    Args:
        path: Simplified path in processing pixels, traversal order
        frame: Processing, source and destination sizes
        offset_pixels: Outward displacement per vertex, in source pixels

    Returns:
        OutlineGeometry with exactly one vertex per path point

    Raises:
        DegenerateContourError: If path is empty
    """
    if not path:
        raise DegenerateContourError(0)

    source_sx, source_sy = frame.source_scale
    dest_sx, dest_sy = frame.dest_scale

    scaled = [Point(p.x * source_sx, p.y * source_sy) for p in path]
    bounds = pixel_bounding_box(scaled, source_sx, source_sy)

    orientation = signed_area(scaled)
    offset_amount = offset_pixels * min(dest_sx, dest_sy)

    n = len(scaled)
    vertices: list[Point] = []
    for i, p in enumerate(scaled):
        prev = scaled[(i - 1) % n]
        nxt = scaled[(i + 1) % n]
        nx, ny = outward_normal(prev, p, nxt, orientation)
        vertices.append(
            Point(
                x=(p.x - bounds.min_x) * dest_sx + nx * offset_amount,
                y=(p.y - bounds.min_y) * dest_sy + ny * offset_amount,
            )
        )

    return OutlineGeometry(
        vertices=vertices,
        bounds=bounds,
        offset=Point(bounds.min_x * dest_sx, bounds.min_y * dest_sy),
        width=bounds.width * dest_sx,
        height=bounds.height * dest_sy,
    )
