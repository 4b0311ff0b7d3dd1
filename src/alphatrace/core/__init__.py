"""Core processing algorithms for alphatrace.

This module contains the core algorithms for:

- Geometry operations (signed area, turning angles, outward normals)
- Boundary pixel detection
- Moore-neighbour contour tracing with complexity and time guards
- Corner-preserving path simplification
- Outline geometry building
- Nearest-neighbour downscaling

All services are designed to be:
- Stateless between calls
- Pure (no I/O, the buffer is never modified)
- Deterministic

Key functions:
- detect_edges: Collect boundary pixels in scan order
- simplify_path: Reduce a path to a target count, keeping corners
- build_outline: Map a simplified path into renderer coordinates
- downscale: Shrink a raster to a maximum dimension
- trace_image: Load and trace an image file in one call

Key classes:
- EdgePixelSet: Ordered boundary pixels with O(1) membership
- ContourTracer: Orders boundary pixels into contours
- OutlineTracer: Runs the whole pipeline
"""

from alphatrace.core.edges import EdgePixelSet, detect_edges, is_edge_pixel
from alphatrace.core.geometry import (
    outward_normal,
    pixel_bounding_box,
    signed_area,
    turning_angle,
)
from alphatrace.core.outline import build_outline
from alphatrace.core.processor import (
    OutlineTracer,
    TraceResult,
    select_main_contour,
    trace_image,
)
from alphatrace.core.resample import downscale, downscaled_size
from alphatrace.core.simplify import find_corners, simplify_path
from alphatrace.core.tracer import ContourTracer, trace_contours

__all__ = [
    # Tracing classes
    "ContourTracer",
    "EdgePixelSet",
    # Pipeline classes
    "OutlineTracer",
    "TraceResult",
    # Pipeline functions
    "build_outline",
    "detect_edges",
    "downscale",
    "downscaled_size",
    "find_corners",
    "is_edge_pixel",
    # Geometry functions
    "outward_normal",
    "pixel_bounding_box",
    "select_main_contour",
    "signed_area",
    "simplify_path",
    "trace_contours",
    "trace_image",
    "turning_angle",
]
