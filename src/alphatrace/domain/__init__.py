"""Domain models for alphatrace.

This module contains the core domain models representing rasters, traced
contours and the final outline. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of Pillow and any renderer

Key classes:
- Pixel: An integer pixel coordinate
- PixelBuffer: A read-only RGBA raster
- Point: A 2D point in continuous coordinates
- Contour: An ordered walk of boundary pixels
- TraceFrame: Processing, source and destination sizes
- BoundingBox: Axis-aligned box
- OutlineGeometry: Final outline handed to a renderer
"""

from alphatrace.domain.contour import MIN_CONTOUR_POINTS, Contour, Point
from alphatrace.domain.outline import BoundingBox, OutlineGeometry, TraceFrame
from alphatrace.domain.raster import Pixel, PixelBuffer

__all__: list[str] = [
    "MIN_CONTOUR_POINTS",
    # Raster types
    "Pixel",
    "PixelBuffer",
    # Contour types
    "Point",
    "Contour",
    # Outline types
    "TraceFrame",
    "BoundingBox",
    "OutlineGeometry",
]
