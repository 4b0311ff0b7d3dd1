"""Outline types handed to whatever renders the traced shape.

Key classes:
- TraceFrame: Scale relationships between processing, source and destination
- BoundingBox: Axis-aligned box in source pixel space
- OutlineGeometry: Final vertex list plus placement data
"""

from dataclasses import dataclass
from typing import Any

from alphatrace.domain.contour import Point
from alphatrace.domain.raster import PixelBuffer
from alphatrace.exceptions import InvalidInputError


@dataclass(frozen=True)
class TraceFrame:
    """Sizes of the three coordinate spaces a trace moves through.

    - processing: the (possibly downscaled) raster the tracer runs on
    - source: the original image pixels
    - destination: the displayed shape the outline is placed over

    Attributes:
        processing_width: Width of the traced raster
        processing_height: Height of the traced raster
        source_width: Width of the original image
        source_height: Height of the original image
        dest_width: Width of the destination shape
        dest_height: Height of the destination shape
    """

    processing_width: int
    processing_height: int
    source_width: int
    source_height: int
    dest_width: float
    dest_height: float

    def __post_init__(self) -> None:
        sizes = {
            "processing": (self.processing_width, self.processing_height),
            "source": (self.source_width, self.source_height),
            "destination": (self.dest_width, self.dest_height),
        }
        for name, (w, h) in sizes.items():
            if w <= 0 or h <= 0:
                raise InvalidInputError(f"{name} size must be positive, got {w}x{h}")

    @classmethod
    def for_buffer(
        cls,
        buffer: PixelBuffer,
        source_size: tuple[int, int] | None = None,
        dest_size: tuple[float, float] | None = None,
    ) -> "TraceFrame":
        """Build a frame around a processing buffer.

        Args:
            buffer: The raster that will be traced
            source_size: Original (width, height) before downscaling; defaults
                to the buffer size
            dest_size: Destination (width, height); defaults to source size

        Returns:
            TraceFrame instance
        """
        source_width, source_height = source_size or (buffer.width, buffer.height)
        dest_width, dest_height = dest_size or (source_width, source_height)
        return cls(
            processing_width=buffer.width,
            processing_height=buffer.height,
            source_width=source_width,
            source_height=source_height,
            dest_width=float(dest_width),
            dest_height=float(dest_height),
        )

    @property
    def source_scale(self) -> tuple[float, float]:
        """Ratio of source pixels to processing pixels."""
        return (
            self.source_width / self.processing_width,
            self.source_height / self.processing_height,
        )

    @property
    def dest_scale(self) -> tuple[float, float]:
        """Ratio of destination units to source pixels."""
        return (
            self.dest_width / self.source_width,
            self.dest_height / self.source_height,
        )


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Top edge
        max_x: Right edge
        max_y: Bottom edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_dict(self) -> dict[str, float]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }


@dataclass(frozen=True)
class OutlineGeometry:
    """A closed outline ready for an external renderer.

    Vertices are in destination coordinates relative to the placement offset,
    so the renderer creates a shape at `offset` of size `width` x `height`
    and draws `vertices` inside it.

    Attributes:
        vertices: Closed polygon in traversal order (last connects to first)
        bounds: Bounding box in source image pixel space
        offset: Bounding box origin in destination coordinates
        width: Traced shape width in destination coordinates
        height: Traced shape height in destination coordinates
    """

    vertices: list[Point]
    bounds: BoundingBox
    offset: Point
    width: float
    height: float

    def __len__(self) -> int:
        return len(self.vertices)

    def absolute_vertices(self) -> list[Point]:
        """Vertices translated by the placement offset."""
        return [Point(v.x + self.offset.x, v.y + self.offset.y) for v in self.vertices]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the outline
        """
        return {
            "vertices": [v.to_dict() for v in self.vertices],
            "bounds": self.bounds.to_dict(),
            "offset": self.offset.to_dict(),
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OutlineGeometry":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an outline

        Returns:
            OutlineGeometry instance
        """
        return cls(
            vertices=[Point.from_dict(v) for v in data["vertices"]],
            bounds=BoundingBox(**data["bounds"]),
            offset=Point.from_dict(data["offset"]),
            width=data["width"],
            height=data["height"],
        )
