"""Raster types: pixel coordinates and the decoded RGBA buffer.

This module defines:
- Pixel: An integer pixel coordinate, hashable by value
- PixelBuffer: A read-only, row-major RGBA raster
"""

from dataclasses import dataclass

from alphatrace.exceptions import InvalidInputError

BYTES_PER_PIXEL = 4
ALPHA_CHANNEL = 3


@dataclass(frozen=True, slots=True)
class Pixel:
    """An integer pixel coordinate.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: Column, 0 at the left edge
        y: Row, 0 at the top edge
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def is_neighbor(self, other: "Pixel") -> bool:
        """Check whether other is one of the 8 pixels surrounding this one."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return max(dx, dy) == 1


@dataclass(frozen=True)
class PixelBuffer:
    """A decoded RGBA raster, 8 bits per channel, row-major, top to bottom.

    The buffer is never mutated by the tracing pipeline.

    Attributes:
        width: Width in pixels (>= 1)
        height: Height in pixels (>= 1)
        data: At least width * height * 4 bytes of RGBA samples

    Raises:
        InvalidInputError: If dimensions are not positive or data is too short
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidInputError(
                f"image dimensions must be at least 1x1, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.data) < expected:
            raise InvalidInputError(
                f"pixel buffer holds {len(self.data)} bytes, expected {expected}"
            )
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_alpha(cls, width: int, height: int, alpha: bytes | list[int]) -> "PixelBuffer":
        """Build a white RGBA buffer from an alpha-only mask.

        Args:
            width: Width in pixels
            height: Height in pixels
            alpha: width * height alpha samples in row-major order

        Returns:
            PixelBuffer with RGB set to 255 and the given alpha
        """
        if len(alpha) != width * height:
            raise InvalidInputError(
                f"alpha mask holds {len(alpha)} samples, expected {width * height}"
            )
        data = bytearray(width * height * BYTES_PER_PIXEL)
        for i, a in enumerate(alpha):
            offset = i * BYTES_PER_PIXEL
            data[offset : offset + 3] = b"\xff\xff\xff"
            data[offset + ALPHA_CHANNEL] = a
        return cls(width=width, height=height, data=bytes(data))

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the raster."""
        return 0 <= x < self.width and 0 <= y < self.height

    def alpha(self, x: int, y: int) -> int:
        """Return the alpha sample at (x, y).

        The caller is responsible for bounds checking.
        """
        return self.data[(y * self.width + x) * BYTES_PER_PIXEL + ALPHA_CHANNEL]

    def is_opaque(self, x: int, y: int) -> bool:
        """Check whether (x, y) is inside the raster and has non-zero alpha."""
        return self.in_bounds(x, y) and self.alpha(x, y) != 0
