"""Boundary pixel detection.

A pixel lies on the boundary of the silhouette when it is opaque (alpha is
non-zero) and at least one of its 8 neighbours is transparent or falls
outside the raster. The scan runs once over the buffer in row-major order,
and that order is kept: it decides which pixel seeds each contour.
"""

from collections.abc import Iterator

from alphatrace.domain import Pixel, PixelBuffer
from alphatrace.exceptions import ComplexityExceededError
from alphatrace.utils.timing import Deadline

# The 8 neighbours, in no particular order
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class EdgePixelSet:
    """Boundary pixels in discovery order with O(1) membership.

    Membership is a flat grid indexed by y * width + x; iteration follows
    insertion order.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._pixels: list[Pixel] = []
        self._grid = bytearray(width * height)

    def add(self, pixel: Pixel) -> None:
        index = pixel.y * self.width + pixel.x
        if not self._grid[index]:
            self._grid[index] = 1
            self._pixels.append(pixel)

    def contains(self, x: int, y: int) -> bool:
        """Check membership by coordinates, returning False outside the raster."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return bool(self._grid[y * self.width + x])

    def __contains__(self, pixel: object) -> bool:
        if not isinstance(pixel, Pixel):
            return False
        return self.contains(pixel.x, pixel.y)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)

    def to_list(self) -> list[Pixel]:
        return list(self._pixels)


def is_edge_pixel(buffer: PixelBuffer, x: int, y: int) -> bool:
    """Check whether an opaque pixel touches transparency or the raster border.

    Args:
        buffer: Raster to inspect
        x: Column of an opaque pixel
        y: Row of an opaque pixel

    Returns:
        True if any of the 8 neighbours is outside the raster or has alpha 0
    """
    for dx, dy in NEIGHBOR_OFFSETS:
        nx = x + dx
        ny = y + dy
        if not buffer.in_bounds(nx, ny):
            return True
        if buffer.alpha(nx, ny) == 0:
            return True
    return False


def detect_edges(
    buffer: PixelBuffer,
    max_edge_pixels: int | None = None,
    deadline: Deadline | None = None,
) -> EdgePixelSet:
    """Collect every boundary pixel of the buffer in row-major order.

    Args:
        buffer: Raster to scan
        max_edge_pixels: Stop as soon as more boundary pixels than this are found
        deadline: Wall-clock budget, checked once per row

    Returns:
        EdgePixelSet in scan order

    Raises:
        ComplexityExceededError: If max_edge_pixels is exceeded
        TimeoutExceededError: If the deadline expires mid-scan
    """
    edges = EdgePixelSet(buffer.width, buffer.height)

    for y in range(buffer.height):
        if deadline is not None:
            deadline.check()

        for x in range(buffer.width):
            if buffer.alpha(x, y) == 0:
                continue
            if not is_edge_pixel(buffer, x, y):
                continue

            edges.add(Pixel(x, y))
            if max_edge_pixels is not None and len(edges) > max_edge_pixels:
                raise ComplexityExceededError("edge pixels", len(edges), max_edge_pixels)

    return edges
