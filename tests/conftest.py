"""Shared fixtures for building small test rasters."""

from collections.abc import Callable

import pytest

from alphatrace.domain import PixelBuffer


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def mask_to_buffer(rows: list[str]) -> PixelBuffer:
    """Build a buffer from rows of '#' (opaque) and '.' (transparent)."""
    height = len(rows)
    width = len(rows[0])
    alpha = [255 if ch == "#" else 0 for row in rows for ch in row]
    return PixelBuffer.from_alpha(width, height, alpha)


def rect_buffer(
    width: int,
    height: int,
    rects: list[tuple[int, int, int, int]],
) -> PixelBuffer:
    """Build a transparent canvas with opaque (x, y, w, h) rectangles."""
    alpha = [0] * (width * height)
    for rx, ry, rw, rh in rects:
        for y in range(ry, ry + rh):
            for x in range(rx, rx + rw):
                alpha[y * width + x] = 255
    return PixelBuffer.from_alpha(width, height, alpha)


@pytest.fixture
def clock() -> FakeClock:
    """A clock frozen at zero until a test advances it."""
    return FakeClock()


@pytest.fixture
def make_mask() -> Callable[[list[str]], PixelBuffer]:
    """Factory turning '#'/'.' rows into a buffer."""
    return mask_to_buffer


@pytest.fixture
def make_rects() -> Callable[[int, int, list[tuple[int, int, int, int]]], PixelBuffer]:
    """Factory drawing opaque rectangles on a transparent canvas."""
    return rect_buffer


@pytest.fixture
def square_buffer() -> PixelBuffer:
    """A 10x10 opaque square at (5, 5) on a 20x20 transparent canvas."""
    return rect_buffer(20, 20, [(5, 5, 10, 10)])


@pytest.fixture
def checkerboard_buffer() -> PixelBuffer:
    """A 64x64 checkerboard: every opaque pixel is a boundary pixel."""
    size = 64
    alpha = [255 if (x + y) % 2 == 0 else 0 for y in range(size) for x in range(size)]
    return PixelBuffer.from_alpha(size, size, alpha)


@pytest.fixture
def blocks_buffer() -> PixelBuffer:
    """64 separate 2x2 blocks on a 24x24 canvas."""
    rects = [(bx * 3, by * 3, 2, 2) for by in range(8) for bx in range(8)]
    return rect_buffer(24, 24, rects)
