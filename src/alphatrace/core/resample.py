"""Nearest-neighbour downscaling of pixel buffers.

Tracing cost grows with the number of boundary pixels, so large images are
shrunk until their longest side fits max_dimension before edge detection.
"""

from alphatrace.core.geometry import round_half_up
from alphatrace.domain import PixelBuffer
from alphatrace.domain.raster import BYTES_PER_PIXEL


def downscaled_size(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Calculate the size a raster will have after downscaling.

    Args:
        width: Original width
        height: Original height
        max_dimension: Longest side allowed

    Returns:
        (width, height), unchanged when the raster already fits
    """
    scale = min(1.0, max_dimension / max(width, height))
    if scale >= 1.0:
        return (width, height)
    return (
        max(1, round_half_up(width * scale)),
        max(1, round_half_up(height * scale)),
    )


def downscale(buffer: PixelBuffer, max_dimension: int) -> PixelBuffer:
    """Shrink a buffer so its longest side is at most max_dimension.

    Each output pixel copies the source pixel at
    floor(x * width / new_width), floor(y * height / new_height).

    Args:
        buffer: Source raster
        max_dimension: Longest side allowed

    Returns:
        The same buffer when it already fits, otherwise a new one
    """
    new_width, new_height = downscaled_size(buffer.width, buffer.height, max_dimension)
    if (new_width, new_height) == (buffer.width, buffer.height):
        return buffer

    ratio_x = buffer.width / new_width
    ratio_y = buffer.height / new_height
    src = buffer.data
    out = bytearray(new_width * new_height * BYTES_PER_PIXEL)

    for y in range(new_height):
        src_y = int(y * ratio_y)
        for x in range(new_width):
            src_x = int(x * ratio_x)
            src_idx = (src_y * buffer.width + src_x) * BYTES_PER_PIXEL
            dst_idx = (y * new_width + x) * BYTES_PER_PIXEL
            out[dst_idx : dst_idx + BYTES_PER_PIXEL] = src[src_idx : src_idx + BYTES_PER_PIXEL]

    return PixelBuffer(width=new_width, height=new_height, data=bytes(out))
