"""Image and outline I/O layer for alphatrace.

This module handles reading images with Pillow and writing traced outlines.
It provides a clean abstraction layer between file formats and the domain
models.

Key responsibilities:
- Decode any Pillow-readable image into an RGBA PixelBuffer
- Refuse oversized files before decoding
- Write outlines as SVG or JSON with the -outline naming convention

Key classes:
- ImageReader: Load images and expose their pixels
- OutlineWriter: Save traced outlines
"""

from alphatrace.io.reader import ImageReader
from alphatrace.io.writer import OutlineWriter, outline_path_data

__all__ = [
    "ImageReader",
    "OutlineWriter",
    "outline_path_data",
]
