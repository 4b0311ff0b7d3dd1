"""Image reader for loading rasters with Pillow.

This module provides the ImageReader class for loading image files and
handing their pixels to the tracer as an RGBA PixelBuffer.
"""

from pathlib import Path

from PIL import Image

from alphatrace.domain import PixelBuffer
from alphatrace.exceptions import ImageLoadError

DEFAULT_MAX_BYTES = 50 * 1024 * 1024


class ImageReader:
    """Loads images and converts them to RGBA pixel buffers.

    Example:
        with ImageReader(Path("logo.png")) as reader:
            buffer = reader.pixel_buffer()
    """

    def __init__(self, image_path: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
            max_bytes: Refuse files larger than this
        """
        self._image_path = image_path
        self._max_bytes = max_bytes
        self._image: Image.Image | None = None
        self._format: str | None = None
        self._mode: str | None = None

    def load(self) -> None:
        """Load and decode the image file.

        Raises:
            FileNotFoundError: If image file does not exist
            ImageLoadError: If the file is too large or cannot be decoded
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        size = self._image_path.stat().st_size
        if size > self._max_bytes:
            raise ImageLoadError(
                str(self._image_path),
                f"file is {size / 1024 / 1024:.1f}MB, maximum allowed is "
                f"{self._max_bytes / 1024 / 1024:.1f}MB",
            )

        try:
            with Image.open(self._image_path) as image:
                self._format = image.format
                self._mode = image.mode
                self._image = image.convert("RGBA")
        except (OSError, Image.DecompressionBombError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def format(self) -> str:
        """Return the decoded file format (e.g. 'PNG').

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        self._require_image()
        return self._format or "unknown"

    @property
    def mode(self) -> str:
        """Return the Pillow mode the file was stored in (e.g. 'RGBA', 'P').

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        self._require_image()
        return self._mode or "unknown"

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) in pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        return self._require_image().size

    def pixel_buffer(self) -> PixelBuffer:
        """Return the full-resolution RGBA pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        image = self._require_image()
        width, height = image.size
        return PixelBuffer(width=width, height=height, data=image.tobytes())

    def close(self) -> None:
        """Release the decoded image."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
