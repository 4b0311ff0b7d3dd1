"""Unit tests for the image and outline I/O layer.

Tests for ImageReader, OutlineWriter, and outline_path_data.
"""

import json
from pathlib import Path

import pytest
from PIL import Image

from alphatrace.config import OutputFormat
from alphatrace.domain import BoundingBox, OutlineGeometry, Point
from alphatrace.exceptions import ImageLoadError, OutputWriteError
from alphatrace.io import ImageReader, OutlineWriter, outline_path_data


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    """A 6x4 RGBA PNG with one opaque pixel at (2, 1)."""
    image = Image.new("RGBA", (6, 4), (0, 0, 0, 0))
    image.putpixel((2, 1), (10, 20, 30, 255))
    path = tmp_path / "sprite.png"
    image.save(path)
    return path


@pytest.fixture
def outline() -> OutlineGeometry:
    """A small triangle outline."""
    return OutlineGeometry(
        vertices=[Point(0.0, -0.5), Point(10.25, 0.0), Point(5.0, 8.0)],
        bounds=BoundingBox(3.0, 4.0, 13.0, 12.0),
        offset=Point(3.0, 4.0),
        width=10.0,
        height=8.0,
    )


class TestImageReader:
    """Tests for ImageReader class."""

    def test_load_nonexistent_file(self, tmp_path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = ImageReader(tmp_path / "missing.png")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_format_before_load(self):
        """Test accessing format before loading raises RuntimeError."""
        reader = ImageReader(Path("test.png"))
        with pytest.raises(RuntimeError, match="Image not loaded"):
            _ = reader.format

    def test_pixel_buffer_before_load(self):
        """Test reading pixels before loading raises RuntimeError."""
        reader = ImageReader(Path("test.png"))
        with pytest.raises(RuntimeError, match="Image not loaded"):
            reader.pixel_buffer()

    def test_load_png(self, png_path):
        """Test loading a PNG exposes its metadata and pixels."""
        with ImageReader(png_path) as reader:
            assert reader.format == "PNG"
            assert reader.mode == "RGBA"
            assert reader.size == (6, 4)
            buffer = reader.pixel_buffer()

        assert (buffer.width, buffer.height) == (6, 4)
        assert buffer.data[32:36] == bytes([10, 20, 30, 255])
        assert buffer.alpha(0, 0) == 0

    def test_rgb_image_is_opaque(self, tmp_path):
        """Test images without alpha decode as fully opaque."""
        path = tmp_path / "photo.png"
        Image.new("RGB", (3, 2), (200, 100, 50)).save(path)

        with ImageReader(path) as reader:
            assert reader.mode == "RGB"
            buffer = reader.pixel_buffer()

        assert all(buffer.alpha(x, y) == 255 for y in range(2) for x in range(3))

    def test_palette_transparency(self, tmp_path):
        """Test palette images keep their transparent index."""
        path = tmp_path / "icon.png"
        image = Image.new("P", (2, 1), 0)
        image.putpalette([0, 0, 0, 255, 0, 0] + [0, 0, 0] * 254)
        image.putpixel((1, 0), 1)
        image.save(path, transparency=0)

        with ImageReader(path) as reader:
            buffer = reader.pixel_buffer()

        assert buffer.alpha(0, 0) == 0
        assert buffer.alpha(1, 0) == 255

    def test_corrupt_file(self, tmp_path):
        """Test undecodable data raises ImageLoadError."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image at all")

        with pytest.raises(ImageLoadError) as exc_info:
            ImageReader(path).load()
        assert exc_info.value.path == str(path)
        assert exc_info.value.status == "Could not load image"

    def test_file_too_large(self, png_path):
        """Test files over the size limit are refused before decoding."""
        with pytest.raises(ImageLoadError, match="maximum allowed"):
            ImageReader(png_path, max_bytes=10).load()

    def test_close(self, png_path):
        """Test closing releases the image."""
        reader = ImageReader(png_path)
        reader.load()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.size


class TestOutlinePathData:
    """Tests for outline_path_data function."""

    def test_closed_path(self, outline):
        """Test the path starts with a move and ends closed."""
        assert outline_path_data(outline) == "M 0 -0.5 L 10.25 0 L 5 8 Z"

    def test_rounding(self):
        """Test coordinates are written with at most three decimals."""
        tiny = OutlineGeometry(
            vertices=[Point(1 / 3, -0.0001), Point(2.0, 2.0), Point(0.0, 2.0)],
            bounds=BoundingBox(0.0, 0.0, 2.0, 2.0),
            offset=Point(0.0, 0.0),
            width=2.0,
            height=2.0,
        )
        assert outline_path_data(tiny).startswith("M 0.333 0 L")


class TestOutlineWriter:
    """Tests for OutlineWriter class."""

    def test_get_output_path(self):
        """Test output path generation."""
        assert OutlineWriter.get_output_path(Path("logo.png")) == Path("logo-outline.svg")
        assert OutlineWriter.get_output_path(
            Path("icons/star.webp"), OutputFormat.JSON
        ) == Path("icons/star-outline.json")

    def test_svg(self, outline):
        """Test SVG output places the path at the outline offset."""
        svg = OutlineWriter(outline, Path("out.svg"), canvas_size=(20.0, 16.0)).to_svg()

        assert 'width="20"' in svg
        assert 'viewBox="0 0 20 16"' in svg
        assert 'd="M 0 -0.5 L 10.25 0 L 5 8 Z"' in svg
        assert 'transform="translate(3 4)"' in svg
        assert 'fill-rule="evenodd"' in svg

    def test_default_canvas(self, outline):
        """Test the canvas defaults to the outline's extent."""
        svg = OutlineWriter(outline, Path("out.svg")).to_svg()
        assert 'viewBox="0 0 13 12"' in svg

    def test_json(self, outline):
        """Test JSON output round-trips into an OutlineGeometry."""
        text = OutlineWriter(outline, Path("out.json"), canvas_size=(20.0, 16.0)).to_json()
        data = json.loads(text)

        assert data["canvas"] == {"width": 20.0, "height": 16.0}
        assert OutlineGeometry.from_dict(data) == outline

    def test_save(self, outline, tmp_path):
        """Test saving writes the chosen format."""
        path = tmp_path / "shape-outline.svg"
        OutlineWriter(outline, path).save(OutputFormat.SVG)
        assert path.read_text(encoding="utf-8").startswith("<?xml")

        path = tmp_path / "shape-outline.json"
        OutlineWriter(outline, path).save(OutputFormat.JSON)
        assert json.loads(path.read_text(encoding="utf-8"))["width"] == 10.0

    def test_save_to_missing_directory(self, outline, tmp_path):
        """Test an unwritable path raises OutputWriteError."""
        path = tmp_path / "missing" / "out.svg"
        with pytest.raises(OutputWriteError) as exc_info:
            OutlineWriter(outline, path).save()
        assert exc_info.value.status == "Could not save outline"
