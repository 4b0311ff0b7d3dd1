"""Unit tests for boundary pixel detection."""

import pytest

from alphatrace.core.edges import EdgePixelSet, detect_edges, is_edge_pixel
from alphatrace.domain import Pixel, PixelBuffer
from alphatrace.exceptions import ComplexityExceededError, TimeoutExceededError
from alphatrace.utils.timing import Deadline


class TestEdgePixelSet:
    """Tests for EdgePixelSet class."""

    def test_keeps_insertion_order(self):
        """Test iteration follows the order pixels were added."""
        edges = EdgePixelSet(4, 4)
        edges.add(Pixel(3, 0))
        edges.add(Pixel(0, 2))
        edges.add(Pixel(1, 1))
        assert edges.to_list() == [Pixel(3, 0), Pixel(0, 2), Pixel(1, 1)]

    def test_ignores_duplicates(self):
        """Test adding a pixel twice keeps one entry."""
        edges = EdgePixelSet(2, 2)
        edges.add(Pixel(1, 1))
        edges.add(Pixel(1, 1))
        assert len(edges) == 1

    def test_membership(self):
        """Test membership by pixel and by coordinates."""
        edges = EdgePixelSet(3, 3)
        edges.add(Pixel(1, 2))
        assert Pixel(1, 2) in edges
        assert Pixel(2, 1) not in edges
        assert edges.contains(1, 2)
        assert not edges.contains(-1, 2)
        assert not edges.contains(1, 3)
        assert (1, 2) not in edges


class TestIsEdgePixel:
    """Tests for is_edge_pixel function."""

    def test_border_pixel_is_edge(self, make_mask):
        """Test that an opaque pixel on the raster border is an edge."""
        buffer = make_mask(["###", "###", "###"])
        assert is_edge_pixel(buffer, 0, 0)
        assert is_edge_pixel(buffer, 2, 1)
        assert not is_edge_pixel(buffer, 1, 1)

    def test_diagonal_hole_makes_edge(self, make_mask):
        """Test that a transparent diagonal neighbour is enough."""
        buffer = make_mask(["#####", "#####", "#####", "###.#", "#####"])
        assert is_edge_pixel(buffer, 2, 2)
        assert not is_edge_pixel(buffer, 1, 1)


class TestDetectEdges:
    """Tests for detect_edges function."""

    def test_square_border(self, square_buffer):
        """Test that a 10x10 square yields its 36 border pixels."""
        edges = detect_edges(square_buffer)
        assert len(edges) == 36
        assert Pixel(5, 5) in edges
        assert Pixel(14, 14) in edges
        assert Pixel(9, 9) not in edges

    def test_row_major_order(self, square_buffer):
        """Test that pixels are reported top to bottom, left to right."""
        pixels = detect_edges(square_buffer).to_list()
        assert pixels[0] == Pixel(5, 5)
        assert pixels[9] == Pixel(14, 5)
        assert pixels[10] == Pixel(5, 6)
        assert pixels[-1] == Pixel(14, 14)
        assert pixels == sorted(pixels, key=lambda p: (p.y, p.x))

    def test_every_edge_is_opaque(self, make_mask):
        """Test that transparent pixels are never reported."""
        buffer = make_mask([".#.", "###", ".#."])
        edges = detect_edges(buffer)
        for pixel in edges:
            assert buffer.is_opaque(pixel.x, pixel.y)
        assert len(edges) == 5

    def test_faint_alpha_counts_as_opaque(self):
        """Test that alpha 1 is treated as part of the silhouette."""
        buffer = PixelBuffer.from_alpha(3, 1, [0, 1, 0])
        assert detect_edges(buffer).to_list() == [Pixel(1, 0)]

    def test_fully_transparent(self):
        """Test that a transparent raster has no edges."""
        buffer = PixelBuffer.from_alpha(5, 5, [0] * 25)
        assert len(detect_edges(buffer)) == 0

    def test_fully_opaque_raster(self):
        """Test that the raster border counts as transparency."""
        buffer = PixelBuffer.from_alpha(5, 5, [255] * 25)
        assert len(detect_edges(buffer)) == 16

    def test_ceiling_raises_one_past_limit(self, square_buffer):
        """Test that the scan stops as soon as the ceiling is exceeded."""
        with pytest.raises(ComplexityExceededError) as exc_info:
            detect_edges(square_buffer, max_edge_pixels=20)
        assert exc_info.value.count == 21
        assert exc_info.value.limit == 20
        assert exc_info.value.status == "Image too complex"

    def test_ceiling_not_hit_at_limit(self, square_buffer):
        """Test that exactly max_edge_pixels edges is allowed."""
        assert len(detect_edges(square_buffer, max_edge_pixels=36)) == 36

    def test_checkerboard_is_all_edges(self, checkerboard_buffer):
        """Test that every opaque checkerboard pixel is an edge."""
        assert len(detect_edges(checkerboard_buffer)) == 64 * 64 // 2

    def test_deadline_expiry(self, square_buffer, clock):
        """Test that an expired scan budget raises a timeout."""
        deadline = Deadline(5.0, phase="scan", clock=clock)
        clock.now = 6.0
        with pytest.raises(TimeoutExceededError) as exc_info:
            detect_edges(square_buffer, deadline=deadline)
        assert exc_info.value.phase == "scan"
        assert exc_info.value.status == "Processing timeout"

    def test_buffer_unchanged(self, square_buffer):
        """Test that scanning does not modify the buffer."""
        before = square_buffer.data
        detect_edges(square_buffer)
        assert square_buffer.data == before
