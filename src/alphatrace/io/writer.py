"""Outline writer for saving traced outlines.

This module provides the OutlineWriter class for writing an OutlineGeometry
as an SVG document or as JSON.
"""

import json
from pathlib import Path

from alphatrace.config import OutputFormat
from alphatrace.domain import OutlineGeometry
from alphatrace.exceptions import OutputWriteError

STROKE_COLOR = "#000000"
STROKE_WIDTH = 2


def _fmt(value: float) -> str:
    """Format a coordinate with at most 3 decimals and no trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def outline_path_data(outline: OutlineGeometry) -> str:
    """Build closed SVG path data from the outline vertices.

    Args:
        outline: Outline to convert

    Returns:
        Path data of the form "M x y L x y ... Z"
    """
    commands = []
    for i, vertex in enumerate(outline.vertices):
        command = "M" if i == 0 else "L"
        commands.append(f"{command} {_fmt(vertex.x)} {_fmt(vertex.y)}")
    commands.append("Z")
    return " ".join(commands)


class OutlineWriter:
    """Writes outlines to SVG or JSON files.

    Example:
        writer = OutlineWriter(result.outline, Path("logo-outline.svg"))
        writer.save(OutputFormat.SVG)
    """

    def __init__(
        self,
        outline: OutlineGeometry,
        output_path: Path,
        canvas_size: tuple[float, float] | None = None,
    ) -> None:
        """Initialize the outline writer.

        Args:
            outline: Outline to write
            output_path: Path where the file will be saved
            canvas_size: Destination (width, height) the outline is placed in;
                defaults to the outline's own extent
        """
        self._outline = outline
        self._output_path = output_path
        self._canvas_size = canvas_size or (
            outline.offset.x + outline.width,
            outline.offset.y + outline.height,
        )

    def to_svg(self) -> str:
        """Render the outline as an SVG document."""
        width, height = self._canvas_size
        offset = self._outline.offset
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_fmt(width)}" '
            f'height="{_fmt(height)}" viewBox="0 0 {_fmt(width)} {_fmt(height)}">\n'
            f'  <path d="{outline_path_data(self._outline)}" '
            f'transform="translate({_fmt(offset.x)} {_fmt(offset.y)})" '
            f'fill="none" stroke="{STROKE_COLOR}" stroke-width="{STROKE_WIDTH}" '
            'fill-rule="evenodd"/>\n'
            "</svg>\n"
        )

    def to_json(self) -> str:
        """Render the outline as JSON."""
        width, height = self._canvas_size
        data = self._outline.to_dict()
        data["canvas"] = {"width": width, "height": height}
        return json.dumps(data, indent=2)

    def save(self, fmt: OutputFormat = OutputFormat.SVG) -> None:
        """Save the outline to the output path.

        Args:
            fmt: File format to write

        Raises:
            OutputWriteError: If the file cannot be written
        """
        content = self.to_svg() if fmt == OutputFormat.SVG else self.to_json()
        try:
            self._output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path, fmt: OutputFormat = OutputFormat.SVG) -> Path:
        """Generate output path with the outline naming convention.

        Converts: logo.png -> logo-outline.svg
                  icons/star.webp -> icons/star-outline.json (JSON format)

        Args:
            input_path: Original image path
            fmt: Output format, which decides the extension

        Returns:
            Path with -outline suffix and the format's extension
        """
        return input_path.parent / f"{input_path.stem}-outline.{fmt.value}"
