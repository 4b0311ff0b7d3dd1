"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
"""

from rich.console import Console
from rich.text import Text

from alphatrace.utils import TracingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]alphatrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(
    image_path: str,
    image_format: str,
    mode: str,
    size: tuple[int, int],
    file_size: str,
) -> None:
    """Print image information.

    Args:
        image_path: Path to the image file
        image_format: Decoded format (e.g., "PNG")
        mode: Stored pixel mode (e.g., "RGBA", "P")
        size: (width, height) in pixels
        file_size: Human-readable file size
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(image_path)
    line1.append(f" ({image_format}, {mode})")
    console.print(line1)
    console.print(f"  {size[0]:,} × {size[1]:,} px {SYM_DOT} {file_size}")


def print_trace_info(
    stats: TracingStats,
    processing_size: tuple[int, int],
    source_size: tuple[int, int],
    verbose: bool,
) -> None:
    """Print tracing statistics.

    Args:
        stats: Statistics of the finished run
        processing_size: Size of the raster that was traced
        source_size: Size of the original image
        verbose: Whether to show per-phase timings
    """
    if processing_size != source_size:
        console.print(
            f"  downscaled to {processing_size[0]} × {processing_size[1]} px"
        )
    console.print(
        f"  [green]{stats.edge_pixels:,}[/green] edge pixels {SYM_DOT} "
        f"{stats.contours_found} contours {SYM_DOT} {stats.traced_points:,} points"
    )
    console.print(
        f"  simplified {stats.main_contour_points:,} → "
        f"[green]{stats.simplified_points}[/green] points"
    )
    if verbose and stats.phase_timings_ms:
        timings = f" {SYM_DOT} ".join(
            f"{phase} {ms:.1f}ms" for phase, ms in stats.phase_timings_ms.items()
        )
        console.print(f"  {timings}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    vertices: int,
    width: float,
    height: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total tracing time in seconds
        vertices: Number of outline vertices
        width: Outline width in destination units
        height: Outline height in destination units
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Tracing complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {vertices} vertices {SYM_DOT} {width:.1f} × {height:.1f}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
