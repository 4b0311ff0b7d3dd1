"""CLI application entry point for alphatrace.

This module provides the main CLI interface using Typer.
"""

from contextlib import nullcontext
from pathlib import Path
from typing import Annotated

import typer

from alphatrace import __version__
from alphatrace.cli.output import (
    console,
    print_error,
    print_header,
    print_image_info,
    print_step,
    print_success,
    print_trace_info,
)
from alphatrace.config import (
    AlphaTraceSettings,
    LoggingConfig,
    OutlineConfig,
    OutputFormat,
    RasterConfig,
    SimplifyConfig,
)
from alphatrace.core import OutlineTracer
from alphatrace.exceptions import AlphaTraceError, ImageLoadError
from alphatrace.io import ImageReader, OutlineWriter
from alphatrace.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="alphatrace",
    help="Trace the non-transparent silhouette of an image into a vector outline.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]alphatrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def trace(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (PNG, WebP, GIF, ... with transparency)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-outline.{format})",
        ),
    ] = None,
    points: Annotated[
        int,
        typer.Option(
            "--points",
            "-n",
            help="Target number of outline points (corners may add more)",
            min=3,
            max=1000,
        ),
    ] = 10,
    max_dimension: Annotated[
        int,
        typer.Option(
            "--max-dimension",
            "-m",
            help="Downscale images whose longest side exceeds this many pixels",
            min=1,
            max=4096,
        ),
    ] = 150,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (svg|json)",
        ),
    ] = "svg",
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            help="Destination width the outline is placed over (default: image width)",
            min=0.001,
        ),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option(
            "--height",
            help="Destination height the outline is placed over (default: image height)",
            min=0.001,
        ),
    ] = None,
    offset: Annotated[
        float,
        typer.Option(
            "--offset",
            help="Outward vertex offset in source pixels",
            min=0.0,
            max=10.0,
        ),
    ] = 0.5,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace the alpha silhouette of an image into a closed outline.

    Finds the boundary of the non-transparent pixels, follows it into
    contours, and simplifies the largest one to about --points vertices
    while keeping sharp corners.

    Example:
        alphatrace logo.png

    This will create logo-outline.svg next to logo.png.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    # Validate format argument
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: svg, json",
        )
        raise typer.Exit(code=1)

    if (width is None) != (height is None):
        print_error("--width and --height must be given together")
        raise typer.Exit(code=1)
    dest_size = (width, height) if width is not None and height is not None else None

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = AlphaTraceSettings(
        raster=RasterConfig(max_dimension=max_dimension),
        simplify=SimplifyConfig(target_points=points),
        outline=OutlineConfig(offset_pixels=offset),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    output_path = output or OutlineWriter.get_output_path(input_image, fmt)

    try:
        if not quiet:
            print_step("Loading image")
        with ImageReader(input_image, max_bytes=settings.raster.max_image_bytes) as reader:
            source = reader.pixel_buffer()
            if not quiet:
                print_image_info(
                    image_path=str(input_image),
                    image_format=reader.format,
                    mode=reader.mode,
                    size=reader.size,
                    file_size=_format_file_size(input_image),
                )
        logger.info(
            "Image loaded",
            path=str(input_image),
            width=source.width,
            height=source.height,
        )

        if not quiet:
            print_step("Tracing edges")
        tracer = OutlineTracer(settings, logger=logger)
        with console.status("Tracing...", spinner="dots") if not quiet else nullcontext():
            result = tracer.trace_source(source, dest_size=dest_size)

        if not quiet:
            print_trace_info(
                stats=result.stats,
                processing_size=(result.frame.processing_width, result.frame.processing_height),
                source_size=(result.frame.source_width, result.frame.source_height),
                verbose=verbose,
            )

        writer = OutlineWriter(
            result.outline,
            output_path,
            canvas_size=(result.frame.dest_width, result.frame.dest_height),
        )
        writer.save(fmt)

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=result.stats.duration_seconds,
                vertices=len(result.outline),
                width=result.outline.width,
                height=result.outline.height,
            )

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except AlphaTraceError as e:
        print_error(e.status, details=str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
