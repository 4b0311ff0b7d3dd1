"""Orchestration of the tracing pipeline.

This module runs the full workflow on one raster:
detect boundary pixels, trace contours, pick the largest one, simplify it
and build the outline geometry.

Key components:
- TraceResult: Outline plus the intermediate data and statistics of a run
- OutlineTracer: Main orchestrator class
- trace_image: One-call file tracing with default settings
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from alphatrace.config import AlphaTraceSettings, get_default_settings
from alphatrace.core.edges import detect_edges
from alphatrace.core.outline import build_outline
from alphatrace.core.resample import downscale
from alphatrace.core.simplify import simplify_path
from alphatrace.core.tracer import ContourTracer
from alphatrace.domain import (
    MIN_CONTOUR_POINTS,
    Contour,
    OutlineGeometry,
    Pixel,
    PixelBuffer,
    TraceFrame,
)
from alphatrace.exceptions import (
    AlphaTraceError,
    ComplexityExceededError,
    DegenerateContourError,
    InvalidInputError,
    NoContoursFoundError,
)
from alphatrace.io import ImageReader
from alphatrace.utils import Deadline, TracingLogger, TracingStats


@dataclass
class TraceResult:
    """Everything a successful run produced.

    Attributes:
        outline: Final geometry for the renderer
        frame: Sizes the outline was built for
        contours: All contours kept after tracing, in discovery order
        main_contour: The largest contour, the one that was simplified
        simplified: Simplified path in processing pixels
        stats: Counts and timings of the run
    """

    outline: OutlineGeometry
    frame: TraceFrame
    contours: list[Contour]
    main_contour: Contour
    simplified: list[Pixel]
    stats: TracingStats = field(default_factory=TracingStats)


def select_main_contour(contours: list[Contour]) -> Contour:
    """Pick the contour with the most points; the earliest one wins ties."""
    return max(contours, key=len)


class OutlineTracer:
    """Turns pixel buffers into outlines.

    The tracer holds configuration only; every call to trace() starts from
    fresh state, so results are identical for identical input.

    Example:
        settings = AlphaTraceSettings()
        tracer = OutlineTracer(settings)
        result = tracer.trace(buffer)
        print(len(result.outline))
    """

    def __init__(
        self,
        config: AlphaTraceSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize outline tracer with configuration.

        Args:
            config: alphatrace settings
            logger: Logger to report to (defaults to the "alphatrace" logger)
        """
        self.config = config
        self.logger = logger or structlog.get_logger("alphatrace")
        self.contour_tracer = ContourTracer(
            max_contours=config.tracing.max_contours,
            max_iterations=config.tracing.max_contour_iterations,
            timeout_seconds=config.tracing.trace_timeout_seconds,
            logger=self.logger,
        )

    def trace(self, buffer: PixelBuffer, frame: TraceFrame | None = None) -> TraceResult:
        """Trace the alpha silhouette of a buffer.

        Args:
            buffer: Raster at processing resolution
            frame: Source and destination sizes (defaults to the buffer size
                for both)

        Returns:
            TraceResult for the largest contour

        Raises:
            InvalidInputError: If frame does not match the buffer
            ComplexityExceededError: If a boundary, contour or step ceiling is hit
            TimeoutExceededError: If the scan or trace budget runs out
            NoContoursFoundError: If no contour of 3 or more points exists
            DegenerateContourError: If simplification leaves fewer than 3 points
        """
        if frame is None:
            frame = TraceFrame.for_buffer(buffer)
        if (frame.processing_width, frame.processing_height) != (buffer.width, buffer.height):
            raise InvalidInputError(
                f"frame expects a {frame.processing_width}x{frame.processing_height} "
                f"raster, got {buffer.width}x{buffer.height}"
            )

        tracing_logger = TracingLogger(self.logger)
        stats = tracing_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting tracing",
            width=buffer.width,
            height=buffer.height,
            source_width=frame.source_width,
            source_height=frame.source_height,
        )

        try:
            result = self._run(buffer, frame, tracing_logger)
        except AlphaTraceError as e:
            tracing_logger.log_failure(e)
            raise

        stats.end_time = time.time()
        self.logger.info(
            "Tracing complete",
            edge_pixels=stats.edge_pixels,
            contours=stats.contours_found,
            simplified=stats.simplified_points,
            duration_seconds=round(stats.duration_seconds, 3),
        )
        return result

    def trace_file(
        self,
        image_path: Path,
        dest_size: tuple[float, float] | None = None,
    ) -> TraceResult:
        """Load and trace an image file.

        Args:
            image_path: Path to any image Pillow can decode
            dest_size: Destination (width, height); defaults to the image size

        Returns:
            TraceResult for the largest contour

        Raises:
            ImageLoadError: If the image cannot be read
        """
        with ImageReader(image_path, max_bytes=self.config.raster.max_image_bytes) as reader:
            source = reader.pixel_buffer()

        self.logger.info(
            "Image loaded",
            path=str(image_path),
            width=source.width,
            height=source.height,
        )
        return self.trace_source(source, dest_size=dest_size)

    def trace_source(
        self,
        source: PixelBuffer,
        dest_size: tuple[float, float] | None = None,
    ) -> TraceResult:
        """Downscale a full-resolution raster to processing size and trace it.

        Args:
            source: Raster as decoded from the image file
            dest_size: Destination (width, height); defaults to the source size

        Returns:
            TraceResult for the largest contour
        """
        processing = downscale(source, self.config.raster.max_dimension)
        frame = TraceFrame.for_buffer(
            processing,
            source_size=(source.width, source.height),
            dest_size=dest_size,
        )
        return self.trace(processing, frame)

    def _run(
        self,
        buffer: PixelBuffer,
        frame: TraceFrame,
        tracing_logger: TracingLogger,
    ) -> TraceResult:
        tracing = self.config.tracing

        scan_start = time.time()
        edges = detect_edges(
            buffer,
            max_edge_pixels=tracing.max_scan_edge_pixels,
            deadline=Deadline(tracing.scan_timeout_seconds, phase="scan"),
        )
        tracing_logger.log_edges_detected(len(edges), (time.time() - scan_start) * 1000)

        if len(edges) > tracing.max_edge_pixels:
            raise ComplexityExceededError("edge pixels", len(edges), tracing.max_edge_pixels)

        trace_start = time.time()
        contours = self.contour_tracer.trace(edges)
        tracing_logger.log_contours_traced(
            contours=len(contours),
            traced_points=sum(len(c) for c in contours),
            duration_ms=(time.time() - trace_start) * 1000,
        )

        if not contours:
            raise NoContoursFoundError()

        main_contour = select_main_contour(contours)
        simplified = list(
            simplify_path(
                main_contour.points,
                self.config.simplify.target_points,
                self.config.simplify.corner_angle,
            )
        )
        tracing_logger.log_simplified(len(main_contour), len(simplified))

        if len(simplified) < MIN_CONTOUR_POINTS:
            raise DegenerateContourError(len(simplified))

        outline = build_outline(simplified, frame, self.config.outline.offset_pixels)
        tracing_logger.log_outline_built(len(outline), outline.width, outline.height)

        return TraceResult(
            outline=outline,
            frame=frame,
            contours=contours,
            main_contour=main_contour,
            simplified=simplified,
            stats=tracing_logger.stats,
        )


def trace_image(
    image_path: Path,
    settings: AlphaTraceSettings | None = None,
    dest_size: tuple[float, float] | None = None,
) -> TraceResult:
    """Trace an image file with a one-off OutlineTracer.

    Args:
        image_path: Path to any image Pillow can decode
        settings: Settings to use (defaults to get_default_settings())
        dest_size: Destination (width, height); defaults to the image size

    Returns:
        TraceResult for the largest contour
    """
    tracer = OutlineTracer(settings or get_default_settings())
    return tracer.trace_file(image_path, dest_size=dest_size)
