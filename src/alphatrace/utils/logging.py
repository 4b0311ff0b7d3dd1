"""Logging utilities for alphatrace."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class TracingStats:
    """Statistics from a tracing run."""

    edge_pixels: int = 0
    contours_found: int = 0
    traced_points: int = 0
    main_contour_points: int = 0
    simplified_points: int = 0
    phase_timings_ms: dict[str, float] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"alphatrace_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("alphatrace")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class TracingLogger:
    """Logger for tracking pipeline phases and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = TracingStats()

    def log_edges_detected(self, edge_pixels: int, duration_ms: float) -> None:
        """Log the result of the edge scan."""
        self._logger.info(
            "Edge pixels found",
            edge_pixels=edge_pixels,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.edge_pixels = edge_pixels
        self._stats.phase_timings_ms["scan"] = duration_ms

    def log_contours_traced(
        self,
        contours: int,
        traced_points: int,
        duration_ms: float,
    ) -> None:
        """Log the result of contour tracing."""
        self._logger.info(
            "Contours traced",
            contours=contours,
            points=traced_points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.contours_found = contours
        self._stats.traced_points = traced_points
        self._stats.phase_timings_ms["trace"] = duration_ms

    def log_simplified(self, original_points: int, simplified_points: int) -> None:
        """Log path simplification."""
        self._logger.info(
            "Path simplified",
            original=original_points,
            simplified=simplified_points,
        )
        self._stats.main_contour_points = original_points
        self._stats.simplified_points = simplified_points

    def log_outline_built(self, vertices: int, width: float, height: float) -> None:
        """Log the final outline geometry."""
        self._logger.debug(
            "Outline built",
            vertices=vertices,
            width=round(width, 2),
            height=round(height, 2),
        )

    def log_failure(self, error: Exception) -> None:
        """Log a pipeline failure."""
        self._logger.error(
            "Tracing failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> TracingStats:
        """Get current tracing statistics."""
        return self._stats
