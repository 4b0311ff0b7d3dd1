"""Exception hierarchy for alphatrace."""

from typing import ClassVar


class AlphaTraceError(Exception):
    """Base exception for all alphatrace errors."""

    status: ClassVar[str] = "Error occurred"


class InvalidInputError(AlphaTraceError):
    """Pixel buffer or frame is malformed."""

    status: ClassVar[str] = "Invalid image"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")


class TracingError(AlphaTraceError):
    """Errors raised while turning a pixel buffer into an outline."""

    pass


class ComplexityExceededError(TracingError):
    """A boundary pixel, contour or iteration ceiling was exceeded."""

    status: ClassVar[str] = "Image too complex"

    def __init__(self, what: str, count: int, limit: int) -> None:
        self.what = what
        self.count = count
        self.limit = limit
        super().__init__(
            f"Too many {what} ({count:,}). Maximum allowed: {limit:,}. "
            "Try a simpler image."
        )


class TimeoutExceededError(TracingError):
    """The wall-clock budget of a phase ran out."""

    status: ClassVar[str] = "Processing timeout"

    def __init__(self, phase: str, elapsed_seconds: float, limit_seconds: float) -> None:
        self.phase = phase
        self.elapsed_seconds = elapsed_seconds
        self.limit_seconds = limit_seconds
        super().__init__(
            f"{phase.capitalize()} timeout after {elapsed_seconds:.2f}s "
            f"(limit {limit_seconds:.2f}s). Image too complex."
        )


class NoContoursFoundError(TracingError):
    """Edge detection produced no usable contour."""

    status: ClassVar[str] = "No edges found"

    def __init__(self) -> None:
        super().__init__("No edges found in the image")


class DegenerateContourError(TracingError):
    """The main contour collapsed below three points."""

    status: ClassVar[str] = "Degenerate outline"

    def __init__(self, point_count: int) -> None:
        self.point_count = point_count
        super().__init__(
            f"Main contour has only {point_count} point(s); at least 3 are required"
        )


class ImageError(AlphaTraceError):
    """Errors related to reading images or writing outlines."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    status: ClassVar[str] = "Could not load image"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class OutputWriteError(ImageError):
    """Error writing an outline file."""

    status: ClassVar[str] = "Could not save outline"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save outline '{path}': {reason}")
