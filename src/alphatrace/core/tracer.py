"""Moore-neighbour contour tracing over a set of boundary pixels.

Each unvisited boundary pixel seeds a walk. From the current pixel the 8
neighbours are scanned clockwise, starting at the current search direction;
the first one that is a boundary pixel becomes the next position, and the
search direction turns back two steps counter-clockwise from the direction
of arrival. The walk closes when it steps back onto its seed.

Noisy alpha masks can produce thousands of tiny outlines or very long walks,
so the tracer enforces a wall-clock budget, a per-contour step ceiling and a
contour count ceiling. Any of them aborts the whole run.
"""

import structlog

from alphatrace.core.edges import EdgePixelSet
from alphatrace.domain import MIN_CONTOUR_POINTS, Contour, Pixel
from alphatrace.exceptions import ComplexityExceededError
from alphatrace.utils.timing import Deadline

# Clockwise from east, with y growing downwards
MOORE_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),    # E
    (1, 1),    # SE
    (0, 1),    # S
    (-1, 1),   # SW
    (-1, 0),   # W
    (-1, -1),  # NW
    (0, -1),   # N
    (1, -1),   # NE
)

START_DIRECTION = 0
BACKTRACK_STEPS = 6
MIN_CLOSED_POINTS = 4
LOGGED_CONTOURS = 5


class ContourTracer:
    """Orders boundary pixels into contours.

    A single tracer instance may be reused; all per-run state (visited
    pixels, deadline) lives inside trace().

    Example:
        tracer = ContourTracer(max_contours=50)
        contours = tracer.trace(detect_edges(buffer))
    """

    def __init__(
        self,
        max_contours: int = 50,
        max_iterations: int = 10000,
        timeout_seconds: float = 3.0,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the tracer with its ceilings.

        Args:
            max_contours: More contours than this aborts the run
            max_iterations: More walk steps than this in one contour aborts the run
            timeout_seconds: Wall-clock budget for the whole run
            logger: Logger for per-contour diagnostics
        """
        self.max_contours = max_contours
        self.max_iterations = max_iterations
        self.timeout_seconds = timeout_seconds
        self.logger = logger or structlog.get_logger(__name__)

    def trace(
        self,
        edges: EdgePixelSet,
        deadline: Deadline | None = None,
    ) -> list[Contour]:
        """Trace every connected run of boundary pixels.

        Args:
            edges: Boundary pixels in scan order
            deadline: Budget to use instead of a fresh one

        Returns:
            Contours with at least 3 points, in discovery order

        Raises:
            ComplexityExceededError: On too many contours or an over-long walk
            TimeoutExceededError: If the budget runs out
        """
        if deadline is None:
            deadline = Deadline(self.timeout_seconds, phase="trace")

        visited = bytearray(edges.width * edges.height)
        contours: list[Contour] = []

        for seed in edges:
            deadline.check()

            if visited[seed.y * edges.width + seed.x]:
                continue

            contour = self._trace_contour(seed, edges, visited, deadline)
            if contour.is_degenerate():
                continue

            contours.append(contour)
            if len(contours) <= LOGGED_CONTOURS:
                self.logger.debug(
                    "Traced contour",
                    index=len(contours),
                    points=len(contour),
                    closed=contour.closed,
                )

            if len(contours) > self.max_contours:
                raise ComplexityExceededError("contours", len(contours), self.max_contours)

        return contours

    def _trace_contour(
        self,
        seed: Pixel,
        edges: EdgePixelSet,
        visited: bytearray,
        deadline: Deadline,
    ) -> Contour:
        """Walk one contour starting at seed.

        Pixels already recorded, by this contour or an earlier one, are walked
        through but not recorded again, so consecutive points of a concave
        contour need not be neighbours.
        """
        width = edges.width
        points: list[Pixel] = []
        on_path: set[Pixel] = set()
        states: set[tuple[Pixel, int]] = set()

        current = seed
        direction = START_DIRECTION
        iterations = 0
        closed = False

        while True:
            deadline.check()

            iterations += 1
            if iterations > self.max_iterations:
                raise ComplexityExceededError(
                    "contour iterations", iterations, self.max_iterations
                )

            # Back on a pixel of this walk: an unintended loop
            if current in on_path and len(points) > MIN_CLOSED_POINTS:
                self.logger.debug("Contour cycle detected", at=current.to_tuple())
                break

            # Same position and heading as before: the walk can only repeat
            state = (current, direction)
            if state in states:
                break
            states.add(state)
            on_path.add(current)

            index = current.y * width + current.x
            if not visited[index]:
                visited[index] = 1
                points.append(current)

            step = self._next_step(current, direction, edges)
            if step is None:
                break

            current, direction = step
            if current == seed and len(points) >= MIN_CLOSED_POINTS:
                closed = True
                break

        return Contour(points=points, closed=closed)

    @staticmethod
    def _next_step(
        current: Pixel,
        direction: int,
        edges: EdgePixelSet,
    ) -> tuple[Pixel, int] | None:
        """Find the first boundary neighbour clockwise from direction.

        Returns:
            (next pixel, next search direction), or None at a dead end
        """
        for i in range(len(MOORE_DIRECTIONS)):
            check = (direction + i) % len(MOORE_DIRECTIONS)
            dx, dy = MOORE_DIRECTIONS[check]
            nx = current.x + dx
            ny = current.y + dy
            if edges.contains(nx, ny):
                return Pixel(nx, ny), (check + BACKTRACK_STEPS) % len(MOORE_DIRECTIONS)
        return None


def trace_contours(
    edges: EdgePixelSet,
    max_contours: int = 50,
    max_iterations: int = 10000,
    timeout_seconds: float = 3.0,
) -> list[Contour]:
    """Trace contours with a one-off ContourTracer."""
    tracer = ContourTracer(
        max_contours=max_contours,
        max_iterations=max_iterations,
        timeout_seconds=timeout_seconds,
    )
    return tracer.trace(edges)
