"""Wall-clock budgets for the scan and trace loops."""

import time
from collections.abc import Callable

from alphatrace.exceptions import TimeoutExceededError


class Deadline:
    """A wall-clock budget checked at fixed points inside a loop.

    Example:
        deadline = Deadline(3.0, phase="trace")
        for step in walk:
            deadline.check()
    """

    def __init__(
        self,
        budget_seconds: float,
        phase: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Start the budget now.

        Args:
            budget_seconds: Seconds allowed before check() raises
            phase: Name reported in the timeout error ("scan" or "trace")
            clock: Monotonic time source, replaceable in tests
        """
        self.budget_seconds = budget_seconds
        self.phase = phase
        self._clock = clock
        self._start = clock()

    @property
    def elapsed(self) -> float:
        """Seconds since the budget started."""
        return self._clock() - self._start

    def check(self) -> None:
        """Raise if the budget has run out.

        Raises:
            TimeoutExceededError: If more than budget_seconds have elapsed
        """
        elapsed = self.elapsed
        if elapsed > self.budget_seconds:
            raise TimeoutExceededError(self.phase, elapsed, self.budget_seconds)
