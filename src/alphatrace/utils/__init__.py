"""Utility functions for alphatrace.

This module provides utility functions including:

- Logging setup and configuration
- Wall-clock budgets for the scan and trace loops
"""

from alphatrace.utils.logging import (
    TracingLogger,
    TracingStats,
    configure_logging,
)
from alphatrace.utils.timing import Deadline

__all__ = [
    "Deadline",
    "TracingLogger",
    "TracingStats",
    "configure_logging",
]
