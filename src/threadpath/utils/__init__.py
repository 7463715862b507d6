"""Utility functions for threadpath.

- Structured logging setup
- Per-run processing statistics
"""

from threadpath.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
