"""Logging utilities for Threadpath."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from threadpath.domain import MergeStep


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    shapes_processed: int = 0
    shapes_skipped: int = 0
    segments: int = 0
    stitches: int = 0
    merges: int = 0
    jump_distance_before: float = 0.0
    jump_distance_after: float = 0.0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def jump_saving(self) -> float:
        """Fraction of jump distance removed by optimization."""
        if self.jump_distance_before <= 0.0:
            return 0.0
        return 1.0 - self.jump_distance_after / self.jump_distance_before


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
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

    logger = structlog.get_logger("threadpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_input_loaded(self, path: str, kind: str, count: int) -> None:
        """Log a loaded input document."""
        self._logger.info("Input loaded", path=path, kind=kind, items=count)

    def log_shape_complete(self, shape_id: str, segments_added: int) -> None:
        """Log a shape turned into stitches."""
        self._logger.debug("Shape stitched", shape=shape_id, segments=segments_added)
        self._stats.shapes_processed += 1

    def log_shape_skipped(self, shape_id: str, reason: str) -> None:
        """Log skipped shape."""
        self._logger.debug("Shape skipped", shape=shape_id, reason=reason)
        self._stats.shapes_skipped += 1

    def log_shape_error(self, shape_id: str, error: Exception) -> None:
        """Log shape processing error."""
        self._logger.error(
            "Shape processing failed",
            shape=shape_id,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((shape_id, str(error)))

    def log_merge(self, step_idx: int, step: MergeStep) -> None:
        """Log one optimizer merge step."""
        self._logger.debug(
            "Chains merged",
            step=step_idx,
            node=step.node,
            neighbor=step.neighbor,
            distance=round(step.distance**0.5, 3),
            node_back=step.node_back,
            neighbor_back=step.neighbor_back,
        )
        self._stats.merges += 1

    def log_optimization(self, before: float, after: float, start_gap: float) -> None:
        """Log optimization result."""
        self._logger.info(
            "Stitch order optimized",
            jump_before=round(before, 2),
            jump_after=round(after, 2),
            start_gap=round(start_gap, 2),
        )
        self._stats.jump_distance_before = before
        self._stats.jump_distance_after = after

    def log_output(self, path: str, segments: int, stitches: int) -> None:
        """Log the written embroidery file."""
        self._logger.info("Embroidery written", path=path, segments=segments, stitches=stitches)

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
