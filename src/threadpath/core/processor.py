"""Stitch processing orchestration.

This module coordinates the full conversion workflow:
input drawing -> sampled points -> stitch patterns -> optimized order ->
embroidery file.

Key components:
- StitchProcessor: Main orchestrator class
"""

import time
from pathlib import Path

from threadpath.config import ThreadpathSettings
from threadpath.core.collection import StitchCollection
from threadpath.core.optimizer import TourOptimizer, jump_distance
from threadpath.core.strategies import get_strategy, stitch_wire
from threadpath.exceptions import EmptyDesignError, GeometryError, InputFormatError
from threadpath.io import EmbroideryWriter, FritzingReader, SVGReader
from threadpath.utils import ProcessingLogger, ProcessingStats, configure_logging

SVG_SUFFIXES = frozenset({".svg"})
FRITZING_SUFFIXES = frozenset({".fz", ".fzz"})


class StitchProcessor:
    """Orchestrates conversion of a drawing into an embroidery file.

    Manages the complete workflow:
    1. Load the SVG drawing or Fritzing sketch
    2. Turn every shape or wire into stitch segments
    3. Reorder the segments to minimize jumps
    4. Write the embroidery file

    Example:
        settings = ThreadpathSettings()
        processor = StitchProcessor(settings)
        stats = processor.process(
            input_path=Path("board.svg"),
            output_path=Path("board.pes"),
        )
    """

    def __init__(self, config: ThreadpathSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Threadpath settings
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)
        self.optimizer = TourOptimizer()
        self.writer = EmbroideryWriter(config.output)

    def build(self, input_path: Path) -> StitchCollection:
        """Read an input file and build its stitch segments.

        Args:
            input_path: SVG (.svg) or Fritzing (.fz, .fzz) file

        Returns:
            Collection of stitch segments in input order

        Raises:
            InputFormatError: If the file type is not supported
        """
        suffix = input_path.suffix.lower()
        collection = StitchCollection(star_size=self.config.pattern.star_size)

        if suffix in SVG_SUFFIXES:
            self._build_from_svg(input_path, collection)
        elif suffix in FRITZING_SUFFIXES:
            self._build_from_fritzing(input_path, collection)
        else:
            raise InputFormatError(str(input_path), f"unsupported input type '{suffix}'")

        return collection

    def _build_from_svg(self, input_path: Path, collection: StitchCollection) -> None:
        shapes = SVGReader(dpi=self.config.input.dpi).read(input_path)
        self.processing_logger.log_input_loaded(str(input_path), "svg", len(shapes))

        strategy = get_strategy(
            self.config.input.mode, self.config.sampler, self.config.pattern
        )
        for idx, shape in enumerate(shapes):
            shape_name = shape.shape_id or f"shape{idx}"
            try:
                added = strategy.apply(shape, collection)
            except (GeometryError, ValueError) as e:
                self.processing_logger.log_shape_error(shape_name, e)
                continue
            if added:
                self.processing_logger.log_shape_complete(shape_name, added)
            else:
                self.processing_logger.log_shape_skipped(shape_name, "no stitches")

    def _build_from_fritzing(self, input_path: Path, collection: StitchCollection) -> None:
        wires = FritzingReader(dpi=self.config.input.dpi).read(input_path)
        self.processing_logger.log_input_loaded(str(input_path), "fritzing", len(wires))

        for wire in wires:
            if stitch_wire(wire, collection, self.config.sampler):
                self.processing_logger.log_shape_complete(wire.wire_id, 1)
            else:
                self.processing_logger.log_shape_skipped(wire.wire_id, "too short")

    def optimize(self, collection: StitchCollection) -> None:
        """Reorder the collection in place, logging every merge step."""
        before = jump_distance(collection.segments)
        tour = collection.optimize_order(self.optimizer)
        for step_idx, step in enumerate(tour.merges):
            self.processing_logger.log_merge(step_idx, step)
        self.processing_logger.log_optimization(
            before, jump_distance(collection.segments), tour.start_gap
        )

    def process(
        self,
        input_path: Path,
        output_path: Path,
        dry_run: bool = False,
    ) -> ProcessingStats:
        """Convert an input drawing into an embroidery file.

        Args:
            input_path: SVG or Fritzing input file
            output_path: Embroidery file to write
            dry_run: Build and optimize, but do not write the file

        Returns:
            Processing statistics

        Raises:
            EmptyDesignError: If the input produced no stitches
            InputError: If the input cannot be read
            WriteError: If the output cannot be written
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        collection = self.build(input_path)
        if collection.is_empty():
            raise EmptyDesignError(str(input_path))

        if self.config.optimizer.enabled:
            self.optimize(collection)
        else:
            distance = jump_distance(collection.segments)
            stats.jump_distance_before = distance
            stats.jump_distance_after = distance

        stats.segments = len(collection)
        stats.stitches = collection.stitch_count()

        if not dry_run:
            self.writer.write(collection.segments, output_path)
            self.processing_logger.log_output(str(output_path), stats.segments, stats.stitches)

        stats.end_time = time.time()
        return stats
