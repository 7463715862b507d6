"""Embroidery file writer.

This module maps an ordered list of stitch segments onto machine commands
and serializes them with pyembroidery.

Every segment after the first starts with a thread cut, every segment
starts with a jump to its first point, and the path ends with an END
command at the last stitch.
"""

from collections.abc import Sequence
from pathlib import Path

import pyembroidery

from threadpath.config import OutputConfig
from threadpath.domain import CommandType, StitchCommand, StitchSegment
from threadpath.exceptions import UnsupportedFormatError, WriteError

_PYEMBROIDERY_COMMANDS = {
    CommandType.STITCH: pyembroidery.STITCH,
    CommandType.JUMP: pyembroidery.JUMP,
    CommandType.TRIM: pyembroidery.TRIM,
    CommandType.END: pyembroidery.END,
}


def plan_commands(segments: Sequence[StitchSegment]) -> list[StitchCommand]:
    """Convert ordered segments into absolute machine commands.

    Args:
        segments: Segments in stitching order

    Returns:
        Commands in execution order; empty when there is nothing to sew

    Examples:
        >>> from threadpath.domain import Point
        >>> seg = StitchSegment((Point(0, 0), Point(1, 0)))
        >>> [c.command.name for c in plan_commands([seg])]
        ['JUMP', 'STITCH', 'STITCH', 'END']
    """
    commands: list[StitchCommand] = []
    for i, segment in enumerate(segments):
        for j, point in enumerate(segment):
            if j == 0:
                if i > 0:
                    commands.append(StitchCommand(CommandType.TRIM, point))
                commands.append(StitchCommand(CommandType.JUMP, point))
            commands.append(StitchCommand(CommandType.STITCH, point))

    if commands:
        commands.append(StitchCommand(CommandType.END, commands[-1].point))
    return commands


EMBROIDERY_CATEGORY = "embroidery"


def writable_extensions() -> set[str]:
    """Machine embroidery extensions pyembroidery can write, lower case without dot.

    Image, vector, colour and debug outputs (png, svg, csv, ...) are excluded.
    """
    return {
        fmt["extension"].lower()
        for fmt in pyembroidery.supported_formats()
        if fmt.get("writer") is not None and fmt.get("category") == EMBROIDERY_CATEGORY
    }


class EmbroideryWriter:
    """Writes ordered stitch segments to an embroidery machine file.

    The output format is chosen from the file extension.

    Example:
        writer = EmbroideryWriter(OutputConfig())
        writer.write(segments, Path("design.pes"))
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            config: Thread and coordinate settings (default: OutputConfig())
        """
        self.config = config or OutputConfig()

    def build_pattern(self, segments: Sequence[StitchSegment]) -> pyembroidery.EmbPattern:
        """Build a pyembroidery pattern from ordered segments.

        Coordinates are converted from millimetres to embroidery units, and
        the y axis is inverted when ``flip_y`` is set.
        """
        pattern = pyembroidery.EmbPattern()

        thread = pyembroidery.EmbThread()
        thread.set_hex_color(self.config.thread_color)
        thread.description = self.config.thread_name
        thread.catalog_number = self.config.thread_catalog
        pattern.add_thread(thread)

        scale = self.config.units_per_mm
        y_sign = -1.0 if self.config.flip_y else 1.0
        for command in plan_commands(segments):
            pattern.add_stitch_absolute(
                _PYEMBROIDERY_COMMANDS[command.command],
                command.point.x * scale,
                y_sign * command.point.y * scale,
            )
        return pattern

    def write(self, segments: Sequence[StitchSegment], output_path: Path) -> int:
        """Serialize segments to ``output_path``.

        Args:
            segments: Segments in stitching order
            output_path: Destination file; its extension selects the format

        Returns:
            Number of commands written

        Raises:
            UnsupportedFormatError: If no writer exists for the extension
            WriteError: If the file cannot be written
        """
        extension = output_path.suffix.lstrip(".").lower()
        if extension not in writable_extensions():
            raise UnsupportedFormatError(str(output_path), extension)

        pattern = self.build_pattern(segments)
        try:
            pyembroidery.write(pattern, str(output_path))
        except Exception as e:
            raise WriteError(str(output_path), str(e)) from e

        if not output_path.exists():
            raise WriteError(str(output_path), "writer produced no file")
        return len(pattern.stitches)

    @staticmethod
    def get_output_path(input_path: Path, extension: str = "pes") -> Path:
        """Generate the default output path next to the input.

        Converts: board.svg -> board.pes
        """
        return input_path.with_suffix(f".{extension}")
