"""Shape interpretation strategies.

A strategy decides how each stroked shape of an input drawing becomes
stitches. Two variants exist, selected by InputMode:

- NormalStrategy: stroke width picks a single or triple stitch
- Fritzing09Strategy: PCB exports of Fritzing 0.9, where the board outline is
  skipped, connector outlines are reinforced at a finer pitch and every other
  path is a wire with junction stars at both ends

Pattern results with fewer than two stitches are dropped.
"""

from typing import Protocol

from threadpath.config import InputMode, PatternConfig, SamplerConfig
from threadpath.core.collection import StitchCollection
from threadpath.core.patterns import single_stitch, triple_stitch
from threadpath.core.sampler import points_on_bezier, points_on_line
from threadpath.domain import Point, Shape, WireSegment

MIN_SEGMENT_POINTS = 2

BOARD_OUTLINE_ID = "boardoutline"
CONNECTOR_ID_PREFIX = "connector"


class ShapeStrategy(Protocol):
    """Turns one input shape into stitch segments."""

    def apply(self, shape: Shape, collection: StitchCollection) -> int:
        """Add the shape's stitches to the collection.

        Returns:
            Number of segments added
        """
        ...


class _SamplingStrategy:
    """Shared sampling and pattern helpers."""

    def __init__(self, sampler: SamplerConfig, pattern: PatternConfig) -> None:
        self.sampler = sampler
        self.pattern = pattern

    def _sample(self, control_points: list[Point], pitch: float) -> list[Point]:
        return points_on_bezier(
            control_points,
            pitch,
            segments=self.sampler.curve_segments,
            tail_snap_ratio=self.sampler.tail_snap_ratio,
        )

    def _stitch_subpaths(
        self,
        shape: Shape,
        collection: StitchCollection,
        pitch: float,
        triple: bool,
        stars: bool = False,
    ) -> int:
        build = triple_stitch if triple else single_stitch
        added = 0
        for control_points in shape.subpaths:
            points = self._sample(control_points, pitch)
            stitches = build(points, self.pattern.star_size, stars, stars)
            if len(stitches) >= MIN_SEGMENT_POINTS and collection.add_segment(stitches):
                added += 1
        return added


class NormalStrategy(_SamplingStrategy):
    """Stitches every stroked shape; wide strokes get a triple stitch."""

    def apply(self, shape: Shape, collection: StitchCollection) -> int:
        # Filled areas are not stitched, only their stroke.
        if not shape.has_stroke:
            return 0
        triple = shape.stroke_width >= self.pattern.triple_stitch_width
        return self._stitch_subpaths(shape, collection, self.sampler.line_pitch, triple)


class Fritzing09Strategy(_SamplingStrategy):
    """Interprets Fritzing 0.9 PCB SVG exports as conductive wiring."""

    def apply(self, shape: Shape, collection: StitchCollection) -> int:
        if not shape.has_stroke or shape.shape_id == BOARD_OUTLINE_ID:
            return 0

        if shape.shape_id.startswith(CONNECTOR_ID_PREFIX):
            pitch = self.pattern.connector_pitch_ratio * self.sampler.line_pitch
            return self._stitch_subpaths(shape, collection, pitch, triple=True)

        return self._stitch_subpaths(
            shape, collection, self.sampler.line_pitch, triple=True, stars=True
        )


def get_strategy(
    mode: InputMode, sampler: SamplerConfig, pattern: PatternConfig
) -> ShapeStrategy:
    """Create the strategy for an input mode."""
    if mode == InputMode.FRITZING09:
        return Fritzing09Strategy(sampler, pattern)
    return NormalStrategy(sampler, pattern)


def stitch_wire(
    wire: WireSegment,
    collection: StitchCollection,
    sampler: SamplerConfig,
) -> bool:
    """Stitch a straight wire as a triple run with stars at its pad ends.

    Returns:
        True if a segment was added
    """
    points = points_on_line(
        wire.start,
        wire.end,
        sampler.line_pitch,
        segments=sampler.curve_segments,
        tail_snap_ratio=sampler.tail_snap_ratio,
    )
    stitches = triple_stitch(
        points, collection.star_size, wire.start_is_pad, wire.end_is_pad
    )
    if len(stitches) < MIN_SEGMENT_POINTS:
        return False
    return collection.add_segment(stitches)
