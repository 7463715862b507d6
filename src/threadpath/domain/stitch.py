"""Stitch data model.

This module defines the types passed between the samplers, the pattern
builder, the tour optimizer and the writer:
- StitchSegment: A run of stitches with no jump inside it
- ChainEntry: One segment of a merged chain with its traversal direction
- MergeStep: Record of one optimizer merge, for instrumentation and logging
- CommandType / StitchCommand: Format-independent machine commands
- Shape: A stroked input path as cubic Bezier control point chains
- WireSegment: A straight wire with per-endpoint pad connection flags
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from threadpath.domain.vector import Point


@dataclass(frozen=True, slots=True)
class StitchSegment:
    """A directional run of stitch points sewn without cutting the thread.

    Attributes:
        points: Needle positions in stitching order
    """

    points: tuple[Point, ...]

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "StitchSegment":
        return cls(tuple(points))

    @property
    def front(self) -> Point:
        """First stitch of the segment."""
        return self.points[0]

    @property
    def back(self) -> Point:
        """Last stitch of the segment."""
        return self.points[-1]

    def reversed(self) -> "StitchSegment":
        """Return the same segment traversed back to front."""
        return StitchSegment(self.points[::-1])

    def length(self) -> float:
        """Total thread length along the segment."""
        return sum(a.distance_to(b) for a, b in zip(self.points, self.points[1:]))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def to_dict(self) -> dict[str, Any]:
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StitchSegment":
        return cls(tuple(Point.from_dict(p) for p in data["points"]))


@dataclass(frozen=True, slots=True)
class ChainEntry:
    """A segment reference inside a merged chain.

    Attributes:
        index: Position of the segment in the stitch collection
        reversed: True when the segment is traversed back to front
    """

    index: int
    reversed: bool = False

    def flipped(self) -> "ChainEntry":
        return ChainEntry(self.index, not self.reversed)

    def head(self, segments: Sequence[StitchSegment]) -> Point:
        """Point where traversal of this entry starts."""
        segment = segments[self.index]
        return segment.back if self.reversed else segment.front

    def tail(self, segments: Sequence[StitchSegment]) -> Point:
        """Point where traversal of this entry ends."""
        segment = segments[self.index]
        return segment.front if self.reversed else segment.back


@dataclass(frozen=True, slots=True)
class MergeStep:
    """One merge performed by the tour optimizer.

    Attributes:
        node: Id of the most isolated chain, which absorbs the neighbour
        neighbor: Id of the nearest chain, removed from the pool
        distance: Squared distance between the joined endpoints
        node_back: True when the node's back endpoint was joined
        neighbor_back: True when the neighbour's back endpoint was joined
    """

    node: int
    neighbor: int
    distance: float
    node_back: bool
    neighbor_back: bool


class CommandType(Enum):
    """Machine command kinds emitted for an ordered stitch path."""

    STITCH = auto()
    JUMP = auto()
    TRIM = auto()
    END = auto()


@dataclass(frozen=True, slots=True)
class StitchCommand:
    """A single absolute-position machine command."""

    command: CommandType
    point: Point


@dataclass
class Shape:
    """A stroked path read from an input drawing.

    Each subpath is a flattened chain of cubic Bezier control points
    ``[p0, c1, c2, p1, c1, c2, p2, ...]`` where consecutive curves share
    their end points, i.e. ``3k + 1`` points for ``k`` curves.

    Attributes:
        shape_id: Element id in the source document (may be empty)
        subpaths: Control point chains, one per continuous subpath
        stroke_width: Stroke width in millimetres
        has_stroke: True when the shape is stroked with a colour
        has_fill: True when the shape is filled
    """

    shape_id: str
    subpaths: list[list[Point]] = field(default_factory=list)
    stroke_width: float = 0.0
    has_stroke: bool = True
    has_fill: bool = False


@dataclass(frozen=True, slots=True)
class WireSegment:
    """A straight conductive wire between two points.

    Attributes:
        start: First endpoint
        end: Second endpoint
        start_is_pad: True when ``start`` connects to a board pad
        end_is_pad: True when ``end`` connects to a board pad
        wire_id: Identifier of the wire in the source document
    """

    start: Point
    end: Point
    start_is_pad: bool = False
    end_is_pad: bool = False
    wire_id: str = ""
