"""Incremental stitch segment collection.

The collection owns every segment produced while an input drawing is being
processed, until the optimizer replaces it with the final stitching order.
"""

from collections.abc import Iterator, Sequence

from threadpath.core.optimizer import OptimizedTour, TourOptimizer
from threadpath.core.patterns import make_star, single_stitch, triple_stitch
from threadpath.domain import Point, StitchSegment


class StitchCollection:
    """Ordered container of stitch segments.

    Empty point runs are never stored, so every segment has a front and a
    back endpoint.

    Example:
        collection = StitchCollection(star_size=2.0)
        collection.add_triple_stitch(points, start_star=True)
        tour = collection.optimize_order()
    """

    def __init__(self, star_size: float = 2.0) -> None:
        """Initialize an empty collection.

        Args:
            star_size: Diameter of junction stars added by the add_* methods
        """
        self.star_size = star_size
        self._segments: list[StitchSegment] = []

    @property
    def segments(self) -> list[StitchSegment]:
        """Segments in current order."""
        return list(self._segments)

    def is_empty(self) -> bool:
        """Check if no segment has been added."""
        return not self._segments

    def stitch_count(self) -> int:
        """Total number of stitch points over all segments."""
        return sum(len(s) for s in self._segments)

    def add_segment(self, points: Sequence[Point]) -> bool:
        """Append a point run as a new segment.

        Returns:
            True if a segment was added, False for an empty run
        """
        if not points:
            return False
        self._segments.append(StitchSegment.from_points(points))
        return True

    def add_single_stitch(
        self, points: Sequence[Point], start_star: bool = False, end_star: bool = False
    ) -> bool:
        """Add a path as a single stitch run."""
        return self.add_segment(single_stitch(points, self.star_size, start_star, end_star))

    def add_triple_stitch(
        self, points: Sequence[Point], start_star: bool = False, end_star: bool = False
    ) -> bool:
        """Add a path as a triple stitch run."""
        return self.add_segment(triple_stitch(points, self.star_size, start_star, end_star))

    def add_star(self, center: Point) -> bool:
        """Add a standalone junction star."""
        return self.add_segment(make_star(center, 0.5 * self.star_size))

    def optimize_order(self, optimizer: TourOptimizer | None = None) -> OptimizedTour:
        """Reorder the segments to minimize jumps.

        Args:
            optimizer: Optimizer to use (default: a new TourOptimizer)

        Returns:
            The optimization result; the collection now holds its segments
        """
        tour = (optimizer or TourOptimizer()).optimize(self._segments)
        self._segments = list(tour.segments)
        return tour

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[StitchSegment]:
        return iter(self._segments)
