"""Greedy stitch order optimization.

Reorders independent stitch segments into one path that keeps the total
jump (needle-up travel) short. This is a bounded greedy heuristic, not an
optimal tour:

1. Every segment starts as its own chain with a front and a back endpoint.
2. For each chain, the nearest other chain is found over the four
   endpoint pairings (front-front, front-back, back-front, back-back).
3. The chain whose nearest neighbour is farthest away (the most isolated
   one) absorbs that neighbour, joining the two closest endpoints.
4. Steps 2-3 repeat until a single chain remains.
5. The chain is treated as a cycle and cut at its largest gap, so the
   unavoidable longest jump becomes the start of the path instead of
   sitting in its middle.

Each merge step scans all chain pairs, so a full run is O(N^3) in the
number of segments. Segments are addressed by index and carry a reversed
flag; point data is only reversed once, when the final order is built.

Ties are resolved by pool position: the first strictly better candidate
wins, both for the nearest neighbour and for the most isolated chain.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from threadpath.domain import ChainEntry, MergeStep, Point, StitchSegment


def _closest_pairing(
    edges: tuple[Point, Point], other_edges: tuple[Point, Point]
) -> tuple[float, bool, bool]:
    """Smallest squared distance between two pairs of endpoints.

    Returns:
        Tuple of (squared_distance, this_back, other_back)
    """
    best = ((edges[0] - other_edges[0]).square_norm(), False, False)
    for this_back, other_back in ((False, True), (True, False), (True, True)):
        distance = (edges[this_back] - other_edges[other_back]).square_norm()
        if distance < best[0]:
            best = (distance, this_back, other_back)
    return best


def _nearest(
    edges: Sequence[tuple[Point, Point]], i: int
) -> tuple[float, int, bool, bool]:
    """Nearest other chain to chain ``i``, the first one found winning ties.

    Returns:
        Tuple of (squared_distance, neighbor_index, this_back, other_back)
    """
    others = [j for j in range(len(edges)) if j != i]
    first = others[0]
    nearest = (*_closest_pairing(edges[i], edges[first]), first)
    for j in others[1:]:
        candidate = (*_closest_pairing(edges[i], edges[j]), j)
        if candidate[0] < nearest[0]:
            nearest = candidate
    distance, this_back, other_back, j = nearest
    return distance, j, this_back, other_back


class MergedChain:
    """An ordered chain of possibly reversed segments.

    Attributes:
        node_id: Index of the segment the chain was started from
        entries: Segment references in traversal order
    """

    def __init__(self, node_id: int, entries: list[ChainEntry] | None = None) -> None:
        self.node_id = node_id
        self.entries = entries if entries is not None else [ChainEntry(node_id)]

    def edge_points(self, segments: Sequence[StitchSegment]) -> tuple[Point, Point]:
        """Return (front, back) endpoints of the whole chain."""
        return self.entries[0].head(segments), self.entries[-1].tail(segments)

    def distance_to(
        self, other: "MergedChain", segments: Sequence[StitchSegment]
    ) -> tuple[float, bool, bool]:
        """Closest endpoint pairing with another chain.

        Args:
            other: Chain to compare with
            segments: Segment arena the entries refer to

        Returns:
            Tuple of (squared_distance, this_back, other_back) where the
            flags tell which endpoint of each chain is the closest one
        """
        return _closest_pairing(self.edge_points(segments), other.edge_points(segments))

    def merge(self, other: "MergedChain", this_back: bool, other_back: bool) -> None:
        """Absorb another chain, joining the given endpoints.

        The other chain is reversed when needed so that the joined endpoints
        become adjacent; reversing flips every entry's direction flag.

        Args:
            other: Chain to absorb
            this_back: Join at this chain's back (True) or front (False)
            other_back: Join at the other chain's back (True) or front (False)
        """
        if this_back:
            if other_back:
                self.entries.extend(e.flipped() for e in reversed(other.entries))
            else:
                self.entries.extend(other.entries)
        else:
            if other_back:
                self.entries = list(other.entries) + self.entries
            else:
                self.entries = [e.flipped() for e in reversed(other.entries)] + self.entries

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class OptimizedTour:
    """Result of a stitch order optimization.

    Attributes:
        segments: Segments in stitching order, reversed where needed
        order: Chain entries the segments were built from
        merges: Merge steps in the order they were performed
        start_gap: Length of the gap the path was cut at
    """

    segments: list[StitchSegment]
    order: list[ChainEntry] = field(default_factory=list)
    merges: list[MergeStep] = field(default_factory=list)
    start_gap: float = 0.0


def jump_distance(segments: Sequence[StitchSegment]) -> float:
    """Total needle-up travel between consecutive segments."""
    return sum(a.back.distance_to(b.front) for a, b in zip(segments, segments[1:]))


def select_start(
    entries: Sequence[ChainEntry], segments: Sequence[StitchSegment]
) -> tuple[int, float]:
    """Find where to cut a closed chain so the largest gap is not sewn through.

    Gap ``k`` is the jump from the entry before ``k`` (wrapping around) to
    entry ``k``; gap 0 is the wrap-around gap and keeps the current start.

    Returns:
        Tuple of (start_index, gap_length)
    """
    start = 0
    largest = -1.0
    for k, entry in enumerate(entries):
        gap = (entry.head(segments) - entries[k - 1].tail(segments)).square_norm()
        if gap > largest:
            largest = gap
            start = k
    return start, max(largest, 0.0) ** 0.5


class TourOptimizer:
    """Orders stitch segments into one path with short jumps.

    Example:
        optimizer = TourOptimizer()
        tour = optimizer.optimize(segments)
        for segment in tour.segments:
            ...
    """

    def optimize(self, segments: Sequence[StitchSegment]) -> OptimizedTour:
        """Merge all segments into a single ordered path.

        Args:
            segments: Independent stitch segments, each with at least one point

        Returns:
            OptimizedTour with the reordered segments and the merge log
        """
        if len(segments) <= 1:
            return OptimizedTour(
                segments=list(segments),
                order=[ChainEntry(i) for i in range(len(segments))],
            )

        pool = [MergedChain(i) for i in range(len(segments))]
        merges: list[MergeStep] = []

        while len(pool) > 1:
            merges.append(self._merge_most_isolated(pool, segments))

        entries = pool[0].entries
        start, gap = select_start(entries, segments)
        order = entries[start:] + entries[:start]

        ordered = [
            segments[e.index].reversed() if e.reversed else segments[e.index] for e in order
        ]
        return OptimizedTour(segments=ordered, order=order, merges=merges, start_gap=gap)

    def _merge_most_isolated(
        self, pool: list[MergedChain], segments: Sequence[StitchSegment]
    ) -> MergeStep:
        """Perform one merge step on the pool, in place.

        All distances are computed before the pool is modified.
        """
        edges = [chain.edge_points(segments) for chain in pool]

        best = (*_nearest(edges, 0), 0)
        for i in range(1, len(edges)):
            candidate = _nearest(edges, i)
            if candidate[0] > best[0]:
                best = (*candidate, i)

        distance, j, this_back, other_back, i = best
        node = pool[i]
        neighbor = pool[j]
        node.merge(neighbor, this_back, other_back)
        del pool[j]

        return MergeStep(
            node=node.node_id,
            neighbor=neighbor.node_id,
            distance=distance,
            node_back=this_back,
            neighbor_back=other_back,
        )
