"""Tests for greedy stitch order optimization."""

from unittest.mock import patch

import pytest

from threadpath.core.optimizer import (
    MergedChain,
    TourOptimizer,
    jump_distance,
    select_start,
)
from threadpath.domain import ChainEntry, Point, StitchSegment


def _seg(*coords: tuple[float, float]) -> StitchSegment:
    return StitchSegment.from_points(Point(x, y) for x, y in coords)


@pytest.fixture
def optimizer() -> TourOptimizer:
    return TourOptimizer()


class TestMergedChain:
    """Tests for joining chains at each endpoint pairing."""

    @pytest.fixture
    def chains(self) -> tuple[MergedChain, MergedChain]:
        a = MergedChain(0, [ChainEntry(0), ChainEntry(1)])
        b = MergedChain(2, [ChainEntry(2), ChainEntry(3, reversed=True)])
        return a, b

    def test_new_chain_holds_own_segment(self) -> None:
        """Test a fresh chain holds only its own segment, forward."""
        chain = MergedChain(4)
        assert chain.entries == [ChainEntry(4)]
        assert len(chain) == 1

    def test_back_to_back(self, chains: tuple[MergedChain, MergedChain]) -> None:
        """Test joining both backs appends the other chain reversed."""
        a, b = chains
        a.merge(b, this_back=True, other_back=True)
        assert a.entries == [
            ChainEntry(0),
            ChainEntry(1),
            ChainEntry(3, reversed=False),
            ChainEntry(2, reversed=True),
        ]

    def test_back_to_front(self, chains: tuple[MergedChain, MergedChain]) -> None:
        """Test joining back to front appends the other chain as is."""
        a, b = chains
        a.merge(b, this_back=True, other_back=False)
        assert a.entries == [
            ChainEntry(0),
            ChainEntry(1),
            ChainEntry(2),
            ChainEntry(3, reversed=True),
        ]

    def test_front_to_back(self, chains: tuple[MergedChain, MergedChain]) -> None:
        """Test joining front to back prepends the other chain as is."""
        a, b = chains
        a.merge(b, this_back=False, other_back=True)
        assert a.entries == [
            ChainEntry(2),
            ChainEntry(3, reversed=True),
            ChainEntry(0),
            ChainEntry(1),
        ]

    def test_front_to_front(self, chains: tuple[MergedChain, MergedChain]) -> None:
        """Test joining both fronts prepends the other chain reversed."""
        a, b = chains
        a.merge(b, this_back=False, other_back=False)
        assert a.entries == [
            ChainEntry(3, reversed=False),
            ChainEntry(2, reversed=True),
            ChainEntry(0),
            ChainEntry(1),
        ]

    def test_joined_endpoints_become_adjacent(self) -> None:
        """Test the closest endpoints meet after a merge."""
        segments = [_seg((0, 0), (10, 0)), _seg((0, 5), (0, 1))]
        a, b = MergedChain(0), MergedChain(1)

        distance, this_back, other_back = a.distance_to(b, segments)
        assert (distance, this_back, other_back) == (1.0, False, True)

        a.merge(b, this_back, other_back)
        first, second = a.entries
        assert first.tail(segments).distance_to(second.head(segments)) == 1.0
        assert a.edge_points(segments) == (Point(0, 5), Point(10, 0))


class TestSelectStart:
    """Tests for cutting the closed chain at its largest gap."""

    def test_largest_gap_starts_path(self) -> None:
        """Test the path begins after the largest jump."""
        segments = [_seg((0, 0), (1, 0)), _seg((1, 0), (2, 0)), _seg((50, 0), (0, 1))]
        entries = [ChainEntry(0), ChainEntry(1), ChainEntry(2)]

        start, gap = select_start(entries, segments)

        assert start == 2
        assert gap == pytest.approx(48.0)

    def test_wrap_around_gap(self) -> None:
        """Test the current start is kept when the wrap-around gap is largest."""
        segments = [_seg((0, 0), (1, 0)), _seg((1, 0), (2, 0))]
        start, gap = select_start([ChainEntry(0), ChainEntry(1)], segments)
        assert start == 0
        assert gap == pytest.approx(2.0)

    def test_ties_keep_first(self) -> None:
        """Test a closed loop with no gaps keeps the current start."""
        segments = [_seg((0, 0), (1, 0)), _seg((1, 0), (0, 0))]
        assert select_start([ChainEntry(0), ChainEntry(1)], segments) == (0, 0.0)


class TestTourOptimizer:
    """Tests for the full optimization."""

    def test_empty(self, optimizer: TourOptimizer) -> None:
        """Test no segments gives an empty tour."""
        tour = optimizer.optimize([])
        assert tour.segments == []
        assert tour.merges == []

    def test_single_segment_unchanged(self, optimizer: TourOptimizer) -> None:
        """Test one segment is returned as is without merging."""
        segment = _seg((5, 5), (0, 0))
        with patch.object(MergedChain, "merge") as merge:
            tour = optimizer.optimize([segment])
        merge.assert_not_called()
        assert tour.segments == [segment]
        assert tour.order == [ChainEntry(0)]

    def test_most_isolated_merged_first(self, optimizer: TourOptimizer) -> None:
        """Test the outlying segment absorbs its nearest neighbour first."""
        segments = [
            _seg((0, 0), (1, 0)),
            _seg((2, 0), (3, 0)),
            _seg((100, 0), (101, 0)),
        ]

        tour = optimizer.optimize(segments)

        first = tour.merges[0]
        assert (first.node, first.neighbor) == (2, 1)
        assert first.distance == pytest.approx(97.0**2)
        assert (first.node_back, first.neighbor_back) == (False, True)
        assert len(tour.merges) == 2
        assert tour.segments == segments
        assert tour.start_gap == pytest.approx(101.0)

    def test_touching_segments_merge_in_pool_order(self, optimizer: TourOptimizer) -> None:
        """Test equal distances never merge a chain with itself and keep pool order."""
        segments = [_seg((0, 0), (1, 0)), _seg((1, 0), (2, 0)), _seg((2, 0), (3, 0))]

        tour = optimizer.optimize(segments)

        steps = [(m.node, m.neighbor, m.distance) for m in tour.merges]
        assert steps == [(0, 1, 0.0), (0, 2, 0.0)]
        assert all(m.node != m.neighbor for m in tour.merges)
        assert tour.order == [ChainEntry(0), ChainEntry(1), ChainEntry(2)]

    def test_segment_reversed_when_closer(self, optimizer: TourOptimizer) -> None:
        """Test a segment is stitched backwards when that shortens the jump."""
        segments = [_seg((0, 0), (10, 0)), _seg((20, 0), (11, 0))]

        tour = optimizer.optimize(segments)

        assert tour.order == [ChainEntry(0), ChainEntry(1, reversed=True)]
        assert tour.segments[1] == segments[1].reversed()
        assert jump_distance(tour.segments) == pytest.approx(1.0)

    def test_every_segment_visited_once(self, optimizer: TourOptimizer) -> None:
        """Test the tour is a permutation of the input, up to direction."""
        segments = [
            _seg((x * 7 % 23, x * 13 % 17), (x * 7 % 23 + 1, x * 13 % 17 + 2))
            for x in range(12)
        ]

        tour = optimizer.optimize(segments)

        assert sorted(e.index for e in tour.order) == list(range(12))
        for entry, segment in zip(tour.order, tour.segments):
            original = segments[entry.index]
            assert segment == (original.reversed() if entry.reversed else original)
        assert len(tour.merges) == 11

    def test_jumps_reduced(self, optimizer: TourOptimizer) -> None:
        """Test optimization shortens the total jump distance."""
        segments = [_seg((x, 0), (x + 1, 0)) for x in (0, 50, 10, 40, 20, 30)]

        tour = optimizer.optimize(segments)

        assert jump_distance(tour.segments) < jump_distance(segments)
        assert jump_distance(tour.segments) == pytest.approx(45.0)


class TestJumpDistance:
    """Tests for jump distance measurement."""

    def test_jump_distance(self) -> None:
        """Test travel is summed between consecutive segments only."""
        segments = [_seg((0, 0), (1, 0)), _seg((4, 4), (9, 9)), _seg((9, 9), (0, 0))]
        assert jump_distance(segments) == pytest.approx(5.0)
        assert jump_distance(segments[:1]) == 0.0
