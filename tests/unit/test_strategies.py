"""Tests for shape interpretation strategies."""

import pytest

from threadpath.config import InputMode, PatternConfig, SamplerConfig
from threadpath.core.collection import StitchCollection
from threadpath.core.patterns import single_stitch, triple_stitch
from threadpath.core.sampler import line_control_points, points_on_bezier, points_on_line
from threadpath.core.strategies import (
    Fritzing09Strategy,
    NormalStrategy,
    get_strategy,
    stitch_wire,
)
from threadpath.domain import Point, Shape, WireSegment

CHAIN = line_control_points(Point(0, 0), Point(9, 0))


@pytest.fixture
def sampler() -> SamplerConfig:
    return SamplerConfig()


@pytest.fixture
def pattern() -> PatternConfig:
    return PatternConfig()


@pytest.fixture
def collection() -> StitchCollection:
    return StitchCollection(star_size=2.0)


def _shape(shape_id: str = "path1", stroke_width: float = 0.5, has_stroke: bool = True) -> Shape:
    return Shape(
        shape_id=shape_id,
        subpaths=[list(CHAIN)],
        stroke_width=stroke_width,
        has_stroke=has_stroke,
    )


def _points(collection: StitchCollection) -> list[Point]:
    return list(collection.segments[0])


class TestGetStrategy:
    """Tests for strategy selection."""

    def test_modes(self, sampler: SamplerConfig, pattern: PatternConfig) -> None:
        """Test each input mode picks its strategy."""
        assert isinstance(get_strategy(InputMode.NORMAL, sampler, pattern), NormalStrategy)
        assert isinstance(
            get_strategy(InputMode.FRITZING09, sampler, pattern), Fritzing09Strategy
        )


class TestNormalStrategy:
    """Tests for plain drawings."""

    def test_wide_stroke_is_triple(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test strokes at or above the threshold are sewn three times."""
        added = NormalStrategy(sampler, pattern).apply(_shape(stroke_width=0.1), collection)

        assert added == 1
        assert _points(collection) == triple_stitch(points_on_bezier(CHAIN, 2.0), 2.0)

    def test_thin_stroke_is_single(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test hairline strokes are sewn once."""
        NormalStrategy(sampler, pattern).apply(_shape(stroke_width=0.05), collection)
        assert _points(collection) == single_stitch(points_on_bezier(CHAIN, 2.0), 2.0)

    def test_unstroked_shape_skipped(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test shapes without a stroke produce nothing."""
        assert NormalStrategy(sampler, pattern).apply(_shape(has_stroke=False), collection) == 0
        assert collection.is_empty()

    def test_each_subpath_is_a_segment(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test every continuous subpath becomes its own segment."""
        shape = _shape()
        shape.subpaths.append(line_control_points(Point(0, 5), Point(4, 5)))
        assert NormalStrategy(sampler, pattern).apply(shape, collection) == 2
        assert len(collection) == 2


class TestFritzing09Strategy:
    """Tests for Fritzing 0.9 PCB exports."""

    def test_board_outline_skipped(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test the board outline is not stitched."""
        strategy = Fritzing09Strategy(sampler, pattern)
        assert strategy.apply(_shape("boardoutline"), collection) == 0
        assert collection.is_empty()

    def test_connector_uses_finer_pitch(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test connector outlines are reinforced at half pitch without stars."""
        Fritzing09Strategy(sampler, pattern).apply(_shape("connector0pad"), collection)
        assert _points(collection) == triple_stitch(points_on_bezier(CHAIN, 1.0), 2.0)

    def test_wire_gets_stars(
        self, sampler: SamplerConfig, pattern: PatternConfig, collection: StitchCollection
    ) -> None:
        """Test other paths are wires with stars at both ends."""
        Fritzing09Strategy(sampler, pattern).apply(_shape("trace7", 0.01), collection)
        expected = triple_stitch(points_on_bezier(CHAIN, 2.0), 2.0, True, True)
        assert _points(collection) == expected


class TestStitchWire:
    """Tests for Fritzing sketch wires."""

    def test_pad_end_gets_star(self, sampler: SamplerConfig, collection: StitchCollection) -> None:
        """Test only pad ends receive a star."""
        wire = WireSegment(Point(0, 0), Point(9, 0), start_is_pad=True, wire_id="Wire1")

        assert stitch_wire(wire, collection, sampler)

        points = points_on_line(Point(0, 0), Point(9, 0), 2.0)
        assert _points(collection) == triple_stitch(points, 2.0, True, False)
        assert collection.stitch_count() == 3 * len(points) + 8

    def test_zero_length_wire(self, sampler: SamplerConfig, collection: StitchCollection) -> None:
        """Test a wire without length adds nothing."""
        wire = WireSegment(Point(3, 3), Point(3, 3))
        assert stitch_wire(wire, collection, sampler) is False
        assert collection.is_empty()
