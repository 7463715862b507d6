"""Tests for cubic Bezier evaluation and arc-length traversal."""

import math

import pytest

from threadpath.core.bezier import CubicBezier
from threadpath.core.sampler import line_control_points
from threadpath.domain import Point

# Control point offset of the usual cubic quarter-circle approximation
KAPPA = 0.5522847498


@pytest.fixture
def line() -> CubicBezier:
    """A straight curve of length 3 along the x axis."""
    return CubicBezier(*line_control_points(Point(0.0, 0.0), Point(3.0, 0.0)))


@pytest.fixture
def quarter_circle() -> CubicBezier:
    """Unit quarter circle from (1, 0) to (0, 1)."""
    return CubicBezier(
        Point(1.0, 0.0), Point(1.0, KAPPA), Point(KAPPA, 1.0), Point(0.0, 1.0)
    )


def _reference_length(curve: CubicBezier, steps: int = 20000) -> float:
    h = 1.0 / steps
    total = curve.derivative(0.0).norm() + curve.derivative(1.0).norm()
    for k in range(1, steps):
        total += (4.0 if k % 2 else 2.0) * curve.derivative(k * h).norm()
    return total * h / 3.0


class TestEvaluation:
    """Tests for point and derivative evaluation."""

    def test_endpoints(self, quarter_circle: CubicBezier) -> None:
        """Test curve passes through its end points."""
        assert quarter_circle.curve(0.0) == Point(1.0, 0.0)
        assert quarter_circle.curve(1.0) == Point(0.0, 1.0)

    def test_midpoint_matches_polynomial(self) -> None:
        """Test Bernstein evaluation against the expanded polynomial."""
        p0, p1, p2, p3 = Point(0, 0), Point(1, 2), Point(3, 3), Point(4, 0)
        curve = CubicBezier(p0, p1, p2, p3)
        t = 0.3
        a = -1 * p0 + 3 * p1 - 3 * p2 + p3
        b = 3 * p0 - 6 * p1 + 3 * p2
        c = -3 * p0 + 3 * p1
        expected = (t**3) * a + (t**2) * b + t * c + p0

        point = curve.curve(t)
        assert point.x == pytest.approx(expected.x)
        assert point.y == pytest.approx(expected.y)

    def test_derivative_matches_finite_difference(self, quarter_circle: CubicBezier) -> None:
        """Test derivative against a central difference."""
        t, h = 0.4, 1e-6
        numeric = (quarter_circle.curve(t + h) - quarter_circle.curve(t - h)) / (2 * h)
        analytic = quarter_circle.derivative(t)
        assert analytic.x == pytest.approx(numeric.x, rel=1e-5)
        assert analytic.y == pytest.approx(numeric.y, rel=1e-5)


class TestArcLength:
    """Tests for the arc-length table."""

    def test_line_length(self, line: CubicBezier) -> None:
        """Test a straight curve measures its chord."""
        assert line.length() == pytest.approx(3.0)

    def test_table_sums_to_length(self, quarter_circle: CubicBezier) -> None:
        """Test the table has one entry per interval and sums to the length."""
        assert len(quarter_circle.segment_lengths) == quarter_circle.segments == 32
        assert sum(quarter_circle.segment_lengths) == pytest.approx(quarter_circle.length())

    def test_quarter_circle_length(self, quarter_circle: CubicBezier) -> None:
        """Test length against a fine Simpson integration."""
        assert quarter_circle.length() == pytest.approx(
            _reference_length(quarter_circle), rel=1e-5
        )
        assert quarter_circle.length() == pytest.approx(math.pi / 2, rel=1e-3)

    def test_custom_resolution(self) -> None:
        """Test the number of table intervals is configurable."""
        curve = CubicBezier(Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0), segments=8)
        assert curve.segments == 8
        assert len(curve.segment_lengths) == 8

    def test_invalid_resolution(self) -> None:
        """Test a non-positive resolution is rejected."""
        with pytest.raises(ValueError):
            CubicBezier(Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0), segments=0)


class TestAdvance:
    """Tests for moving a distance along the curve."""

    def test_advance_within_curve(self, line: CubicBezier) -> None:
        """Test moving one unit along a length-3 line."""
        t, remaining = line.advance(0.0, 1.0)
        assert t == pytest.approx(1.0 / 3.0)
        assert remaining == 0.0
        assert line.curve(t).x == pytest.approx(1.0)

    def test_advance_zero(self, line: CubicBezier) -> None:
        """Test moving zero distance stays in place."""
        assert line.advance(0.0, 0.0) == (0.0, 0.0)

    def test_advance_past_end(self, line: CubicBezier) -> None:
        """Test overshoot is reported as remaining distance."""
        t, remaining = line.advance(0.5, 2.0)
        assert t == 1.0
        assert remaining == pytest.approx(0.5)

    def test_advance_in_steps(self, line: CubicBezier) -> None:
        """Test two half-length steps reach the end with nothing left."""
        t, remaining = line.advance(0.0, 1.5)
        assert t == pytest.approx(0.5)
        assert remaining == 0.0

        t, remaining = line.advance(t, 1.5)
        assert t == pytest.approx(1.0)
        assert remaining == pytest.approx(0.0, abs=1e-9)

    def test_advance_from_mid_interval(self, line: CubicBezier) -> None:
        """Test starting between table boundaries."""
        t, _ = line.advance(0.1, 0.6)
        assert line.curve(t).x == pytest.approx(0.9)

    def test_advance_on_curve_follows_arc_length(self, quarter_circle: CubicBezier) -> None:
        """Test moving half the length lands near the arc midpoint."""
        t, remaining = quarter_circle.advance(0.0, quarter_circle.length() / 2)
        assert remaining == 0.0
        mid = quarter_circle.curve(t)
        assert mid.x == pytest.approx(mid.y, abs=1e-3)

    def test_advance_outside_range_is_noop(self, line: CubicBezier) -> None:
        """Test parameters outside [0, 1) are returned unchanged.

        Questionable no-op: the distance is reported as unconsumed rather
        than rejected. Pinned here so a change is noticed.
        """
        assert line.advance(1.0, 2.0) == (1.0, 2.0)
        assert line.advance(-0.1, 1.0) == (-0.1, 1.0)
