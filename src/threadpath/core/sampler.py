"""Constant-pitch stitch sampling along Bezier chains and straight lines.

All functions are pure and stateless.
"""

from collections.abc import Sequence

from threadpath.core.bezier import DEFAULT_CURVE_SEGMENTS, CubicBezier
from threadpath.domain import Point
from threadpath.exceptions import CurveError

DEFAULT_TAIL_SNAP_RATIO = 0.25


def control_points_from_flat(coords: Sequence[float]) -> list[Point]:
    """Group a flat ``[x0, y0, x1, y1, ...]`` array into points.

    Args:
        coords: Interleaved x/y coordinates

    Returns:
        List of points

    Raises:
        CurveError: If the array has an odd number of values
    """
    if len(coords) % 2:
        raise CurveError(f"Coordinate array has odd length {len(coords)}")
    return [Point(float(coords[i]), float(coords[i + 1])) for i in range(0, len(coords), 2)]


def line_control_points(start: Point, end: Point) -> list[Point]:
    """Cubic control points of a straight line, evenly spaced."""
    step = (end - start) / 3.0
    return [start, start + step, start + 2.0 * step, end]


def points_on_bezier(
    control_points: Sequence[Point],
    pitch: float,
    segments: int = DEFAULT_CURVE_SEGMENTS,
    tail_snap_ratio: float = DEFAULT_TAIL_SNAP_RATIO,
) -> list[Point]:
    """Place a stitch every ``pitch`` along a chain of cubic Bezier curves.

    The chain is ``[p0, c1, c2, p1, c1, c2, p2, ...]`` with curves sharing
    end points. Distance not consumed at the end of one curve is carried
    into the next, so spacing stays continuous across curve boundaries.
    The first stitch is the chain start. If the distance from the last
    stitch to the true end is shorter than ``tail_snap_ratio * pitch``, the
    last stitch is moved onto the end point; otherwise the end point is
    appended as one more stitch. The first stitch is never moved.

    Args:
        control_points: Flattened control point chain (3k + 1 points)
        pitch: Stitch spacing along the curve
        segments: Arc-length table resolution of each curve
        tail_snap_ratio: Fraction of pitch under which the tail is snapped

    Returns:
        Stitch points along the chain

    Raises:
        ValueError: If pitch is not positive
        CurveError: If the chain does not have 3k + 1 points (k >= 1)
    """
    if pitch <= 0.0:
        raise ValueError(f"pitch must be positive, got {pitch}")
    n = len(control_points)
    if n < 4 or (n - 1) % 3:
        raise CurveError(f"Expected 3k+1 control points (k >= 1), got {n}")

    points: list[Point] = []
    carryover = 0.0
    last = control_points[-1]

    for i in range(0, n - 1, 3):
        curve = CubicBezier(*control_points[i : i + 4], segments=segments)

        t, carryover = curve.advance(0.0, carryover)
        while t < 1.0:
            points.append(curve.curve(t))
            t, carryover = curve.advance(t, pitch)

    # carryover is the overshoot past the end. The snap test uses the tail left
    # between the last stitch and the end, not the overshoot: comparing the
    # overshoot would snap long tails and keep short ones.
    tail = pitch - carryover
    if len(points) > 1 and tail < tail_snap_ratio * pitch:
        points[-1] = last
    else:
        points.append(last)

    return points


def points_on_line(
    start: Point,
    end: Point,
    pitch: float,
    segments: int = DEFAULT_CURVE_SEGMENTS,
    tail_snap_ratio: float = DEFAULT_TAIL_SNAP_RATIO,
) -> list[Point]:
    """Place a stitch every ``pitch`` along a straight line.

    Args:
        start: Line start
        end: Line end
        pitch: Stitch spacing
        segments: Arc-length table resolution
        tail_snap_ratio: Fraction of pitch under which the tail is snapped

    Returns:
        Stitch points from start to end
    """
    return points_on_bezier(
        line_control_points(start, end),
        pitch,
        segments=segments,
        tail_snap_ratio=tail_snap_ratio,
    )
