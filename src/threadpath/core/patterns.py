"""Stitch pattern construction.

This module turns sampled point runs into the physical stitch patterns:
- Junction stars: small closed septagrams tacking thread onto a pad or joint
- Single stitch: the points as they are, optionally bracketed by stars
- Triple stitch: forward, backward and forward again for strength or
  three times the conductivity of a conductive thread

All functions are pure and return new lists.
"""

import math
from collections.abc import Sequence

from threadpath.domain import Point

STAR_VERTICES = 7

# Each vertex skips one neighbour, drawing a {7/2} star.
STAR_ANGLE_STEP = 2.0 * math.pi * 2.0 / STAR_VERTICES


def make_star(center: Point, radius: float) -> list[Point]:
    """Create a closed junction star around a point.

    Args:
        center: Star center
        radius: Distance of every vertex from the center

    Returns:
        Eight points: seven vertices, then the first vertex again

    Examples:
        >>> star = make_star(Point(0.0, 0.0), 1.0)
        >>> len(star), star[0] == star[-1]
        (8, True)
    """
    points = [
        Point(
            center.x + radius * math.cos(STAR_ANGLE_STEP * i),
            center.y + radius * math.sin(STAR_ANGLE_STEP * i),
        )
        for i in range(STAR_VERTICES)
    ]
    points.append(points[0])
    return points


def single_stitch(
    points: Sequence[Point],
    star_size: float,
    start_star: bool = False,
    end_star: bool = False,
) -> list[Point]:
    """Build a single-pass stitch run.

    Without stars the points are passed through unchanged, whatever their
    number. With stars, paths of one point or less produce nothing.

    Args:
        points: Sampled points along the path
        star_size: Star diameter
        start_star: Add a star before the first point
        end_star: Add a star after the last point

    Returns:
        Stitch points, or an empty list for a degenerate starred path
    """
    if not (start_star or end_star):
        return list(points)

    if len(points) <= 1:
        return []

    stitches: list[Point] = []
    if start_star:
        stitches.extend(make_star(points[0], 0.5 * star_size))
    stitches.extend(points)
    if end_star:
        stitches.extend(make_star(points[-1], 0.5 * star_size))
    return stitches


def triple_stitch(
    points: Sequence[Point],
    star_size: float,
    start_star: bool = False,
    end_star: bool = False,
) -> list[Point]:
    """Build a reinforced forward-backward-forward stitch run.

    Stars are sewn where the path turns around: the end star after the
    first pass, the start star after the second.

    Args:
        points: Sampled points along the path
        star_size: Star diameter
        start_star: Add a star at the first point
        end_star: Add a star at the last point

    Returns:
        Stitch points, or an empty list when fewer than two points are given
    """
    if len(points) <= 1:
        return []

    stitches: list[Point] = list(points)
    if end_star:
        stitches.extend(make_star(points[-1], 0.5 * star_size))
    stitches.extend(reversed(points))
    if start_star:
        stitches.extend(make_star(points[0], 0.5 * star_size))
    stitches.extend(points)
    return stitches
