"""Core processing algorithms for threadpath.

This module contains the core algorithms for:

- Curve sampling (arc-length parameterized cubic Bezier traversal)
- Stitch patterns (single, triple and junction star stitches)
- Stitch order optimization (greedy segment merging)
- Shape interpretation strategies (normal and Fritzing 0.9)

The sampling, pattern and optimization code is pure: no I/O, no logging,
no shared state.

Key functions:
- points_on_bezier: Constant-pitch stitch points along a Bezier chain
- points_on_line: Constant-pitch stitch points along a straight line
- make_star: Closed junction star around a point
- single_stitch / triple_stitch: Stitch patterns from sampled points
- jump_distance: Needle-up travel of an ordered segment list

Key classes:
- CubicBezier: Curve evaluation, arc length and distance traversal
- StitchCollection: Incremental segment container
- TourOptimizer: Orders segments into one jump-minimized path
- StitchProcessor: End-to-end conversion orchestrator
"""

from threadpath.core.bezier import CubicBezier
from threadpath.core.collection import StitchCollection
from threadpath.core.optimizer import (
    MergedChain,
    OptimizedTour,
    TourOptimizer,
    jump_distance,
    select_start,
)
from threadpath.core.patterns import make_star, single_stitch, triple_stitch
from threadpath.core.processor import StitchProcessor
from threadpath.core.sampler import (
    control_points_from_flat,
    line_control_points,
    points_on_bezier,
    points_on_line,
)
from threadpath.core.strategies import (
    Fritzing09Strategy,
    NormalStrategy,
    ShapeStrategy,
    get_strategy,
    stitch_wire,
)

__all__ = [
    # Curve classes
    "CubicBezier",
    # Strategy classes
    "Fritzing09Strategy",
    # Optimizer classes
    "MergedChain",
    "NormalStrategy",
    "OptimizedTour",
    "ShapeStrategy",
    # Collection classes
    "StitchCollection",
    # Processor classes
    "StitchProcessor",
    "TourOptimizer",
    # Functions
    "control_points_from_flat",
    "get_strategy",
    "jump_distance",
    "line_control_points",
    "make_star",
    "points_on_bezier",
    "points_on_line",
    "select_start",
    "single_stitch",
    "stitch_wire",
    "triple_stitch",
]
