"""Domain models for threadpath.

This module contains the value types shared by every processing stage.
All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Free of any input or output format details

Key classes:
- Point: A 2D point/vector
- Transform: A 2D affine transform
- StitchSegment: A continuous run of stitches
- ChainEntry: A possibly reversed segment reference in a merged chain
- MergeStep: Record of one tour optimizer merge
- StitchCommand: A format-independent machine command
- Shape: A stroked input path
- WireSegment: A straight wire with pad connection flags
"""

from threadpath.domain.stitch import (
    ChainEntry,
    CommandType,
    MergeStep,
    Shape,
    StitchCommand,
    StitchSegment,
    WireSegment,
)
from threadpath.domain.vector import Point, Transform

__all__: list[str] = [
    # Enums
    "CommandType",
    # Core types
    "Point",
    "Transform",
    "StitchSegment",
    "ChainEntry",
    "MergeStep",
    "StitchCommand",
    "Shape",
    "WireSegment",
]
