"""Vector and affine transform primitives.

This module defines the numeric value types every other layer builds on:
- Point: An immutable 2D vector with arithmetic, dot product and norms
- Transform: An immutable 2D affine map (SVG ``matrix(a b c d e f)`` layout)
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, overload


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or displacement vector) in 2D space.

    Immutable and hashable; equality is by coordinates only.

    Attributes:
        x: X coordinate in millimetres
        y: Y coordinate in millimetres
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Point":
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def square_norm(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Point":
        """Return the unit vector with the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length
        """
        length = self.norm()
        if length == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero-length vector")
        return Point(self.x / length, self.y / length)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Transform:
    """A 2D affine transform.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``, the same layout as
    the SVG ``matrix()`` transform. ``t1 @ t2`` applies ``t2`` first.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> "Transform":
        return cls(e=dx, f=dy)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "Transform":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, angle: float, center: Point | None = None) -> "Transform":
        """Rotation by ``angle`` radians, counter-clockwise, around ``center``."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        rotate = cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)
        if center is None:
            return rotate
        return (
            cls.translation(center.x, center.y)
            @ rotate
            @ cls.translation(-center.x, -center.y)
        )

    @classmethod
    def from_basis(cls, x_axis: Point, y_axis: Point, origin: Point | None = None) -> "Transform":
        """Transform mapping the unit axes onto ``x_axis`` and ``y_axis``."""
        offset = origin if origin is not None else Point(0.0, 0.0)
        return cls(a=x_axis.x, b=x_axis.y, c=y_axis.x, d=y_axis.y, e=offset.x, f=offset.y)

    @overload
    def __matmul__(self, other: "Transform") -> "Transform": ...

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    def __matmul__(self, other: "Transform | Point") -> "Transform | Point":
        if isinstance(other, Point):
            return self.apply(other)
        return Transform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def apply(self, point: Point) -> Point:
        """Map a single point."""
        return Point(
            self.a * point.x + self.c * point.y + self.e,
            self.b * point.x + self.d * point.y + self.f,
        )

    def apply_all(self, points: Iterable[Point]) -> list[Point]:
        """Map a sequence of points."""
        return [self.apply(p) for p in points]

    def scale_factor(self) -> float:
        """Geometric mean scale of the linear part, used to map stroke widths."""
        return math.sqrt(abs(self.a * self.d - self.b * self.c))
