"""Cubic Bezier curve with arc-length traversal.

B(t)     = (1-t)^3*p0 + 3*(1-t)^2*t*p1 + 3*(1-t)*t^2*p2 + t^3*p3
dB(t)/dt = 3*(1-t)^2*v1 + 6*(1-t)*t*v2 + 3*t^2*v3,  v1=p1-p0, v2=p2-p1, v3=p3-p2

The curve is divided into equal parameter intervals whose arc lengths are
integrated once with Simpson's rule, so that moving a given distance along
the curve needs no further integration.
"""

from threadpath.domain import Point

DEFAULT_CURVE_SEGMENTS = 32


class CubicBezier:
    """A cubic Bezier curve with a precomputed arc-length table.

    Example:
        curve = CubicBezier(p0, p1, p2, p3)
        t, remaining = curve.advance(0.0, 2.0)
        stitch = curve.curve(t)
    """

    def __init__(
        self,
        p0: Point,
        p1: Point,
        p2: Point,
        p3: Point,
        segments: int = DEFAULT_CURVE_SEGMENTS,
    ) -> None:
        """Initialize the curve and integrate its arc-length table.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            segments: Number of equal parameter intervals in the length table

        Raises:
            ValueError: If segments is not positive
        """
        if segments < 1:
            raise ValueError(f"segments must be positive, got {segments}")

        self.p0 = p0
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.v1 = p1 - p0
        self.v2 = p2 - p1
        self.v3 = p3 - p2
        self._segments = segments
        self._dt = 1.0 / segments

        dt = self._dt
        table: list[float] = []
        left = self.derivative(0.0).norm()
        for i in range(segments):
            t = i * dt
            center = self.derivative(t + 0.5 * dt).norm()
            right = self.derivative(t + dt).norm()
            table.append((dt / 6.0) * (left + 4.0 * center + right))
            left = right
        self._dl = tuple(table)

    @property
    def segments(self) -> int:
        """Number of intervals in the arc-length table."""
        return self._segments

    @property
    def segment_lengths(self) -> tuple[float, ...]:
        """Arc length of each parameter interval."""
        return self._dl

    def curve(self, t: float) -> Point:
        """Point on the curve at parameter ``t`` (not clamped)."""
        s = 1.0 - t
        return (
            (s * s * s) * self.p0
            + (3.0 * s * s * t) * self.p1
            + (3.0 * s * t * t) * self.p2
            + (t * t * t) * self.p3
        )

    def derivative(self, t: float) -> Point:
        """Derivative dB/dt at parameter ``t``."""
        s = 1.0 - t
        return (3.0 * s * s) * self.v1 + (6.0 * s * t) * self.v2 + (3.0 * t * t) * self.v3

    def length(self) -> float:
        """Total arc length of the curve."""
        return sum(self._dl)

    def advance(self, t: float, distance: float) -> tuple[float, float]:
        """Move ``distance`` along the curve starting from parameter ``t``.

        Within each table interval the parameter is assumed to grow linearly
        with arc length.

        Args:
            t: Current parameter, expected in [0, 1)
            distance: Arc length to move forward

        Returns:
            Tuple of (new_t, remaining). ``remaining`` is 0.0 when the
            destination lies on this curve; otherwise ``new_t`` is 1.0 and
            ``remaining`` is the distance left over past the curve end.
            If ``t`` is outside [0, 1) the call is a no-op and returns
            ``(t, distance)`` unchanged.
        """
        if not 0.0 <= t < 1.0:
            return t, distance

        n = self._segments
        i = min(int(t * n), n - 1)

        # restart the walk at the boundary of interval i
        fraction = t * n - i
        remaining = distance + self._dl[i] * fraction

        while i < n:
            dl = self._dl[i]
            if remaining < dl:
                return self._dt * (i + remaining / dl), 0.0
            remaining -= dl
            i += 1

        return 1.0, remaining

    def __repr__(self) -> str:
        return f"CubicBezier({self.p0!r}, {self.p1!r}, {self.p2!r}, {self.p3!r})"
