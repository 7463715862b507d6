"""SVG reader for stroked paths.

This module loads SVG documents with svgpathtools and converts every
visible path element into a Shape holding cubic Bezier control point
chains in millimetres.

Lines and quadratic curves are raised to cubic curves, elliptical arcs are
approximated by cubic pieces, and each continuous subpath becomes its own
chain. Path and group transforms are applied; inherited styles are not
resolved.
"""

import math
import re
from pathlib import Path
from typing import Any

import svgpathtools

from threadpath.domain import Point, Shape, Transform
from threadpath.exceptions import InputLoadError

MM_PER_INCH = 25.4

# Cubic pieces per elliptical arc
ARC_PIECES = 4

_UNIT_TO_MM = {
    "mm": 1.0,
    "cm": 10.0,
    "in": MM_PER_INCH,
    "pt": MM_PER_INCH / 72.0,
    "pc": MM_PER_INCH / 6.0,
}

_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-z%]*)\s*$")


def _to_point(z: complex) -> Point:
    return Point(z.real, z.imag)


def parse_length(value: str | None, dpi: float) -> float | None:
    """Parse an SVG length into millimetres.

    Unitless and ``px`` values are converted with ``dpi``. Percentages
    and unparseable values give None.
    """
    if not value:
        return None
    match = _LENGTH_RE.match(value)
    if match is None:
        return None
    number = float(match.group(1))
    unit = match.group(2)
    if unit in ("", "px"):
        return number * MM_PER_INCH / dpi
    factor = _UNIT_TO_MM.get(unit)
    return number * factor if factor is not None else None


def parse_style(attributes: dict[str, str]) -> dict[str, str]:
    """Merge presentation attributes with the inline ``style`` declarations.

    Inline style declarations take precedence over attributes.
    """
    merged = {k: v for k, v in attributes.items() if k != "style"}
    for declaration in attributes.get("style", "").split(";"):
        if ":" not in declaration:
            continue
        key, value = declaration.split(":", 1)
        merged[key.strip()] = value.strip()
    return merged


def document_transform(svg_attributes: dict[str, Any], dpi: float) -> Transform:
    """Transform from SVG user units to millimetres.

    Uses the document ``width``/``height`` together with its ``viewBox``
    when both are present; otherwise user units are pixels at ``dpi``.
    """
    px_scale = MM_PER_INCH / dpi
    view_box = svg_attributes.get("viewBox")
    if not view_box:
        return Transform.scaling(px_scale)

    try:
        vb_x, vb_y, vb_w, vb_h = (float(v) for v in view_box.replace(",", " ").split())
    except ValueError:
        return Transform.scaling(px_scale)
    if vb_w <= 0 or vb_h <= 0:
        return Transform.scaling(px_scale)

    width = parse_length(svg_attributes.get("width"), dpi)
    height = parse_length(svg_attributes.get("height"), dpi)
    sx = width / vb_w if width else px_scale
    sy = height / vb_h if height else sx
    return Transform.scaling(sx, sy) @ Transform.translation(-vb_x, -vb_y)


def segment_control_points(segment: Any) -> list[Point]:
    """Cubic control points ``[p0, c1, c2, p3, ...]`` for one path segment.

    Raises:
        TypeError: If the segment type is unknown
    """
    if isinstance(segment, svgpathtools.CubicBezier):
        return [_to_point(z) for z in segment.bpoints()]

    if isinstance(segment, svgpathtools.Line):
        start, end = _to_point(segment.start), _to_point(segment.end)
        step = (end - start) / 3.0
        return [start, start + step, start + 2.0 * step, end]

    if isinstance(segment, svgpathtools.QuadraticBezier):
        p0, c, p2 = (_to_point(z) for z in segment.bpoints())
        return [p0, p0 + (c - p0) * (2.0 / 3.0), p2 + (c - p2) * (2.0 / 3.0), p2]

    if isinstance(segment, svgpathtools.Arc):
        # Hermite interpolation of each arc piece
        points = [_to_point(segment.point(0.0))]
        step = 1.0 / ARC_PIECES
        for k in range(ARC_PIECES):
            t0, t1 = k * step, (k + 1) * step
            start = segment.point(t0)
            end = segment.point(t1)
            d0 = segment.derivative(t0) * (step / 3.0)
            d1 = segment.derivative(t1) * (step / 3.0)
            points.extend([_to_point(start + d0), _to_point(end - d1), _to_point(end)])
        return points

    raise TypeError(f"Unsupported path segment type: {type(segment).__name__}")


def path_to_chains(path: Any) -> list[list[Point]]:
    """Split an svgpathtools path into continuous control point chains."""
    chains: list[list[Point]] = []
    for subpath in path.continuous_subpaths():
        chain: list[Point] = []
        for segment in subpath:
            if segment.length() == 0:
                continue
            points = segment_control_points(segment)
            chain.extend(points if not chain else points[1:])
        if chain:
            chains.append(chain)
    return chains


def _parse_number(value: str | None, default: float) -> float:
    match = _LENGTH_RE.match(value) if value else None
    return float(match.group(1)) if match else default


def _as_transform(matrix: Any) -> Transform:
    """Transform from a 3x3 homogeneous matrix as svgpathtools builds it."""
    return Transform(
        a=float(matrix[0][0]),
        b=float(matrix[1][0]),
        c=float(matrix[0][1]),
        d=float(matrix[1][1]),
        e=float(matrix[0][2]),
        f=float(matrix[1][2]),
    )


def _is_visible(style: dict[str, str]) -> bool:
    return style.get("display") != "none" and style.get("visibility") not in ("hidden", "collapse")


def _is_color(paint: str | None) -> bool:
    if paint is None:
        return False
    paint = paint.strip()
    return paint not in ("", "none", "transparent") and not paint.startswith("url(")


class SVGReader:
    """Loads stroked shapes from an SVG file.

    Example:
        reader = SVGReader(dpi=90.0)
        for shape in reader.read(Path("board.svg")):
            print(shape.shape_id, len(shape.subpaths))
    """

    def __init__(self, dpi: float = 90.0) -> None:
        """Initialize the reader.

        Args:
            dpi: User units per inch when the document has no physical size
        """
        self.dpi = dpi

    def read(self, svg_path: Path) -> list[Shape]:
        """Read all visible shapes from an SVG file.

        Each path's own ``transform`` and those of its enclosing groups are
        applied before the document is scaled to millimetres.

        Args:
            svg_path: Path to the SVG file

        Returns:
            Shapes with coordinates in millimetres

        Raises:
            FileNotFoundError: If the file does not exist
            InputLoadError: If the file cannot be parsed
        """
        if not svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {svg_path}")

        try:
            document = svgpathtools.Document(str(svg_path))
            flattened = document.flatten_all_paths()
        except Exception as e:
            raise InputLoadError(str(svg_path), str(e)) from e

        transform = document_transform(dict(document.root.attrib), self.dpi)
        shapes: list[Shape] = []
        for item in flattened:
            style = parse_style(dict(item.element.attrib))
            if not _is_visible(style):
                continue
            stroke_scale = (transform @ _as_transform(item.transform)).scale_factor()
            shapes.append(self._make_shape(item.path, style, transform, stroke_scale))
        return shapes

    def _make_shape(
        self, path: Any, style: dict[str, str], transform: Transform, stroke_scale: float
    ) -> Shape:
        stroke_width = _parse_number(style.get("stroke-width"), default=1.0)

        # path coordinates already carry the element transforms
        chains = [transform.apply_all(chain) for chain in path_to_chains(path)]
        return Shape(
            shape_id=style.get("id", ""),
            subpaths=chains,
            stroke_width=math.fabs(stroke_width) * stroke_scale,
            has_stroke=_is_color(style.get("stroke")),
            has_fill=_is_color(style.get("fill", "black")),
        )
