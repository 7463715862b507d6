"""Input and output layer for threadpath.

This module handles reading vector drawings and writing embroidery
machine files. It keeps svgpathtools and pyembroidery details out of the
domain models.

Key responsibilities:
- Load stroked SVG paths as cubic Bezier chains in millimetres
- Load routed PCB wires from Fritzing sketches
- Map ordered stitch segments to machine commands
- Write embroidery files in any format pyembroidery supports

Key classes:
- SVGReader: Load shapes from SVG files
- FritzingReader: Load wires from .fz/.fzz sketches
- EmbroideryWriter: Save stitch segments
"""

from threadpath.io.fritzing_reader import FritzingReader
from threadpath.io.svg_reader import SVGReader
from threadpath.io.writer import EmbroideryWriter, plan_commands, writable_extensions

__all__ = [
    "EmbroideryWriter",
    "FritzingReader",
    "SVGReader",
    "plan_commands",
    "writable_extensions",
]
