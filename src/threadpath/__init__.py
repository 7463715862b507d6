"""Threadpath - Convert vector drawings into embroidery stitch paths.

Threadpath is a CLI tool that turns stroked SVG paths and Fritzing PCB wire
lists into machine embroidery files. Paths are sampled at a constant stitch
pitch, stitched as single or reinforced triple runs, decorated with junction
stars where conductive thread meets a pad, and finally reordered so that the
needle travels as little as possible between segments.

Example:
    $ threadpath circuit.svg circuit.pes --mode fritzing09

This will create circuit.pes with one continuous, jump-minimized stitch path.
"""

__version__ = "0.1.0"
__author__ = "Threadpath contributors"

__all__ = ["__author__", "__version__"]
