"""Fritzing sketch reader for PCB wires.

This module extracts the routed PCB wires of a Fritzing sketch (``.fz``
XML, or a zipped ``.fzz`` bundle) as straight WireSegments in millimetres.

A wire's PCB geometry is an anchor ``(x, y)`` plus two endpoint offsets
``(x1, y1)`` and ``(x2, y2)``. An endpoint is marked as a pad connection
when its connector connects to any instance that is not itself a wire.
Ratsnest lines are unrouted and are skipped.
"""

import xml.etree.ElementTree as ET
import zipfile
from pathlib import Path

from threadpath.domain import Point, Transform, WireSegment
from threadpath.exceptions import InputFormatError, InputLoadError

WIRE_MODULE_ID = "WireModuleID"
RATSNEST_FLAG = 16
MM_PER_INCH = 25.4

# Connector ids of a wire's first and second endpoint
START_CONNECTOR = "connector0"
END_CONNECTOR = "connector1"


def _float_attr(element: ET.Element, name: str) -> float:
    value = element.get(name)
    if value is None:
        return 0.0
    return float(value)


class FritzingReader:
    """Loads PCB wires from a Fritzing sketch.

    Example:
        reader = FritzingReader(dpi=90.0)
        for wire in reader.read(Path("board.fzz")):
            print(wire.start, wire.end, wire.start_is_pad)
    """

    def __init__(self, dpi: float = 90.0) -> None:
        """Initialize the reader.

        Args:
            dpi: Sketch units per inch
        """
        self.dpi = dpi
        self._transform = Transform.scaling(MM_PER_INCH / dpi)

    def read(self, sketch_path: Path) -> list[WireSegment]:
        """Read PCB wires from a ``.fz`` or ``.fzz`` file.

        Args:
            sketch_path: Path to the sketch

        Returns:
            Wires in document order

        Raises:
            FileNotFoundError: If the file does not exist
            InputLoadError: If the file is not valid XML or not a valid bundle
            InputFormatError: If the document is not a Fritzing sketch
        """
        if not sketch_path.exists():
            raise FileNotFoundError(f"Fritzing sketch not found: {sketch_path}")

        try:
            if sketch_path.suffix.lower() == ".fzz":
                root = self._load_bundle(sketch_path)
            else:
                root = ET.parse(sketch_path).getroot()
        except (ET.ParseError, zipfile.BadZipFile, KeyError) as e:
            raise InputLoadError(str(sketch_path), str(e)) from e

        if root.tag != "module":
            raise InputFormatError(str(sketch_path), f"unexpected root element <{root.tag}>")
        try:
            return self.parse(root)
        except ValueError as e:
            raise InputFormatError(str(sketch_path), str(e)) from e

    def _load_bundle(self, bundle_path: Path) -> ET.Element:
        with zipfile.ZipFile(bundle_path) as bundle:
            names = [n for n in bundle.namelist() if n.lower().endswith(".fz")]
            if not names:
                raise KeyError("no .fz sketch inside bundle")
            with bundle.open(names[0]) as stream:
                return ET.parse(stream).getroot()

    def parse(self, root: ET.Element) -> list[WireSegment]:
        """Extract wires from a parsed ``<module>`` element."""
        instances = root.findall("./instances/instance")
        module_by_index = {
            inst.get("modelIndex"): inst.get("moduleIdRef") for inst in instances
        }

        wires: list[WireSegment] = []
        for instance in instances:
            if instance.get("moduleIdRef") != WIRE_MODULE_ID:
                continue
            view = instance.find("./views/pcbView")
            if view is None:
                continue
            geometry = view.find("geometry")
            if geometry is None:
                continue
            if int(_float_attr(geometry, "wireFlags")) & RATSNEST_FLAG:
                continue

            x = _float_attr(geometry, "x")
            y = _float_attr(geometry, "y")
            start = Point(x + _float_attr(geometry, "x1"), y + _float_attr(geometry, "y1"))
            end = Point(x + _float_attr(geometry, "x2"), y + _float_attr(geometry, "y2"))

            pads = self._pad_connectors(view, module_by_index)
            title = instance.findtext("title") or instance.get("modelIndex", "")
            wires.append(
                WireSegment(
                    start=self._transform.apply(start),
                    end=self._transform.apply(end),
                    start_is_pad=START_CONNECTOR in pads,
                    end_is_pad=END_CONNECTOR in pads,
                    wire_id=title,
                )
            )
        return wires

    def _pad_connectors(
        self, view: ET.Element, module_by_index: dict[str | None, str | None]
    ) -> set[str]:
        """Connector ids of the view that touch a non-wire instance."""
        pads: set[str] = set()
        for connector in view.findall("./connectors/connector"):
            for connect in connector.findall("./connects/connect"):
                module = module_by_index.get(connect.get("modelIndex"))
                if module is not None and module != WIRE_MODULE_ID:
                    pads.add(connector.get("connectorId", ""))
        return pads
