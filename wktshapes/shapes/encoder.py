"""WKT encoding of the reference shape types."""

import math
from typing import Iterable

from .shape import Coordinate, LineString, MultiPoint, Point, Polygon, Rectangle, ShapeCollection


class WKTWriter:
    """Writer producing text that WKTShapeParser reads back unchanged."""

    @staticmethod
    def encode(shape) -> str:
        """
        Encode a shape into WKT.

        Args:
            shape: A value built by SimpleShapeFactory

        Returns:
            The canonical WKT string

        Raises:
            ValueError: If the shape type is unknown or holds a
                non-finite coordinate
        """
        if isinstance(shape, Point):
            return f"POINT ({WKTWriter._encode_coord((shape.x, shape.y))})"
        if isinstance(shape, Rectangle):
            # CQL argument order: min x, max x, max y, min y
            values = (shape.min_x, shape.max_x, shape.max_y, shape.min_y)
            return "ENVELOPE (" + ", ".join(WKTWriter._encode_number(v) for v in values) + ")"
        if isinstance(shape, LineString):
            return f"LINESTRING {WKTWriter._encode_sequence(shape.coords)}"
        if isinstance(shape, Polygon):
            rings = ", ".join(WKTWriter._encode_sequence(ring.coords) for ring in shape.rings)
            return f"POLYGON ({rings})"
        if isinstance(shape, MultiPoint):
            return f"MULTIPOINT {WKTWriter._encode_sequence((p.x, p.y) for p in shape.points)}"
        if isinstance(shape, ShapeCollection):
            members = ", ".join(WKTWriter.encode(s) for s in shape.shapes)
            return f"GEOMETRYCOLLECTION ({members})"
        raise ValueError(f"Cannot encode {type(shape).__name__} as WKT")

    @staticmethod
    def _encode_number(value: float) -> str:
        if not math.isfinite(value):
            raise ValueError(f"Cannot encode non-finite number: {value}")
        # repr is the shortest text that reads back to the same float
        return repr(float(value))

    @staticmethod
    def _encode_coord(coord: Coordinate) -> str:
        x, y = coord
        return f"{WKTWriter._encode_number(x)} {WKTWriter._encode_number(y)}"

    @staticmethod
    def _encode_sequence(coords: Iterable[Coordinate]) -> str:
        return "(" + ", ".join(WKTWriter._encode_coord(c) for c in coords) + ")"

    @staticmethod
    def format_for_display(shape) -> str:
        """Format a shape for human-readable display."""
        lines = [f"Type:   {shape.kind.value}", f"WKT:    {WKTWriter.encode(shape)}"]
        min_x, min_y, max_x, max_y = shape.bounds
        lines.append(f"Bounds: x=[{min_x:g}, {max_x:g}] y=[{min_y:g}, {max_y:g}]")
        if isinstance(shape, ShapeCollection):
            lines.append(f"Members: {len(shape)}")
        return "\n".join(lines)
