"""Shape factories: the only way the parser materializes shapes."""

from typing import Any, Protocol, Sequence

from .shape import Coordinate, LineString, MultiPoint, Point, Polygon, Rectangle, ShapeCollection


class ShapeFactory(Protocol):
    """What the built-in POINT and ENVELOPE rules need."""

    def make_point(self, x: float, y: float) -> Any:
        ...

    def make_rectangle(self, min_x: float, max_x: float, min_y: float, max_y: float) -> Any:
        ...


class ExtendedShapeFactory(ShapeFactory, Protocol):
    """What the optional extension rules need on top of ShapeFactory."""

    def make_line_string(self, coords: Sequence[Coordinate]) -> Any:
        ...

    def make_polygon(self, shell: Sequence[Coordinate], holes: Sequence[Sequence[Coordinate]]) -> Any:
        ...

    def make_multi_point(self, coords: Sequence[Coordinate]) -> Any:
        ...

    def make_collection(self, shapes: Sequence[Any]) -> Any:
        ...


class SimpleShapeFactory:
    """Builds the plain value types in wktshapes.shapes.shape."""

    def make_point(self, x: float, y: float) -> Point:
        return Point(x, y)

    def make_rectangle(self, min_x: float, max_x: float, min_y: float, max_y: float) -> Rectangle:
        return Rectangle(min_x, max_x, min_y, max_y)

    def make_line_string(self, coords: Sequence[Coordinate]) -> LineString:
        return LineString(self._freeze(coords))

    def make_polygon(
        self, shell: Sequence[Coordinate], holes: Sequence[Sequence[Coordinate]] = ()
    ) -> Polygon:
        return Polygon(
            LineString(self._freeze(shell)),
            tuple(LineString(self._freeze(hole)) for hole in holes),
        )

    def make_multi_point(self, coords: Sequence[Coordinate]) -> MultiPoint:
        return MultiPoint(tuple(Point(x, y) for x, y in coords))

    def make_collection(self, shapes: Sequence[Any]) -> ShapeCollection:
        return ShapeCollection(tuple(shapes))

    @staticmethod
    def _freeze(coords: Sequence[Coordinate]) -> tuple[Coordinate, ...]:
        return tuple((float(x), float(y)) for x, y in coords)
