"""Reference shape value types produced by SimpleShapeFactory."""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

Coordinate = tuple[float, float]


class ShapeKind(Enum):
    """Kinds of shape the reference factory can build, by WKT keyword."""
    POINT = "POINT"
    ENVELOPE = "ENVELOPE"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    MULTIPOINT = "MULTIPOINT"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"


def _bounds_of(coords: np.ndarray) -> tuple[float, float, float, float]:
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return (float(min_x), float(min_y), float(max_x), float(max_y))


@dataclass(frozen=True)
class Point:
    """A single (x, y) position."""
    x: float
    y: float

    kind = ShapeKind.POINT

    @property
    def coords(self) -> tuple[Coordinate, ...]:
        return ((self.x, self.y),)

    def coords_array(self) -> np.ndarray:
        return np.array(self.coords, dtype=float)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)"""
        return (self.x, self.y, self.x, self.y)


@dataclass(frozen=True)
class Rectangle:
    """An axis aligned rectangle."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    kind = ShapeKind.ENVELOPE

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)"""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class LineString:
    """An ordered path through two or more coordinates."""
    coords: tuple[Coordinate, ...]

    kind = ShapeKind.LINESTRING

    @property
    def num_coords(self) -> int:
        return len(self.coords)

    def coords_array(self) -> np.ndarray:
        """The coordinates as an (n, 2) float array."""
        return np.array(self.coords, dtype=float)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return _bounds_of(self.coords_array())

    def is_closed(self) -> bool:
        """Check if the first and last coordinates coincide."""
        return self.coords[0] == self.coords[-1]


@dataclass(frozen=True)
class Polygon:
    """A shell ring with zero or more hole rings."""
    shell: LineString
    holes: tuple[LineString, ...] = field(default_factory=tuple)

    kind = ShapeKind.POLYGON

    @property
    def rings(self) -> tuple[LineString, ...]:
        return (self.shell,) + self.holes

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        # Holes lie inside the shell
        return self.shell.bounds


@dataclass(frozen=True)
class MultiPoint:
    """An unordered set of points kept in input order."""
    points: tuple[Point, ...]

    kind = ShapeKind.MULTIPOINT

    def coords_array(self) -> np.ndarray:
        return np.array([(p.x, p.y) for p in self.points], dtype=float)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return _bounds_of(self.coords_array())


@dataclass(frozen=True)
class ShapeCollection:
    """A heterogeneous collection of shapes."""
    shapes: tuple[object, ...]

    kind = ShapeKind.GEOMETRYCOLLECTION

    def __post_init__(self):
        """Validate the collection."""
        if not self.shapes:
            raise ValueError("A shape collection needs at least one member")

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        corners = np.array([s.bounds for s in self.shapes], dtype=float)
        return (
            float(corners[:, 0].min()),
            float(corners[:, 1].min()),
            float(corners[:, 2].max()),
            float(corners[:, 3].max()),
        )
