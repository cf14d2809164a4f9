"""Reference shape types, factory and WKT writer."""

from .shape import (
    LineString,
    MultiPoint,
    Point,
    Polygon,
    Rectangle,
    ShapeCollection,
    ShapeKind,
)
from .factory import ExtendedShapeFactory, ShapeFactory, SimpleShapeFactory
from .encoder import WKTWriter

__all__ = [
    "LineString",
    "MultiPoint",
    "Point",
    "Polygon",
    "Rectangle",
    "ShapeCollection",
    "ShapeKind",
    "ExtendedShapeFactory",
    "ShapeFactory",
    "SimpleShapeFactory",
    "WKTWriter",
]
