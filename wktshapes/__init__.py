"""Extensible Well Known Text (WKT) shape parser."""

from .config import DEFAULT_CONFIG, ParserConfig
from .io import MalformedInput, ShapeRuleRegistry, WKTShapeParser, register_extensions
from .shapes import SimpleShapeFactory, WKTWriter

__all__ = [
    "DEFAULT_CONFIG",
    "ParserConfig",
    "MalformedInput",
    "ShapeRuleRegistry",
    "WKTShapeParser",
    "register_extensions",
    "SimpleShapeFactory",
    "WKTWriter",
]
