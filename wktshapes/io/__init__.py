"""WKT reading: scanner, coordinate readers, rule registry and parser."""

from .errors import MalformedInput
from .scanner import (
    ParseSession,
    consume_if_present,
    expect,
    read_balanced_span,
    read_number,
    read_word,
    skip_whitespace,
)
from .coordinates import read_coordinate, read_coordinate_sequence
from .rules import BUILTIN_RULES, ShapeRuleRegistry, parse_envelope, parse_point
from .extensions import EXTENSION_RULES, register_extensions
from .parser import WKTShapeParser

__all__ = [
    "MalformedInput",
    "ParseSession",
    "consume_if_present",
    "expect",
    "read_balanced_span",
    "read_number",
    "read_word",
    "skip_whitespace",
    "read_coordinate",
    "read_coordinate_sequence",
    "BUILTIN_RULES",
    "ShapeRuleRegistry",
    "parse_envelope",
    "parse_point",
    "EXTENSION_RULES",
    "register_extensions",
    "WKTShapeParser",
]
