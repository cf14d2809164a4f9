"""Optional shape types, added to a registry with register_extensions().

These rules need an ExtendedShapeFactory. They are not part of the
default registry: POINT and ENVELOPE are the only shapes understood
unless a caller opts in.
"""

import logging

from ..shapes.factory import ExtendedShapeFactory
from .coordinates import read_coordinate, read_coordinate_sequence
from .errors import MalformedInput
from .rules import ShapeRuleRegistry
from .scanner import ParseSession, consume_if_present, expect, read_balanced_span

logger = logging.getLogger(__name__)


def parse_line_string(session: ParseSession, factory: ExtendedShapeFactory, parser=None):
    """
    LineString: 'LINESTRING' CoordinateSequence
    """
    return factory.make_line_string(read_coordinate_sequence(session))


def parse_polygon(session: ParseSession, factory: ExtendedShapeFactory, parser=None):
    """
    Polygon: 'POLYGON' '(' CoordinateSequence (',' CoordinateSequence)* ')'

    The first ring is the shell, any further rings are holes.
    """
    expect(session, "(")
    rings = [read_coordinate_sequence(session)]
    while consume_if_present(session, ","):
        rings.append(read_coordinate_sequence(session))
    expect(session, ")")
    return factory.make_polygon(rings[0], rings[1:])


def parse_multi_point(session: ParseSession, factory: ExtendedShapeFactory, parser=None):
    """
    MultiPoint: 'MULTIPOINT' '(' point (',' point)* ')'

    Both the bare ``(1 2, 3 4)`` and the wrapped ``((1 2), (3 4))``
    spellings are accepted, and may be mixed.
    """
    expect(session, "(")
    coords = []
    while True:
        if consume_if_present(session, "("):
            coords.append(read_coordinate(session))
            expect(session, ")")
        else:
            coords.append(read_coordinate(session))
        if not consume_if_present(session, ","):
            break
    expect(session, ")")
    return factory.make_multi_point(coords)


def parse_geometry_collection(session: ParseSession, factory: ExtendedShapeFactory, parser=None):
    """
    GeometryCollection: 'GEOMETRYCOLLECTION' '(' shape (',' shape)* ')'

    Each member is captured as raw text and handed back to ``parser``, so
    a collection may hold any shape the parser's registry knows,
    including other collections. Members are one level deeper than the
    collection; past the parser's ``max_nesting`` the input is rejected.
    """
    if parser is None:
        raise ValueError("geometrycollection needs a parser to delegate members to")
    expect(session, "(")
    depth = session.depth + 1
    shapes = []
    while True:
        start = session.offset
        if depth > parser.config.max_nesting:
            raise MalformedInput("geometrycollection nested too deeply", start)
        member = read_balanced_span(session)
        try:
            shapes.append(parser.parse_member(member, depth))
        except MalformedInput as e:
            # Report the position within the whole input
            raise MalformedInput(e.message, start + e.offset) from e
        if not consume_if_present(session, ","):
            break
    expect(session, ")")
    logger.debug("Collection with %d members", len(shapes))
    return factory.make_collection(shapes)


EXTENSION_RULES = (
    ("linestring", parse_line_string),
    ("polygon", parse_polygon),
    ("multipoint", parse_multi_point),
    ("geometrycollection", parse_geometry_collection),
)


def register_extensions(registry: ShapeRuleRegistry) -> ShapeRuleRegistry:
    """Add the extension rules to ``registry`` and return it."""
    for keyword, rule in EXTENSION_RULES:
        registry.register(keyword, rule)
    return registry
