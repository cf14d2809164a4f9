"""Coordinate and coordinate sequence readers."""

from .scanner import ParseSession, consume_if_present, expect, read_number

Coordinate = tuple[float, float]


def read_coordinate(session: ParseSession) -> Coordinate:
    """
    Read one coordinate.

    Coordinate: number number
    """
    x = read_number(session)
    y = read_number(session)
    return (x, y)


def read_coordinate_sequence(session: ParseSession) -> list[Coordinate]:
    """
    Read a parenthesised, comma separated list of coordinates.

    CoordinateSequence: '(' coordinate (',' coordinate)* ')'

    Returns:
        The coordinates in input order; never empty
    """
    expect(session, "(")
    sequence = []
    while True:
        sequence.append(read_coordinate(session))
        if not consume_if_present(session, ","):
            break
    expect(session, ")")
    return sequence
