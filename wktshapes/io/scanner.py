"""Character level scanning of WKT text.

Every function here works on a ParseSession: the lower-cased input and a
read cursor that only ever moves forward. Functions that consume a token
also skip the whitespace following it, so callers always find the cursor
on the next significant character (or at the end of input).
"""

from dataclasses import dataclass

from .errors import MalformedInput

NUMBER_CHARS = frozenset("0123456789.-+e")


@dataclass
class ParseSession:
    """Mutable state of a single parse call."""
    text: str
    offset: int = 0
    # Nesting level of the shape being read; 0 for top-level input
    depth: int = 0

    @classmethod
    def start(cls, raw: str, depth: int = 0) -> "ParseSession":
        """Create a session over the lower-cased input."""
        return cls(raw.lower(), depth=depth)

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self.offset >= len(self.text)

    def peek(self) -> str:
        """The character at the cursor, or '' at the end of input."""
        if self.offset >= len(self.text):
            return ""
        return self.text[self.offset]


def skip_whitespace(session: ParseSession) -> None:
    """Move to the next non-whitespace character (no-op if already there)."""
    text = session.text
    offset = session.offset
    while offset < len(text) and text[offset].isspace():
        offset += 1
    session.offset = offset


def read_word(session: ParseSession) -> str:
    """
    Read a run of letters starting at the cursor.

    Returns:
        The (lower-cased) word, never empty

    Raises:
        MalformedInput: If the cursor is not on a letter
    """
    text = session.text
    start = session.offset
    end = start
    while end < len(text) and text[end].isalpha():
        end += 1
    if end == start:
        raise MalformedInput("word expected", start)
    session.offset = end
    skip_whitespace(session)
    return text[start:end]


def read_number(session: ParseSession) -> float:
    """
    Read a decimal number with optional sign, fraction and exponent.

    The scan is greedy over ASCII digits and ``.-+e``; whether the run is a
    valid literal is only decided afterwards, so ``1-2`` fails as a whole
    rather than being read as two numbers.

    Raises:
        MalformedInput: If no number characters are present or the run is
            not a valid literal
    """
    text = session.text
    start = session.offset
    end = start
    while end < len(text) and text[end] in NUMBER_CHARS:
        end += 1
    if end == start:
        raise MalformedInput("number expected", start)
    session.offset = end
    literal = text[start:end]
    try:
        value = float(literal)
    except ValueError:
        raise MalformedInput(f"invalid number literal [{literal}]", end) from None
    skip_whitespace(session)
    return value


def expect(session: ParseSession, expected: str) -> None:
    """
    Consume ``expected`` at the cursor.

    Raises:
        MalformedInput: At end of input or on any other character; the
            cursor is left where it was
    """
    if session.at_end():
        raise MalformedInput(f"expected [{expected}] found end-of-input", session.offset)
    found = session.text[session.offset]
    if found != expected:
        raise MalformedInput(f"expected [{expected}] found [{found}]", session.offset)
    session.offset += 1
    skip_whitespace(session)


def consume_if_present(session: ParseSession, expected: str) -> bool:
    """Consume ``expected`` if it is at the cursor. Returns whether it was."""
    if session.peek() != expected:
        return False
    session.offset += 1
    skip_whitespace(session)
    return True


def read_balanced_span(session: ParseSession) -> str:
    """
    Read the text up to the next ',' or ')' outside any nested parentheses.

    Used to capture a whole sub-shape as raw text so it can be handed to
    another parser. Given ``outer(inner(3, 5))`` with the cursor on the
    ``i``, returns ``inner(3, 5)`` and leaves the cursor on the final
    ``)``. The terminator is not consumed; end of input also terminates.

    Raises:
        MalformedInput: If the input ends inside an open parenthesis
    """
    text = session.text
    start = session.offset
    offset = start
    depth = 0
    while offset < len(text):
        c = text[offset]
        if c == ",":
            if depth == 0:
                break
        elif c == ")":
            if depth == 0:
                break
            depth -= 1
        elif c == "(":
            depth += 1
        offset += 1
    session.offset = offset
    if depth != 0:
        raise MalformedInput("unbalanced parenthesis", offset)
    return text[start:offset]
