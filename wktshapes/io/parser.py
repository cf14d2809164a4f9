"""WKT shape parsing entry points."""

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, ParserConfig
from .errors import MalformedInput
from .extensions import register_extensions
from .rules import ShapeRuleRegistry
from .scanner import ParseSession, read_word, skip_whitespace

logger = logging.getLogger(__name__)


class WKTShapeParser:
    """
    An extensible parser for Well Known Text (WKT).

    Shapes are built by the bound factory; which keywords are understood
    is decided by the rule registry. Each call works on its own
    ParseSession, so one parser can be reused and shared, provided its
    registry is not modified while parses are running.
    """

    def __init__(
        self,
        factory,
        registry: Optional[ShapeRuleRegistry] = None,
        config: Optional[ParserConfig] = None,
    ):
        self.factory = factory
        self.registry = registry if registry is not None else ShapeRuleRegistry()
        self.config = config or DEFAULT_CONFIG

    @classmethod
    def with_extensions(cls, factory, config: Optional[ParserConfig] = None) -> "WKTShapeParser":
        """Create a parser that also understands the extension shape types."""
        registry = ShapeRuleRegistry()
        register_extensions(registry)
        return cls(factory, registry, config)

    def parse(self, wkt: str):
        """
        Parse a WKT string into a shape.

        Args:
            wkt: The WKT text; keyword case and whitespace do not matter

        Returns:
            The shape made by the factory, never None

        Raises:
            MalformedInput: If the shape type is unknown or the text is
                not a well formed definition of it
        """
        return self.parse_member(wkt, 0)

    def parse_member(self, wkt: str, depth: int):
        """
        Parse a shape nested ``depth`` levels inside another one.

        Used by rules that delegate sub-shape text back to the parser; the
        depth is carried on the new session so nested rules can enforce
        ParserConfig.max_nesting. Otherwise behaves like parse().
        """
        session = ParseSession.start(wkt, depth)
        shape = self._parse_session(session)
        if shape is not None:
            return shape
        snippet = self.config.shorten(wkt)
        logger.debug("Unrecognized shape definition, stopped at offset %d", session.offset)
        raise MalformedInput(f"unknown shape definition [{snippet}]", session.offset)

    def parse_if_supported(self, wkt: str):
        """
        Parse a WKT string, or return None if it is not a shape we know.

        Blank text, text not starting with a letter and unregistered
        keywords give None. Once a keyword has matched, any problem with
        the rest of the text is an error.

        Raises:
            MalformedInput: If the text is not a well formed definition of
                a known shape
        """
        return self._parse_session(ParseSession.start(wkt))

    def _parse_session(self, session: ParseSession):
        skip_whitespace(session)
        if session.at_end() or not session.peek().isalpha():
            return None
        keyword = read_word(session)
        shape = self.registry.route(keyword, session, self.factory, self)
        if shape is not None and not session.at_end():
            raise MalformedInput("end of shape expected", session.offset)
        return shape

    def validate(self, wkt: str) -> tuple[bool, Optional[str]]:
        """
        Check a WKT string without keeping the result.

        Returns:
            A tuple of (is_valid, error_message)
        """
        try:
            self.parse(wkt)
            return True, None
        except ValueError as e:
            return False, str(e)

    def __repr__(self) -> str:
        return f"WKTShapeParser({type(self.factory).__name__}, {self.registry.keywords})"
