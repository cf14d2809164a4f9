"""Keyword routing and the built-in grammar rules.

A rule is called with the session positioned just after its keyword (and
any whitespace). It must consume its whole parenthesised argument list,
leave the cursor after the closing ')' and return the shape built by the
factory.
"""

import logging
from typing import Any, Callable, Iterable, Optional

from .coordinates import read_coordinate
from .scanner import ParseSession, expect, read_number

logger = logging.getLogger(__name__)

ShapeRule = Callable[[ParseSession, Any, Any], Any]


def parse_point(session: ParseSession, factory, parser=None):
    """
    Point: 'POINT' '(' coordinate ')'
    """
    expect(session, "(")
    x, y = read_coordinate(session)
    expect(session, ")")
    return factory.make_point(x, y)


def parse_envelope(session: ParseSession, factory, parser=None):
    """
    Envelope: 'ENVELOPE' '(' x1 ',' x2 ',' y2 ',' y1 ')'

    This is the OGC Catalogue Services "CQL" form, not standard WKT. Note
    the max y comes before the min y.
    """
    expect(session, "(")
    x1 = read_number(session)
    expect(session, ",")
    x2 = read_number(session)
    expect(session, ",")
    y2 = read_number(session)
    expect(session, ",")
    y1 = read_number(session)
    expect(session, ")")
    return factory.make_rectangle(x1, x2, y1, y2)


BUILTIN_RULES: tuple[tuple[str, ShapeRule], ...] = (
    ("point", parse_point),
    ("envelope", parse_envelope),
)


class ShapeRuleRegistry:
    """Maps lower-cased shape keywords to the rules that parse them."""

    def __init__(self, rules: Optional[Iterable[tuple[str, ShapeRule]]] = None):
        self._rules: dict[str, ShapeRule] = {}
        for keyword, rule in (BUILTIN_RULES if rules is None else rules):
            self.register(keyword, rule)

    def register(self, keyword: str, rule: ShapeRule) -> None:
        """
        Add a rule, replacing any existing rule for the same keyword.

        Raises:
            ValueError: If the keyword is empty or holds non-letters, since
                the scanner could never produce it
        """
        if not keyword or not keyword.isalpha():
            raise ValueError(f"Shape keyword must be letters only: {keyword!r}")
        key = keyword.lower()
        if key in self._rules:
            logger.debug("Replacing rule for %r", key)
        self._rules[key] = rule

    def unregister(self, keyword: str) -> None:
        """Remove the rule for a keyword. Raises KeyError if there is none."""
        del self._rules[keyword.lower()]

    def get(self, keyword: str) -> Optional[ShapeRule]:
        return self._rules.get(keyword.lower())

    @property
    def keywords(self) -> list[str]:
        """Registered keywords, sorted."""
        return sorted(self._rules)

    def copy(self) -> "ShapeRuleRegistry":
        """Create an independent registry with the same rules."""
        return ShapeRuleRegistry(self._rules.items())

    def route(self, keyword: str, session: ParseSession, factory, parser=None):
        """
        Parse the rest of a shape whose keyword has already been read.

        Returns:
            The shape, or None if no rule is registered for the keyword
        """
        rule = self.get(keyword)
        if rule is None:
            logger.debug("No rule for shape keyword %r", keyword)
            return None
        logger.debug("Dispatching %r at offset %d", keyword, session.offset)
        return rule(session, factory, parser)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.lower() in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ShapeRuleRegistry({self.keywords})"
