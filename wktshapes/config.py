"""Parser configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """
    Settings fixed for the lifetime of a WKTShapeParser.

    max_snippet_length bounds how much of the input is echoed back in an
    "unknown shape definition" error; longer input is cut and suffixed
    with ``ellipsis`` so the snippet is exactly max_snippet_length long.

    max_nesting is how many levels deep shapes may be nested inside
    collections; deeper input is rejected as malformed.
    """
    max_snippet_length: int = 128
    ellipsis: str = "..."
    max_nesting: int = 100

    def __post_init__(self):
        if self.max_snippet_length <= len(self.ellipsis):
            raise ValueError(
                f"max_snippet_length must exceed the ellipsis length: {self.max_snippet_length}"
            )
        if self.max_nesting < 0:
            raise ValueError(f"max_nesting must not be negative: {self.max_nesting}")

    def shorten(self, text: str) -> str:
        """Cut text down to max_snippet_length characters."""
        if len(text) <= self.max_snippet_length:
            return text
        return text[: self.max_snippet_length - len(self.ellipsis)] + self.ellipsis


DEFAULT_CONFIG = ParserConfig()
