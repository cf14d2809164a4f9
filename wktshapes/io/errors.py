"""Errors raised while reading WKT text."""


class MalformedInput(ValueError):
    """
    The text names a known shape but its body is not well formed.

    Attributes:
        message: Human readable description of the problem
        offset: Character offset into the input where it was detected
    """

    def __init__(self, message: str, offset: int):
        super().__init__(message, offset)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.offset})"
