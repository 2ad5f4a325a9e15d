"""Exceptions raised while parsing S-expressions."""

from __future__ import annotations


class ParseError(ValueError):
    """Malformed input, with the position of the character that triggered it.

    Attributes:
        message: Human readable description.
        offset:  Zero-based index of the offending character in the input.
        line:    One-based line number.
        column:  Column of the offending character within ``line``.

    """

    def __init__(self, message: str, offset: int, line: int, column: int) -> None:
        super().__init__(message, offset, line, column)
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


class StructuralError(ParseError):
    """A parenthesis that cannot start or end a list where it appears."""


class NumericFormatError(ParseError):
    """A bare token that looks numeric but is not a valid number."""


class NestingError(ParseError):
    """Lists nested deeper than the parser's ``max_depth``."""
