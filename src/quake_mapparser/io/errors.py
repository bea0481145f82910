"""
Parse errors raised by the tokenizer and the structural parser.

Both carry the source position of the offending character or token.  They
abort the parse call that raised them; geometry problems are reported
through diagnostics instead (see ``quake_mapparser.diagnostics``).
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quake_mapparser.io.tokenizer import Token, TokenKind


class MapParseError(Exception):
    """Base class for errors that abort a parse call.

    Attributes:
        line: 1-based source line
        column: 1-based source column
        description: Message without position prefix
    """

    def __init__(self, line: int, column: int, description: str):
        self.line = line
        self.column = column
        self.description = description
        super().__init__(f"line {line}, column {column}: {description}")


class LexError(MapParseError):
    """Raised when the tokenizer meets a character it cannot start a token with."""

    def __init__(self, line: int, column: int, character: str, description: str = ""):
        self.character = character
        super().__init__(line, column, description or f"Unexpected character: {character!r}")


class UnexpectedTokenError(MapParseError):
    """Raised when a token's kind is not among the kinds allowed at that point.

    Attributes:
        expected: Union of the allowed TokenKind flags
        actual: Kind of the token that was read
        token: The token itself
    """

    def __init__(self, expected: "TokenKind", token: "Token"):
        from quake_mapparser.io.tokenizer import describe_kinds

        self.expected = expected
        self.actual = token.kind
        self.token = token
        super().__init__(
            token.line,
            token.column,
            f"Expected {describe_kinds(expected)} but got {describe_kinds(token.kind)}",
        )
