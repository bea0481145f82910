"""
Tokenizer for Quake-family MAP source text.

Produces tokens lazily, one per ``next_token()`` call, and supports exactly
one token of pushback.  Every token records its character offset, line and
column so parse errors can point at the source.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Flag, auto
from typing import Optional, Union

from quake_mapparser.io.errors import LexError


class TokenKind(Flag):
    """Token kinds.  Expected-kind sets are unions of these flags."""
    INTEGER = auto()
    DECIMAL = auto()
    STRING = auto()
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    EOF = auto()


NUMBER = TokenKind.INTEGER | TokenKind.DECIMAL

TOKEN_NAMES = {
    TokenKind.INTEGER: "integer",
    TokenKind.DECIMAL: "decimal",
    TokenKind.STRING: "string",
    TokenKind.OPEN_BRACE: "'{'",
    TokenKind.CLOSE_BRACE: "'}'",
    TokenKind.OPEN_PAREN: "'('",
    TokenKind.CLOSE_PAREN: "')'",
    TokenKind.OPEN_BRACKET: "'['",
    TokenKind.CLOSE_BRACKET: "']'",
    TokenKind.EOF: "end of file",
}

_SINGLE_CHAR_TOKENS = {
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
}

_WHITESPACE = " \t\r\n"

# A number ends at whitespace, end of input or a structural character
_NUMBER_END = r"(?=[ \t\r\n(){}\[\]]|\Z)"
_INTEGER_RE = re.compile(r"[+-]?\d+" + _NUMBER_END)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?" + _NUMBER_END)
_WORD_RE = re.compile(r"[^ \t\r\n]+")


def describe_kinds(kinds: TokenKind) -> str:
    """Describe a set of token kinds, e.g. ``"'{' or '}'"``."""
    names = [TOKEN_NAMES[kind] for kind in TokenKind if kind in kinds]
    if not names:
        return "nothing"
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


@dataclass(frozen=True)
class Token:
    """A lexed token.

    Attributes:
        kind: Token kind
        text: Source text (without quotes for quoted strings)
        offset: 0-based character offset of the token's first character
        line: 1-based line
        column: 1-based column
    """
    kind: TokenKind
    text: str
    offset: int
    line: int
    column: int

    def has_kind(self, kinds: TokenKind) -> bool:
        return self.kind in kinds

    def to_float(self) -> float:
        return float(self.text)

    def to_int(self) -> int:
        return int(self.text)


class Tokenizer:
    """Lexes MAP source into tokens.

    ``bytes`` input is decoded as latin-1 so character offsets equal byte
    offsets.
    """

    def __init__(self, source: Union[str, bytes]):
        if isinstance(source, bytes):
            source = source.decode("latin-1")
        self._text = source
        self._length = len(source)
        self.reset()

    def reset(self) -> None:
        """Rewind to the start of the input and drop any pushed-back token."""
        self._pos = 0
        self._line = 1
        self._column = 1
        self._pushed: Optional[Token] = None

    def next_token(self) -> Token:
        if self._pushed is not None:
            token, self._pushed = self._pushed, None
            return token
        return self._emit_token()

    def push_token(self, token: Token) -> None:
        """Return a token to be delivered by the next ``next_token()`` call."""
        if self._pushed is not None:
            raise RuntimeError("Only one token can be pushed back at a time")
        self._pushed = token

    def peek_token(self) -> Token:
        token = self.next_token()
        self.push_token(token)
        return token

    # ---------------------------------------------------------------
    # Lexing
    # ---------------------------------------------------------------

    def _advance(self, count: int) -> None:
        end = min(self._pos + count, self._length)
        newlines = self._text.count("\n", self._pos, end)
        if newlines:
            self._line += newlines
            self._column = end - self._text.rfind("\n", self._pos, end)
        else:
            self._column += end - self._pos
        self._pos = end

    def _make_token(self, kind: TokenKind, text: str, length: int) -> Token:
        token = Token(kind, text, self._pos, self._line, self._column)
        self._advance(length)
        return token

    def _emit_token(self) -> Token:
        text = self._text
        while self._pos < self._length:
            c = text[self._pos]

            if c in _WHITESPACE:
                self._advance(1)
                continue

            if c == "/" and text.startswith("//", self._pos):
                end = text.find("\n", self._pos)
                self._advance((self._length if end == -1 else end) - self._pos)
                continue

            kind = _SINGLE_CHAR_TOKENS.get(c)
            if kind is not None:
                return self._make_token(kind, c, 1)

            if c == '"':
                end = text.find('"', self._pos + 1)
                if end == -1:
                    raise LexError(self._line, self._column, c, "Unterminated quoted string")
                return self._make_token(TokenKind.STRING, text[self._pos + 1:end], end + 1 - self._pos)

            match = _INTEGER_RE.match(text, self._pos)
            if match:
                return self._make_token(TokenKind.INTEGER, match.group(), match.end() - self._pos)

            match = _DECIMAL_RE.match(text, self._pos)
            if match:
                return self._make_token(TokenKind.DECIMAL, match.group(), match.end() - self._pos)

            if not c.isprintable():
                raise LexError(self._line, self._column, c)

            match = _WORD_RE.match(text, self._pos)
            return self._make_token(TokenKind.STRING, match.group(), match.end() - self._pos)

        return Token(TokenKind.EOF, "", self._length, self._line, self._column)
