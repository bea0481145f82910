"""
MAP dialect detection.

The four dialects share the same entity/brush grammar and differ only in the
fields that follow a face's texture name.  Detection looks at the first face
of the document and nothing else:

    ( p1 ) ( p2 ) ( p3 ) TEX [ ... ] [ ... ] rot sx sy        -> Valve
    ( p1 ) ( p2 ) ( p3 ) TEX xo yo rot sx sy                  -> Standard
    ( p1 ) ( p2 ) ( p3 ) TEX xo yo rot sx sy flag             -> Hexen 2
    ( p1 ) ( p2 ) ( p3 ) TEX xo yo rot sx sy contents flags v -> Quake 2
"""

from __future__ import annotations
import logging

from quake_mapparser.io.errors import UnexpectedTokenError
from quake_mapparser.io.tokenizer import NUMBER, Token, Tokenizer, TokenKind
from quake_mapparser.model.map_types import MapFormat

logger = logging.getLogger(__name__)

# Tokens that can follow the last field of a face
_FACE_END = TokenKind.OPEN_PAREN | TokenKind.CLOSE_BRACE | TokenKind.EOF


class FormatDetector:
    """Classifies a document by probing its first face.

    The tokenizer is rewound before and after probing, so callers can start
    structural parsing from the first character.
    """

    def __init__(self, tokenizer: Tokenizer):
        self._tokenizer = tokenizer

    def detect(self) -> MapFormat:
        self._tokenizer.reset()
        try:
            return self._probe()
        except UnexpectedTokenError as e:
            logger.warning(f"Could not detect map format: {e}")
            return MapFormat.UNKNOWN
        finally:
            self._tokenizer.reset()

    def _next(self, expected: TokenKind) -> Token:
        token = self._tokenizer.next_token()
        if token.kind not in expected:
            raise UnexpectedTokenError(expected, token)
        return token

    def _probe(self) -> MapFormat:
        token = self._tokenizer.next_token()
        while token.kind not in (TokenKind.OPEN_PAREN | TokenKind.EOF):
            token = self._tokenizer.next_token()
        if token.kind is TokenKind.EOF:
            # No faces at all: point entities only, or an empty document
            return MapFormat.QUAKE

        self._tokenizer.push_token(token)
        for _ in range(3):
            self._next(TokenKind.OPEN_PAREN)
            for _ in range(3):
                self._next(NUMBER)
            self._next(TokenKind.CLOSE_PAREN)

        self._next(TokenKind.STRING)  # texture name
        token = self._next(NUMBER | TokenKind.OPEN_BRACKET)
        if token.kind is TokenKind.OPEN_BRACKET:
            return MapFormat.VALVE

        for _ in range(4):  # y offset, rotation, x scale, y scale
            self._next(NUMBER)

        token = self._next(NUMBER | _FACE_END)
        if token.kind in _FACE_END:
            return MapFormat.QUAKE

        # One extra number is either the Hexen 2 flag or Quake 2 contents
        token = self._next(NUMBER | _FACE_END)
        if token.kind in _FACE_END:
            return MapFormat.HEXEN2
        return MapFormat.QUAKE2
