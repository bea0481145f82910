"""
MAP source reading: tokenizer, dialect detection and structural parser.
"""

from .errors import MapParseError, LexError, UnexpectedTokenError
from .tokenizer import Token, TokenKind, Tokenizer, NUMBER, TOKEN_NAMES, describe_kinds
from .format_detector import FormatDetector
from .map_parser import MapParser, parse_map_file

__all__ = [
    'MapParseError',
    'LexError',
    'UnexpectedTokenError',
    'Token',
    'TokenKind',
    'Tokenizer',
    'NUMBER',
    'TOKEN_NAMES',
    'describe_kinds',
    'FormatDetector',
    'MapParser',
    'parse_map_file',
]
