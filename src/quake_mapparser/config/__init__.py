"""
Parser configuration.
"""

from .parser_settings import ParserSettings, DEFAULT_EMPTY_TEXTURE

__all__ = [
    'ParserSettings',
    'DEFAULT_EMPTY_TEXTURE',
]
