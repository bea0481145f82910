"""
Quake MAP parser.

Reads Standard (Quake), Valve 220, Hexen 2 and Quake 2 MAP source into a
Document -> Entity -> Brush -> Face graph.

Public API:
    - MapParser, parse_map_file: Entry points
    - Tokenizer, Token, TokenKind, FormatDetector: Lower level reading
    - Document, Entity, Brush, Face, MapFormat, WorldBounds: Scene graph
    - MapParseError, LexError, UnexpectedTokenError: Fatal parse errors
    - ParseReport, Diagnostic, Severity: Non-fatal diagnostics
    - ParserSettings: Configuration
"""

from .config import ParserSettings
from .diagnostics import Diagnostic, ParseReport, Severity
from .geometry import BrushGeometry, BrushKernel, ConvexBrushKernel, GeometryError
from .io import (
    FormatDetector,
    LexError,
    MapParseError,
    MapParser,
    Token,
    TokenKind,
    Tokenizer,
    UnexpectedTokenError,
    parse_map_file,
)
from .model import (
    Brush,
    Document,
    Entity,
    ExplicitAxisProjection,
    Face,
    ImplicitAxisProjection,
    MapFormat,
    Plane,
    SurfaceAttributes,
    WorldBounds,
    texture_axes,
    texture_coordinates,
)

__all__ = [
    # Entry points
    'MapParser',
    'parse_map_file',
    # Reading
    'Tokenizer',
    'Token',
    'TokenKind',
    'FormatDetector',
    # Scene graph
    'Document',
    'Entity',
    'Brush',
    'Face',
    'ImplicitAxisProjection',
    'ExplicitAxisProjection',
    'SurfaceAttributes',
    'MapFormat',
    'WorldBounds',
    'Plane',
    'texture_axes',
    'texture_coordinates',
    # Geometry
    'BrushKernel',
    'BrushGeometry',
    'ConvexBrushKernel',
    'GeometryError',
    # Errors and diagnostics
    'MapParseError',
    'LexError',
    'UnexpectedTokenError',
    'ParseReport',
    'Diagnostic',
    'Severity',
    # Configuration
    'ParserSettings',
]
