"""
Quake MAP parser.

Turns MAP source text into Document -> Entity -> Brush -> Face objects.
Grammar, shared by all four dialects:

    Document := Entity*
    Entity   := '{' ( Property | Brush )* '}'
    Property := STRING STRING
    Brush    := '{' Face* '}'
    Face     := '(' x y z ')' '(' x y z ')' '(' x y z ')' TEXTURE
                Projection rotation x_scale y_scale [ SurfaceAttributes ]

Error policy:
- LexError / UnexpectedTokenError abort the parse call; nothing built by
  that call is returned.
- A face with collinear or duplicate points is dropped silently.
- A brush whose planes do not bound a finite solid is skipped and reported
  to the diagnostics sink; parsing continues.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from quake_mapparser.config.parser_settings import ParserSettings
from quake_mapparser.diagnostics import BRUSH_001, FORMAT_001, Diagnostic, ParseReport, Severity
from quake_mapparser.geometry.brush_kernel import BrushKernel, GeometryError, get_kernel
from quake_mapparser.geometry.face_order import sort_faces
from quake_mapparser.io.errors import UnexpectedTokenError
from quake_mapparser.io.format_detector import FormatDetector
from quake_mapparser.io.tokenizer import NUMBER, Token, Tokenizer, TokenKind
from quake_mapparser.model.map_types import (
    Brush,
    Document,
    Entity,
    ExplicitAxisProjection,
    Face,
    ImplicitAxisProjection,
    MapFormat,
    SurfaceAttributes,
    TextureProjection,
    WorldBounds,
)
from quake_mapparser.model.plane_math import Plane, Vec3, corrected

logger = logging.getLogger(__name__)


class MapParser:
    """
    Parses Quake, Valve 220, Hexen 2 and Quake 2 MAP source.

    Each entry point detects the dialect again and parses from the start of
    the source, so one parser can be used for several calls.

    Usage:
        parser = MapParser(text)
        report = ParseReport()
        document = parser.parse_document(WorldBounds.cube(8192), diagnostics=report)
    """

    def __init__(
        self,
        source: Union[str, bytes],
        kernel: Optional[BrushKernel] = None,
        settings: Optional[ParserSettings] = None,
    ):
        """Initialize the parser.

        Args:
            source: MAP source text (bytes are decoded as latin-1)
            kernel: Geometry kernel for brush assembly; defaults to the one
                named in settings
            settings: Parser settings; defaults to ParserSettings()
        """
        self.settings = settings or ParserSettings()
        self.kernel = kernel or get_kernel(self.settings.kernel, epsilon=self.settings.kernel_epsilon)
        self._tokenizer = Tokenizer(source)
        self._format = MapFormat.UNKNOWN
        self._diagnostics: Optional[ParseReport] = None
        self._world_bounds = self.settings.world_bounds

    @property
    def format(self) -> MapFormat:
        """Dialect detected by the most recent parse call."""
        return self._format

    # ---------------------------------------------------------------
    # Entry points
    # ---------------------------------------------------------------

    def parse_document(
        self,
        world_bounds: Optional[WorldBounds] = None,
        diagnostics: Optional[ParseReport] = None,
    ) -> Document:
        """Parse the whole source into a Document.

        Returns an empty Document with format UNKNOWN if the dialect cannot
        be detected.
        """
        if not self._begin(world_bounds, diagnostics):
            return Document(format=MapFormat.UNKNOWN)
        entities = self._parse_entity_list()
        logger.info(
            "Parsed %s map: %d entities, %d brushes",
            self._format.display_name, len(entities), sum(len(e.brushes) for e in entities),
        )
        return Document(format=self._format, entities=entities)

    def parse_entities(
        self,
        world_bounds: Optional[WorldBounds] = None,
        diagnostics: Optional[ParseReport] = None,
    ) -> List[Entity]:
        """Parse a flat list of top-level entities."""
        if not self._begin(world_bounds, diagnostics):
            return []
        return self._parse_entity_list()

    def parse_brushes(
        self,
        world_bounds: Optional[WorldBounds] = None,
        diagnostics: Optional[ParseReport] = None,
    ) -> List[Brush]:
        """Parse a sequence of brushes that are not wrapped in an entity."""
        if not self._begin(world_bounds, diagnostics):
            return []
        brushes = []
        while True:
            token = self._tokenizer.next_token()
            if token.kind is TokenKind.EOF:
                return brushes
            self._expect(TokenKind.OPEN_BRACE, token)
            brush = self._parse_brush(token)
            if brush is not None:
                brushes.append(brush)

    def parse_faces(
        self,
        world_bounds: Optional[WorldBounds] = None,
        diagnostics: Optional[ParseReport] = None,
    ) -> List[Face]:
        """Parse a sequence of faces that are not wrapped in a brush."""
        if not self._begin(world_bounds, diagnostics):
            return []
        faces = []
        while True:
            token = self._tokenizer.next_token()
            if token.kind is TokenKind.EOF:
                return faces
            self._expect(TokenKind.OPEN_PAREN, token)
            face = self._parse_face(token)
            if face is not None:
                faces.append(face)

    # ---------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------

    def _begin(self, world_bounds: Optional[WorldBounds], diagnostics: Optional[ParseReport]) -> bool:
        """Detect the dialect and rewind; return False if nothing can be parsed."""
        self._world_bounds = world_bounds or self.settings.world_bounds
        self._diagnostics = diagnostics
        self._format = FormatDetector(self._tokenizer).detect()
        self._tokenizer.reset()
        if self._format is MapFormat.UNKNOWN:
            self._report(FORMAT_001.diagnostic())
            return False
        logger.debug(f"Detected map format: {self._format.display_name}")
        return True

    def _parse_entity_list(self) -> List[Entity]:
        entities = []
        while True:
            token = self._tokenizer.next_token()
            if token.kind is TokenKind.EOF:
                return entities
            self._expect(TokenKind.OPEN_BRACE, token)
            entities.append(self._parse_entity(token))

    def _parse_entity(self, open_brace: Token) -> Entity:
        properties: Dict[str, str] = {}
        brushes: List[Brush] = []

        while True:
            token = self._tokenizer.next_token()
            if token.kind is TokenKind.STRING:
                value = self._expect(TokenKind.STRING, self._tokenizer.next_token())
                properties[token.text] = value.text
            elif token.kind is TokenKind.OPEN_BRACE:
                brush = self._parse_brush(token)
                if brush is not None:
                    brushes.append(brush)
            elif token.kind is TokenKind.CLOSE_BRACE:
                return Entity(
                    properties=properties,
                    brushes=tuple(brushes),
                    first_line=open_brace.line,
                    line_count=token.line - open_brace.line,
                )
            else:
                raise UnexpectedTokenError(TokenKind.OPEN_BRACE | TokenKind.CLOSE_BRACE, token)

    def _parse_brush(self, open_brace: Token) -> Optional[Brush]:
        faces: List[Face] = []

        while True:
            token = self._tokenizer.next_token()
            if token.kind is TokenKind.OPEN_PAREN:
                face = self._parse_face(token)
                if face is not None:
                    faces.append(face)
            elif token.kind is TokenKind.CLOSE_BRACE:
                return self._create_brush(faces, open_brace.line, token.line - open_brace.line)
            else:
                raise UnexpectedTokenError(TokenKind.OPEN_PAREN | TokenKind.CLOSE_BRACE, token)

    def _parse_face(self, open_paren: Token) -> Optional[Face]:
        """Parse one face; the opening parenthesis has already been read.

        All of the face's tokens are consumed even when the face turns out to
        be degenerate.
        """
        p1 = self._parse_point()
        self._expect(TokenKind.CLOSE_PAREN, self._tokenizer.next_token())
        self._expect(TokenKind.OPEN_PAREN, self._tokenizer.next_token())
        p2 = self._parse_point()
        self._expect(TokenKind.CLOSE_PAREN, self._tokenizer.next_token())
        self._expect(TokenKind.OPEN_PAREN, self._tokenizer.next_token())
        p3 = self._parse_point()
        self._expect(TokenKind.CLOSE_PAREN, self._tokenizer.next_token())

        texture = self._expect(TokenKind.STRING, self._tokenizer.next_token()).text
        if texture == self.settings.empty_texture_name:
            texture = ""

        projection = self._parse_projection()
        surface = self._parse_surface_attributes()

        plane = Plane.from_three_points(p1, p2, p3)
        if plane is None:
            logger.debug(f"Dropping degenerate face at line {open_paren.line}: {p1} {p2} {p3}")
            return None

        return Face(
            points=(p1, p2, p3),
            plane=plane,
            texture=texture,
            projection=projection,
            surface=surface,
            line=open_paren.line,
        )

    def _parse_projection(self) -> TextureProjection:
        if self._format is MapFormat.VALVE:
            x_axis, x_offset = self._parse_texture_axis()
            y_axis, y_offset = self._parse_texture_axis()
            rotation, x_scale, y_scale = self._parse_numbers(3)
            return ExplicitAxisProjection(
                x_axis=x_axis,
                y_axis=y_axis,
                x_offset=x_offset,
                y_offset=y_offset,
                rotation=rotation,
                x_scale=x_scale,
                y_scale=y_scale,
            )

        x_offset, y_offset, rotation, x_scale, y_scale = self._parse_numbers(5)
        return ImplicitAxisProjection(
            x_offset=x_offset,
            y_offset=y_offset,
            rotation=rotation,
            x_scale=x_scale,
            y_scale=y_scale,
        )

    def _parse_texture_axis(self):
        """Parse ``[ x y z offset ]``."""
        self._expect(TokenKind.OPEN_BRACKET, self._tokenizer.next_token())
        x, y, z, offset = self._parse_numbers(4)
        self._expect(TokenKind.CLOSE_BRACKET, self._tokenizer.next_token())
        return (x, y, z), offset

    def _parse_surface_attributes(self) -> Optional[SurfaceAttributes]:
        if self._format is MapFormat.QUAKE2:
            contents = self._expect(TokenKind.INTEGER, self._tokenizer.next_token()).to_int()
            flags = self._expect(TokenKind.INTEGER, self._tokenizer.next_token()).to_int()
            value = self._expect(NUMBER, self._tokenizer.next_token()).to_float()
            return SurfaceAttributes(contents=contents, flags=flags, value=value)
        if self._format is MapFormat.HEXEN2:
            # The meaning of the extra Hexen 2 field is unknown; it is discarded
            self._expect(NUMBER, self._tokenizer.next_token())
            return SurfaceAttributes()
        return None

    def _parse_point(self) -> Vec3:
        return corrected(tuple(self._parse_numbers(3)), self.settings.correct_epsilon)

    def _parse_numbers(self, count: int) -> List[float]:
        return [self._expect(NUMBER, self._tokenizer.next_token()).to_float() for _ in range(count)]

    def _expect(self, expected: TokenKind, token: Token) -> Token:
        if token.kind not in expected:
            raise UnexpectedTokenError(expected, token)
        return token

    # ---------------------------------------------------------------
    # Brush assembly
    # ---------------------------------------------------------------

    def _create_brush(self, faces: Sequence[Face], first_line: int, line_count: int) -> Optional[Brush]:
        """Order the faces and build the brush; skip it if the kernel rejects it."""
        sorted_faces = sort_faces(faces)
        try:
            geometry = self.kernel.build(self._world_bounds, sorted_faces)
        except GeometryError as e:
            self._report(BRUSH_001.diagnostic(line=first_line, reason=str(e)))
            return None
        return Brush(
            faces=tuple(sorted_faces),
            first_line=first_line,
            line_count=line_count,
            geometry=geometry,
        )

    def _report(self, issue: Diagnostic) -> None:
        if issue.severity == Severity.FAIL:
            logger.error(issue.message)
        else:
            logger.warning(issue.message)
        if self._diagnostics is not None:
            self._diagnostics.add_issue(issue)


def parse_map_file(
    file_path: Union[str, Path],
    world_bounds: Optional[WorldBounds] = None,
    diagnostics: Optional[ParseReport] = None,
    settings: Optional[ParserSettings] = None,
) -> Document:
    """Read a MAP file and parse it into a Document.

    Args:
        file_path: Path to the .map file
        world_bounds: Validity volume; defaults to the settings' bounds
        diagnostics: Optional sink for non-fatal findings
        settings: Parser settings

    Returns:
        The parsed Document
    """
    file_path = Path(file_path)
    if diagnostics is not None and diagnostics.source is None:
        diagnostics.source = str(file_path)
    parser = MapParser(file_path.read_bytes(), settings=settings)
    return parser.parse_document(world_bounds, diagnostics=diagnostics)
