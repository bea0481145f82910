"""Tests for MAP dialect detection."""

import pytest

from map_text import HEXEN2_SUFFIX, QUAKE2_SUFFIX, QUAKE_SUFFIX, VALVE_SUFFIX
from quake_mapparser.io.format_detector import FormatDetector
from quake_mapparser.io.map_parser import MapParser
from quake_mapparser.io.tokenizer import Tokenizer, TokenKind
from quake_mapparser.model.map_types import MapFormat


def _one_face_document(face_text, entity_text, brush_text, suffix):
    face = face_text((0, 0, 0), (0, 1, 0), (1, 0, 0), texture="TEXTURE", suffix=suffix)
    return entity_text(brushes=[brush_text([face])])


@pytest.mark.parametrize("suffix, expected", [
    (QUAKE_SUFFIX, MapFormat.QUAKE),
    (VALVE_SUFFIX, MapFormat.VALVE),
    (HEXEN2_SUFFIX, MapFormat.HEXEN2),
    (QUAKE2_SUFFIX, MapFormat.QUAKE2),
])
def test_one_face_document_is_classified(face_text, entity_text, brush_text, suffix, expected):
    text = _one_face_document(face_text, entity_text, brush_text, suffix)

    assert FormatDetector(Tokenizer(text)).detect() is expected

    parser = MapParser(text)
    document = parser.parse_document()
    assert document.format is expected
    assert parser.format is expected


def test_faces_followed_by_faces(face_text, brush_text):
    faces = [
        face_text((0, 0, 0), (0, 1, 0), (1, 0, 0), suffix=HEXEN2_SUFFIX),
        face_text((0, 0, 0), (1, 0, 0), (0, 0, 1), suffix=HEXEN2_SUFFIX),
    ]
    assert FormatDetector(Tokenizer(brush_text(faces))).detect() is MapFormat.HEXEN2


def test_face_at_end_of_input_is_detected(face_text):
    text = face_text((0, 0, 0), (0, 1, 0), (1, 0, 0), suffix=HEXEN2_SUFFIX)
    assert FormatDetector(Tokenizer(text)).detect() is MapFormat.HEXEN2


def test_document_without_faces_is_standard():
    text = '{\n"classname" "info_player_start"\n"origin" "0 0 24"\n}'
    assert FormatDetector(Tokenizer(text)).detect() is MapFormat.QUAKE


def test_empty_document_is_standard():
    assert FormatDetector(Tokenizer("")).detect() is MapFormat.QUAKE


def test_malformed_first_face_is_unknown():
    text = "{\n{\n( 0 0 0 ) ( 0 1 ) ( 1 0 0 ) TEX 0 0 0 1 1\n}\n}"
    assert FormatDetector(Tokenizer(text)).detect() is MapFormat.UNKNOWN


def test_detection_rewinds_tokenizer(face_text, entity_text, brush_text):
    tokenizer = Tokenizer(_one_face_document(face_text, entity_text, brush_text, QUAKE2_SUFFIX))
    tokenizer.next_token()
    tokenizer.next_token()

    FormatDetector(tokenizer).detect()

    token = tokenizer.next_token()
    assert token.kind is TokenKind.OPEN_BRACE
    assert token.offset == 0
