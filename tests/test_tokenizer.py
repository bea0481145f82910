"""Tests for the MAP tokenizer."""

import pytest

from quake_mapparser.io.errors import LexError
from quake_mapparser.io.tokenizer import NUMBER, Tokenizer, TokenKind, describe_kinds


def _all_tokens(tokenizer):
    tokens = []
    while True:
        token = tokenizer.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens


def test_positions_match_hand_computed_table():
    text = '{\n"classname" "worldspawn"\n// c\n( 1 -2.5 )\n}'
    expected = [
        (TokenKind.OPEN_BRACE, "{", 0, 1, 1),
        (TokenKind.STRING, "classname", 2, 2, 1),
        (TokenKind.STRING, "worldspawn", 14, 2, 13),
        (TokenKind.OPEN_PAREN, "(", 32, 4, 1),
        (TokenKind.INTEGER, "1", 34, 4, 3),
        (TokenKind.DECIMAL, "-2.5", 36, 4, 5),
        (TokenKind.CLOSE_PAREN, ")", 41, 4, 10),
        (TokenKind.CLOSE_BRACE, "}", 43, 5, 1),
        (TokenKind.EOF, "", 44, 5, 2),
    ]

    tokens = _all_tokens(Tokenizer(text))

    assert [(t.kind, t.text, t.offset, t.line, t.column) for t in tokens] == expected


def test_pushback_is_one_token_deep():
    tokenizer = Tokenizer("a b c")
    first = tokenizer.next_token()
    tokenizer.push_token(first)

    assert tokenizer.next_token() == first
    assert tokenizer.next_token().text == "b"


def test_second_pushback_is_rejected():
    tokenizer = Tokenizer("a b")
    a = tokenizer.next_token()
    b = tokenizer.next_token()
    tokenizer.push_token(b)

    with pytest.raises(RuntimeError):
        tokenizer.push_token(a)


def test_peek_does_not_consume():
    tokenizer = Tokenizer("{ }")
    assert tokenizer.peek_token().kind is TokenKind.OPEN_BRACE
    assert tokenizer.next_token().kind is TokenKind.OPEN_BRACE
    assert tokenizer.next_token().kind is TokenKind.CLOSE_BRACE


def test_reset_rewinds_and_clears_pushback():
    tokenizer = Tokenizer("x y")
    tokenizer.next_token()
    tokenizer.push_token(tokenizer.next_token())
    tokenizer.reset()

    token = tokenizer.next_token()
    assert (token.text, token.offset, token.line, token.column) == ("x", 0, 1, 1)


def test_number_kinds():
    kinds = [t.kind for t in _all_tokens(Tokenizer("12 -3 +4 1.5 -.25 2. 1e-5 1.5e3 12abc"))]
    assert kinds == [
        TokenKind.INTEGER, TokenKind.INTEGER, TokenKind.INTEGER,
        TokenKind.DECIMAL, TokenKind.DECIMAL, TokenKind.DECIMAL,
        TokenKind.DECIMAL, TokenKind.DECIMAL,
        TokenKind.STRING, TokenKind.EOF,
    ]


def test_numbers_end_at_structural_characters():
    tokens = _all_tokens(Tokenizer("(0 1 2)"))
    assert [t.text for t in tokens[:-1]] == ["(", "0", "1", "2", ")"]
    assert tokens[3].kind is TokenKind.INTEGER


def test_quoted_string_has_no_escapes():
    token = Tokenizer(r'"a \n {b}"').next_token()
    assert token.kind is TokenKind.STRING
    assert token.text == r"a \n {b}"


def test_bare_word_reads_to_whitespace():
    tokens = _all_tokens(Tokenizer("e1u1/floor *water1 __TB_empty"))
    assert [t.text for t in tokens[:-1]] == ["e1u1/floor", "*water1", "__TB_empty"]
    assert all(t.kind is TokenKind.STRING for t in tokens[:-1])


def test_comment_runs_to_end_of_line():
    tokens = _all_tokens(Tokenizer("// header { }\n{ // trailing\n}"))
    assert [t.kind for t in tokens] == [TokenKind.OPEN_BRACE, TokenKind.CLOSE_BRACE, TokenKind.EOF]


def test_control_character_is_a_lex_error():
    tokenizer = Tokenizer("{\n  \x01")
    tokenizer.next_token()

    with pytest.raises(LexError) as exc_info:
        tokenizer.next_token()

    assert (exc_info.value.line, exc_info.value.column) == (2, 3)
    assert exc_info.value.character == "\x01"


@pytest.mark.parametrize("character", ["\x1c", "\x1f", "\x85", "\xa0", "\x0b"])
def test_only_ascii_blanks_are_whitespace(character):
    tokenizer = Tokenizer("{" + character + "}")
    tokenizer.next_token()

    with pytest.raises(LexError) as exc_info:
        tokenizer.next_token()

    assert exc_info.value.character == character
    assert exc_info.value.column == 2


def test_tab_and_carriage_return_are_whitespace():
    tokens = _all_tokens(Tokenizer("{\t\r\n}"))
    assert [t.kind for t in tokens] == [TokenKind.OPEN_BRACE, TokenKind.CLOSE_BRACE, TokenKind.EOF]


def test_unterminated_quote_is_a_lex_error():
    with pytest.raises(LexError) as exc_info:
        Tokenizer('"classname').next_token()
    assert exc_info.value.column == 1


def test_bytes_input_offsets_are_byte_offsets():
    tokens = _all_tokens(Tokenizer(b'"\xe9t\xe9" x'))
    assert tokens[0].text == "\xe9t\xe9"
    assert tokens[1].offset == 6


def test_token_conversions():
    tokens = _all_tokens(Tokenizer("7 -1.5"))
    assert tokens[0].to_int() == 7
    assert tokens[1].to_float() == -1.5
    assert tokens[1].has_kind(NUMBER)


def test_describe_kinds():
    assert describe_kinds(TokenKind.OPEN_BRACE | TokenKind.CLOSE_BRACE) == "'{' or '}'"
    assert describe_kinds(TokenKind.EOF) == "end of file"
    assert describe_kinds(NUMBER | TokenKind.OPEN_BRACKET) == "integer, decimal or '['"
