import pytest

import lexer as lx


def kinds_and_values(data):
    return [(tok.kind, tok.value) for tok in lx.Lexer(data).tokens()]


def test_structural_tokens_carry_offsets():
    toks = list(lx.Lexer(b'{ } [ ] : ,').tokens())
    assert [t.kind for t in toks] == ["BRACE", "BRACE", "BRACKET", "BRACKET", "COLON", "COMMA"]
    assert [t.offset for t in toks] == [0, 2, 4, 6, 8, 10]


def test_literals():
    assert kinds_and_values(b"null true false") == [
        ("LITERAL", "null"),
        ("LITERAL", "true"),
        ("LITERAL", "false"),
    ]


def test_whitespace_is_skipped():
    assert kinds_and_values(b" \t\r\n[\n\t1 ]\r\n") == [
        ("BRACKET", "["),
        ("NUMBER", "1"),
        ("BRACKET", "]"),
    ]


def test_number_scan_stops_at_first_non_numeric_byte():
    lex = lx.Lexer(b"-12.5e+3,")
    tok = lex.next_token()
    assert tok == lx.Token("NUMBER", "-12.5e+3", 0)
    # the comma was pushed back, not swallowed
    assert lex.position == 8
    assert lex.next_token() == lx.Token("COMMA", ",", 8)


def test_number_span_is_not_validated():
    assert kinds_and_values(b"1.2.3 --5") == [("NUMBER", "1.2.3"), ("NUMBER", "--5")]


def test_number_at_end_of_input():
    lex = lx.Lexer(b"42")
    assert lex.next_token() == lx.Token("NUMBER", "42", 0)
    assert lex.next_token() is None


def test_string_body_excludes_quotes():
    assert kinds_and_values(b'"John Doe"') == [("TEXT", "John Doe")]


def test_empty_input_is_exhausted():
    lex = lx.Lexer(b"   \n")
    assert lex.next_token() is None
    assert lex.at_end()


@pytest.mark.parametrize("data", [b"tru", b"nul", b"fals", b"nil", b"trUe"])
def test_malformed_literal(data):
    with pytest.raises(lx.ParseError) as ei:
        lx.Lexer(data).next_token()
    assert ei.value.kind == lx.MALFORMED_LITERAL
    assert ei.value.position == 0


def test_malformed_literal_position_inside_document():
    lex = lx.Lexer(b"[1, fals]")
    with pytest.raises(lx.ParseError) as ei:
        list(lex.tokens())
    assert ei.value.position == 4
    assert "malformed literal 'fals]'" in str(ei.value)


def test_unexpected_character():
    with pytest.raises(lx.ParseError) as ei:
        list(lx.Lexer(b"[1, x]").tokens())
    assert ei.value.kind == lx.UNEXPECTED_CHARACTER
    assert ei.value.position == 4
    assert "invalid character 'x'" in str(ei.value)


def test_parse_error_is_a_syntax_error():
    with pytest.raises(SyntaxError):
        lx.Lexer(b"@").next_token()
