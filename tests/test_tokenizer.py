import pytest

from jsonpainter.errors import UnexpectedToken, UnterminatedString
from jsonpainter.tokenizer import TokenKind, TokenStream, decode_string, tokenize


def kinds_and_offsets(text):
    return [(tok.kind, tok.value, tok.offset) for tok in tokenize(text)]


def test_object_tokens_carry_offsets():
    assert kinds_and_offsets('{"a": 1}') == [
        (TokenKind.PUNCTUATION, "{", 0),
        (TokenKind.STRING, "a", 1),
        (TokenKind.PUNCTUATION, ":", 4),
        (TokenKind.NUMBER, 1.0, 6),
        (TokenKind.PUNCTUATION, "}", 7),
        (TokenKind.END, None, 8),
    ]


def test_whitespace_is_skipped_between_tokens():
    toks = list(tokenize(" \n\t[ true ,\r\n null ] "))
    assert [t.text for t in toks] == ["[", "true", ",", "null", "]", ""]
    assert toks[1].kind is TokenKind.IDENTIFIER


def test_known_escapes_are_decoded():
    tok = next(tokenize(r'"a\nb\tc\rd\\e\"f\'g"'))
    assert tok.value == "a\nb\tc\rd\\e\"f'g"


def test_unknown_escape_keeps_the_character():
    assert decode_string(r'"\q\u0041"') == "qu0041"


def test_single_quoted_string():
    tok = next(tokenize(r"'it\'s'"))
    assert tok.kind is TokenKind.STRING
    assert tok.value == "it's"


def test_double_quote_inside_single_quotes():
    assert next(tokenize("'say \"hi\"'")).value == 'say "hi"'


@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("-17", -17.0),
    ("3.14159", 3.14159),
    ("1.23e10", 1.23e10),
    ("1E+2", 100.0),
    ("-2.5e-3", -0.0025),
])
def test_numbers_are_floats(text, expected):
    tok = next(tokenize(text))
    assert tok.kind is TokenKind.NUMBER
    assert tok.value == expected
    assert isinstance(tok.value, float)


def test_unterminated_string_reports_opening_quote():
    with pytest.raises(UnterminatedString) as ei:
        list(tokenize('[1, "abc'))
    assert ei.value.offset == 4


def test_escaped_closing_quote_leaves_string_open():
    with pytest.raises(UnterminatedString):
        list(tokenize('"abc\\"'))


def test_invalid_character_reports_offset():
    with pytest.raises(UnexpectedToken) as ei:
        list(tokenize("[1, @]"))
    assert ei.value.offset == 4
    assert "'@'" in str(ei.value)


def test_stream_keeps_returning_end():
    stream = TokenStream("1")
    assert stream.next().kind is TokenKind.NUMBER
    assert stream.next().kind is TokenKind.END
    assert stream.peek().kind is TokenKind.END
    assert stream.next().kind is TokenKind.END
