"""
This module provides the lexer for JSON and JavaScript literal text.
It turns a string into a stream of tokens (strings, numbers, punctuation and
bare identifiers), each one remembering where it started so the parser can
report errors with a source offset.
"""

import re
from enum import Enum
from typing import Any, Iterator, List, NamedTuple

from jsonpainter.errors import UnexpectedToken, UnterminatedString


class TokenKind(Enum):
    STRING = "string"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    IDENTIFIER = "identifier"
    END = "end of input"


class Token(NamedTuple):
    """
    A single lexical unit.

    Attributes:
        kind (TokenKind): What sort of token this is
        text (str): The exact source text of the token
        value (Any): The decoded value (unescaped string, float, or the text itself)
        offset (int): Zero-based offset of the first character in the source
    """
    kind: TokenKind
    text: str
    value: Any
    offset: int

    def describe(self) -> str:
        if self.kind is TokenKind.END:
            return "end of input"
        return f"{self.kind.value} {self.text!r}"


# Backslash escapes the lexer understands; anything else keeps the escaped character
ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

_STRING = r'"(?:[^"\\]|\\.)*"|' + r"'(?:[^'\\]|\\.)*'"
_NUMBER = r"-?[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?"

_TOKEN_RE = re.compile(
    rf"(?P<WHITESPACE>\s+)|"
    rf"(?P<STRING>{_STRING})|"
    rf"(?P<NUMBER>{_NUMBER})|"
    r"(?P<IDENTIFIER>[A-Za-z_]+)|"
    r"(?P<PUNCTUATION>[{}\[\]:,])",
    re.DOTALL,
)

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def decode_string(raw: str) -> str:
    """Strip the quotes from a string literal and resolve its escapes."""
    return _ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), raw[1:-1])


def tokenize(text: str) -> Iterator[Token]:
    """
    Scan `text` and yield its tokens, finishing with a single END token.

    Whitespace between tokens is skipped. A quote that never closes raises
    UnterminatedString; any character that cannot start a token raises
    UnexpectedToken.

    Args:
        text (str): The literal source to scan

    Yields:
        Token: The next token in source order
    """
    pos = 0
    length = len(text)
    while pos < length:
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            char = text[pos]
            if char in "\"'":
                raise UnterminatedString("unterminated string literal", pos)
            raise UnexpectedToken(f"unexpected character {char!r}", pos)

        kind = match.lastgroup
        raw = match.group()
        start = pos
        pos = match.end()

        if kind == "WHITESPACE":
            continue
        if kind == "STRING":
            yield Token(TokenKind.STRING, raw, decode_string(raw), start)
        elif kind == "NUMBER":
            yield Token(TokenKind.NUMBER, raw, float(raw), start)
        elif kind == "IDENTIFIER":
            yield Token(TokenKind.IDENTIFIER, raw, raw, start)
        else:
            yield Token(TokenKind.PUNCTUATION, raw, raw, start)

    yield Token(TokenKind.END, "", None, length)


class TokenStream:
    """
    One-token lookahead over `tokenize`.

    After the END token has been produced, further reads keep returning it,
    so the parser never runs off the end of the input.
    """
    def __init__(self, text: str):
        self._iter = tokenize(text)
        self._buf: List[Token] = []
        self._end = None

    def _pull(self) -> Token:
        if self._end is not None:
            return self._end
        token = next(self._iter)
        if token.kind is TokenKind.END:
            self._end = token
        return token

    def peek(self) -> Token:
        if not self._buf:
            self._buf.append(self._pull())
        return self._buf[-1]

    def next(self) -> Token:
        if self._buf:
            return self._buf.pop()
        return self._pull()
