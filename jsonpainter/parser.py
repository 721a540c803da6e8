"""
This module provides the recursive-descent parser for JSON and JavaScript
literal text. It consumes the token stream from the tokenizer and rebuilds a
raw Python value: None, UNDEFINED, bool, float, str, list or dict.

The grammar is deliberately forgiving in the same places JavaScript object
literals are (single quotes, bare keys, optional commas), and strict where a
guess would hide a mistake (missing values, truncated input, trailing data).
"""

from typing import Any, Dict, List

from jsonpainter.errors import (
    DepthLimitExceeded,
    MissingValue,
    UnexpectedToken,
    UnterminatedContainer,
)
from jsonpainter.tokenizer import Token, TokenKind, TokenStream
from jsonpainter.values import UNDEFINED

# Deep enough for real data, shallow enough that build and render stay inside
# the default interpreter recursion limit
DEFAULT_MAX_DEPTH = 128

KEYWORDS = {
    "null": None,
    "undefined": UNDEFINED,
    "true": True,
    "false": False,
}


def _is_punct(token: Token, char: str) -> bool:
    return token.kind is TokenKind.PUNCTUATION and token.text == char


def _unterminated(opener: Token, at: Token) -> UnterminatedContainer:
    kind = "object" if opener.text == "{" else "array"
    return UnterminatedContainer(
        f"{kind} opened at offset {opener.offset} is never closed", at.offset
    )


def _enter(opener: Token, depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise DepthLimitExceeded(f"nesting deeper than {max_depth} levels", opener.offset)


def _parse_value(tokens: TokenStream, depth: int, max_depth: int) -> Any:
    """Parse one value of any kind, dispatching on its first token."""
    token = tokens.next()

    if token.kind in (TokenKind.STRING, TokenKind.NUMBER):
        return token.value
    if token.kind is TokenKind.IDENTIFIER:
        if token.text in KEYWORDS:
            return KEYWORDS[token.text]
        raise UnexpectedToken(f"unexpected identifier {token.text!r}", token.offset)
    if _is_punct(token, "{"):
        return _parse_object(tokens, token, depth + 1, max_depth)
    if _is_punct(token, "["):
        return _parse_array(tokens, token, depth + 1, max_depth)

    raise UnexpectedToken(f"unexpected {token.describe()}, expected a value", token.offset)


def _parse_array(tokens: TokenStream, opener: Token, depth: int, max_depth: int) -> List[Any]:
    """
    Parse array elements after the opening bracket up to and including `]`.
    Commas between elements are optional.
    """
    _enter(opener, depth, max_depth)
    items: List[Any] = []
    while True:
        token = tokens.peek()
        if token.kind is TokenKind.END:
            raise _unterminated(opener, token)
        if _is_punct(token, "]"):
            tokens.next()
            return items

        items.append(_parse_value(tokens, depth, max_depth))

        if _is_punct(tokens.peek(), ","):
            tokens.next()


def _parse_object(tokens: TokenStream, opener: Token, depth: int, max_depth: int) -> Dict[str, Any]:
    """
    Parse object entries after the opening brace up to and including `}`.

    Keys are string literals or bare identifiers. A key that is not followed
    by `:` and a value raises MissingValue; a repeated key keeps its first
    position and takes the last value.
    """
    _enter(opener, depth, max_depth)
    obj: Dict[str, Any] = {}
    while True:
        token = tokens.peek()
        if token.kind is TokenKind.END:
            raise _unterminated(opener, token)
        if _is_punct(token, "}"):
            tokens.next()
            return obj

        key_token = tokens.next()
        if key_token.kind not in (TokenKind.STRING, TokenKind.IDENTIFIER):
            raise UnexpectedToken(
                f"unexpected {key_token.describe()}, expected an object key", key_token.offset
            )
        key = key_token.value

        following = tokens.peek()
        if not _is_punct(following, ":"):
            if following.kind is TokenKind.END:
                raise _unterminated(opener, following)
            raise MissingValue(
                f"missing value for key {key!r}", key_token.offset + len(key_token.text)
            )

        colon = tokens.next()
        following = tokens.peek()
        if following.kind is TokenKind.END or _is_punct(following, ",") or _is_punct(following, "}"):
            raise MissingValue(f"missing value for key {key!r}", colon.offset + 1)

        obj[key] = _parse_value(tokens, depth, max_depth)

        if _is_punct(tokens.peek(), ","):
            tokens.next()


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """
    Parse JSON or JavaScript literal text into raw Python values.

    Empty or whitespace-only input parses to UNDEFINED. Anything left over
    after the root value is an error.

    Args:
        text (str): The literal source
        max_depth (int): Maximum container nesting before DepthLimitExceeded

    Returns:
        Any: None, UNDEFINED, bool, float, str, list or dict

    Raises:
        ParseError: One of its subclasses, carrying the failing offset
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects a str, got {type(text).__name__}")

    tokens = TokenStream(text)
    if tokens.peek().kind is TokenKind.END:
        return UNDEFINED

    value = _parse_value(tokens, 0, max_depth)

    trailing = tokens.next()
    if trailing.kind is not TokenKind.END:
        raise UnexpectedToken(
            f"unexpected {trailing.describe()} after the root value", trailing.offset
        )
    return value
