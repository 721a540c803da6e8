"""
This module defines the exceptions raised by jsonpainter.
There are two disjoint families: parse errors, which always carry the source
offset where parsing stopped, and configuration errors, which are raised
before any input is read.
"""

from typing import Iterable, Optional


class JsonPainterError(Exception):
    """Base class for every error raised by jsonpainter."""


class ParseError(JsonPainterError):
    """
    Raised when literal text cannot be turned into a value.

    Args:
        message (str): Human readable description of the problem
        offset (int): Zero-based character offset in the source text
    """
    def __init__(self, message: str, offset: int):
        self.message = message
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


class UnexpectedToken(ParseError):
    """A token appeared where the grammar does not allow it."""


class MissingValue(ParseError):
    """An object key was not followed by a value."""


class UnterminatedContainer(ParseError):
    """Input ended before the closing bracket of an object or array."""


class UnterminatedString(ParseError):
    """Input ended before the closing quote of a string literal."""


class DepthLimitExceeded(ParseError):
    """Containers are nested deeper than the parser allows."""


class ConfigurationError(JsonPainterError):
    """Raised for bad palette, theme variant or output mode selections."""


class UnknownPaletteError(ConfigurationError):
    """
    Raised when a palette name is not in the registry.

    Args:
        name (str): The requested palette name
        known (Iterable[str]): Names available in the registry
    """
    def __init__(self, name: str, known: Iterable[str]):
        self.name = name
        self.known = list(known)
        super().__init__(
            f"Unknown palette: {name}. Available palettes: {', '.join(self.known)}"
        )


class MissingVariantError(ConfigurationError):
    def __init__(self, name: str, variant: str):
        self.name = name
        self.variant = variant
        super().__init__(f'Palette "{name}" does not have a {variant} variant')


class UnknownOutputModeError(ConfigurationError):
    def __init__(self, mode: Optional[str], known: Iterable[str]):
        self.mode = mode
        self.known = list(known)
        super().__init__(
            f"Invalid output mode: {mode}. Valid modes: {', '.join(self.known)}"
        )
