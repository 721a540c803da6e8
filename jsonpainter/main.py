"""
jsonpainter: colorized rendering of JSON and JavaScript literal values.
This module provides the high-level entry points that chain the three stages
together: parse text into raw values, build a typed AST, and paint it.
"""

import sys
from typing import Any, Mapping, Optional

from termcolor import cprint

from jsonpainter.backends import Backend, get_backend
from jsonpainter.builder import build
from jsonpainter.errors import DepthLimitExceeded
from jsonpainter.format import render
from jsonpainter.palettes import get_palette
from jsonpainter.parser import DEFAULT_MAX_DEPTH, parse
from jsonpainter.theme import ContainerOverride, Theme


def _too_deep() -> DepthLimitExceeded:
    return DepthLimitExceeded("value nests too deeply to highlight", 0)


def highlight(text: str, theme: Optional[Theme] = None, backend: Optional[Backend] = None) -> str:
    """
    Parse literal text and return it painted.

    Args:
        text (str): JSON or JavaScript literal source
        theme (Theme): Optional theme
        backend (Backend): Optional color backend, ANSI by default

    Returns:
        str: The painted text

    Raises:
        ParseError: If `text` is not a valid literal
    """
    try:
        return render(build(parse(text)), theme, backend)
    except RecursionError:
        raise _too_deep() from None


def highlight_value(value: Any, theme: Optional[Theme] = None, backend: Optional[Backend] = None) -> str:
    """Paint an in-memory Python value without going through the parser."""
    return render(build(value), theme, backend)


class Highlighter:
    """
    A configured highlighter.

    All configuration is checked in the constructor, so a bad palette name,
    theme variant or output mode fails before any input is touched.

    Attributes:
        theme (Theme): The resolved theme
        backend (Backend): The color backend for the chosen output mode
    """
    def __init__(
        self,
        theme: Optional[Theme] = None,
        *,
        palette: str = "default",
        variant: str = "light",
        containers: Optional[Mapping[str, ContainerOverride]] = None,
        output_mode: str = "ansi",
        max_depth: int = DEFAULT_MAX_DEPTH,
        debug: bool = False,
    ):
        """
        Initialize the Highlighter.

        Args:
            theme: A ready-made theme. When given, `palette` and `containers` are ignored.
            palette: Registry name of the palette to use, e.g. "forest"
            variant: "dark" for the dark palette variant, anything else for light
            containers: Container punctuation overrides
            output_mode: One of "ansi", "html" or "logger"
            max_depth: Maximum container nesting accepted by the parser
            debug: Whether to trace each stage to stderr
        """
        self.debug_on = debug
        self.max_depth = max_depth
        self.backend = get_backend(output_mode)

        if theme is None:
            theme = Theme(get_palette(palette, variant), containers)
        self.theme = theme

        self.debug("[init]", f"output_mode={output_mode} palette={palette} variant={variant}")

    def debug(self, caller: str, value: Any, is_input: bool = False):
        """Print debug information to stderr if debug mode is enabled."""
        if self.debug_on:
            cprint(caller, "green", end=" ", file=sys.stderr)
            cprint(value, "yellow" if is_input else "blue", file=sys.stderr)

    def highlight(self, text: str) -> str:
        """
        Parse, build and paint `text`.

        Raises:
            ParseError: If `text` is not a valid literal
        """
        self.debug("[parse]", text, is_input=True)
        try:
            raw = parse(text, max_depth=self.max_depth)
            self.debug("[parse]", repr(raw))
            return self.highlight_value(raw)
        except RecursionError:
            # Only reachable when max_depth was raised past the default
            raise _too_deep() from None

    def highlight_value(self, value: Any) -> str:
        """Build and paint an in-memory value."""
        node = build(value)
        self.debug("[build]", repr(node))
        painted = render(node, self.theme, self.backend)
        self.debug("[render]", f"{len(painted)} characters")
        return painted

    def __call__(self, text: str) -> str:
        return self.highlight(text)
