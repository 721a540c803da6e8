"""
jsonpainter is a library for colorized rendering of JSON and JavaScript literal values.
This module serves as the main entry point for the library, exposing the parser,
the AST builder, the painter and the high-level highlighter.
"""

__version__ = "0.1.0"

# Text -> raw values
from jsonpainter.parser import parse
# Raw or native values -> typed AST
from jsonpainter.builder import build
# Typed AST -> styled text
from jsonpainter.format import render
# Theme types used to customize painting
from jsonpainter.theme import ContainerStyle, Theme
# One-call helpers and the configured highlighter
from jsonpainter.main import Highlighter, highlight, highlight_value
# Error hierarchy
from jsonpainter.errors import ConfigurationError, ParseError
# Values with no native Python spelling
from jsonpainter.values import UNDEFINED, Symbol
