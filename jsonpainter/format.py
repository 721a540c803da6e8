"""
This module provides the painter, which turns a typed AST into styled text.
Each node kind has its own painting method; every token that ends up in the
output is handed to the color backend together with the palette color of its
semantic category.
"""

import math
from decimal import Decimal
from typing import Callable, Dict, Iterable, Optional, Tuple

from jsonpainter.backends import AnsiBackend, Backend
from jsonpainter.nodes import ASTNode, NodeKind
from jsonpainter.theme import DEFAULT_THEME, ContainerStyle, Theme

# Characters re-escaped inside painted strings, the inverse of the lexer's escapes
_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def format_number(value: float) -> str:
    """
    Format a number the way JavaScript's String(number) does.

    Examples:
        >>> format_number(1.0), format_number(3.14), format_number(1.23e10)
        ('1', '3.14', '12300000000')
        >>> format_number(1e21), format_number(1e-7), format_number(float("nan"))
        ('1e+21', '1e-7', 'NaN')
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        # Python switches to exponent notation sooner than JavaScript does
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def quote_string(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(char, char) for char in value) + '"'


class Painter:
    """
    Paints AST nodes with a theme and a color backend.

    Painting keeps no state between calls, so one painter can be reused for
    any number of nodes and produces identical output for identical input.

    Args:
        theme (Theme): Palette and container punctuation; defaults to DEFAULT_THEME
        backend (Backend): Turns (color, text) into styled text; defaults to ANSI
    """
    def __init__(self, theme: Optional[Theme] = None, backend: Optional[Backend] = None):
        self.theme = theme or DEFAULT_THEME
        self.backend = backend or AnsiBackend()
        self._painters: Dict[NodeKind, Callable[[ASTNode], str]] = {
            NodeKind.NULL: lambda node: self.apply("null", "null"),
            NodeKind.UNDEFINED: lambda node: self.apply("undefined", "undefined"),
            NodeKind.BOOLEAN: lambda node: self.apply("boolean", "true" if node.value else "false"),
            NodeKind.NUMBER: lambda node: self.apply("number", format_number(node.value)),
            NodeKind.STRING: lambda node: self.apply("string", quote_string(node.value)),
            NodeKind.SYMBOL: self._paint_symbol,
            NodeKind.FUNCTION: self._paint_function,
            NodeKind.CIRCULAR_REFERENCE: self._paint_circular,
            NodeKind.ARRAY: lambda node: self._paint_sequence("array", node.elements),
            NodeKind.SET: lambda node: self._paint_sequence("set", node.elements),
            NodeKind.OBJECT: lambda node: self._paint_entries("object", node.properties.items()),
            NodeKind.MAP: lambda node: self._paint_entries("map", node.entries),
            NodeKind.WEAKMAP: lambda node: self._paint_literal("weakmap", ""),
            NodeKind.WEAKSET: lambda node: self._paint_literal("weakset", ""),
            NodeKind.DATE: lambda node: self._paint_literal("date", node.text),
            NodeKind.REGEXP: lambda node: self._paint_literal("regexp", node.text),
            NodeKind.ERROR: lambda node: self._paint_literal("error", node.text),
        }

    def apply(self, category: str, text: str) -> str:
        """Style one token with the color of `category`. Empty tokens stay empty."""
        if not text:
            return ""
        return self.backend(self.theme.color(category), text)

    def paint(self, node: ASTNode) -> str:
        """
        Paint `node` and, recursively, everything below it.

        Args:
            node (ASTNode): Any AST node

        Returns:
            str: The styled text
        """
        return self._painters[node.kind](node)

    def _paint_symbol(self, node) -> str:
        text = "Symbol" if node.description is None else f"Symbol({node.description})"
        return self.apply("symbol", text)

    def _paint_function(self, node) -> str:
        style = self.theme.container("function")
        return self.apply("function", style.start + style.end)

    def _paint_circular(self, node) -> str:
        suffix = "" if node.reference_id is None else f"#{node.reference_id}"
        return self.apply("circularReference", f"[Circular{suffix}]")

    def _wrap(self, kind: str, style: ContainerStyle, inner: str) -> str:
        return self.apply(kind, style.start) + inner + self.apply(kind, style.end)

    def _paint_sequence(self, kind: str, elements: Iterable[ASTNode]) -> str:
        style = self.theme.container(kind)
        delimiter = self.apply("punctuation", style.delimiter or "")
        inner = delimiter.join(self.paint(element) for element in elements)
        return self._wrap(kind, style, inner)

    def _paint_entries(self, kind: str, entries: Iterable[Tuple[str, ASTNode]]) -> str:
        style = self.theme.container(kind)
        separator = self.apply("punctuation", style.separator or "")
        delimiter = self.apply("punctuation", style.delimiter or "")
        inner = delimiter.join(
            self.apply("propertyKey", key) + separator + self.paint(value)
            for key, value in entries
        )
        return self._wrap(kind, style, inner)

    def _paint_literal(self, kind: str, text: str) -> str:
        # Wrapper kinds are painted as a single token in their own color
        style = self.theme.container(kind)
        return self.apply(kind, style.start + text + style.end)


def render(node: ASTNode, theme: Optional[Theme] = None, backend: Optional[Backend] = None) -> str:
    """
    Paint an AST node into styled text.

    Args:
        node (ASTNode): The root node, usually from `jsonpainter.build`
        theme (Theme): Optional theme; missing palette or container entries use defaults
        backend (Backend): Optional color backend; ANSI terminal colors by default

    Returns:
        str: The painted text

    Example:
        >>> from jsonpainter import build, render
        >>> from jsonpainter.backends import PlainBackend
        >>> render(build({"name": "John", "scores": [95, 87]}), backend=PlainBackend())
        '{name: "John", scores: [95, 87]}'
    """
    return Painter(theme, backend).paint(node)
