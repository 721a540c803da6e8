"""
This module provides the color backends used by the painter. A backend is a
callable taking a "#RRGGBB" color (or None) and a piece of text, and
returning that text styled for one output target.
"""

import html
from typing import Dict, Optional, Tuple

from termcolor import colored

from jsonpainter.errors import UnknownOutputModeError


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert "#RRGGBB" (or "#RGB") to an (r, g, b) tuple."""
    digits = color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {color}")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


class Backend:
    """Base class: returns the text unchanged."""
    name: Optional[str] = None

    def __call__(self, color: Optional[str], text: str) -> str:
        return text


class PlainBackend(Backend):
    """
    No styling at all. Used for log files and anywhere escape sequences
    would be noise.
    """
    name = "logger"


class AnsiBackend(Backend):
    """
    24-bit ANSI terminal colors through termcolor.

    Color is forced on, because the output is meant to survive being piped
    or captured.
    """
    name = "ansi"

    def __call__(self, color: Optional[str], text: str) -> str:
        if not color:
            return text
        return colored(text, hex_to_rgb(color), force_color=True)


class HtmlBackend(Backend):
    """Inline-styled HTML spans; the text itself is HTML-escaped."""
    name = "html"

    def __call__(self, color: Optional[str], text: str) -> str:
        escaped = html.escape(text, quote=False)
        if not color:
            return escaped
        return f'<span style="color:{color}">{escaped}</span>'


BACKENDS: Dict[str, type] = {
    "ansi": AnsiBackend,
    "html": HtmlBackend,
    "logger": PlainBackend,
}

OUTPUT_MODES = tuple(BACKENDS)


def get_backend(mode: str) -> Backend:
    """
    Create the backend for an output mode.

    Raises:
        UnknownOutputModeError: If `mode` is not one of OUTPUT_MODES
    """
    if mode not in BACKENDS:
        raise UnknownOutputModeError(mode, OUTPUT_MODES)
    return BACKENDS[mode]()
