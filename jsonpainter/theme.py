"""
This module defines how painted output looks: which color each semantic
category gets, and which punctuation each container kind is drawn with.
Both halves of a Theme can be overridden independently; anything a theme
leaves out falls back to the built-in defaults below.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

# Semantic categories a palette assigns colors to
CATEGORIES = (
    "null",
    "undefined",
    "boolean",
    "number",
    "string",
    "symbol",
    "function",
    "object",
    "array",
    "map",
    "set",
    "weakmap",
    "weakset",
    "date",
    "regexp",
    "error",
    "circularReference",
    "propertyKey",
    "punctuation",
)

DEFAULT_PALETTE: Dict[str, str] = {
    "null": "#808080",
    "undefined": "#999999",
    "boolean": "#0066CC",
    "number": "#CC6600",
    "string": "#008844",
    "symbol": "#8844CC",
    "function": "#CC4400",
    "object": "#CC0044",
    "array": "#0088CC",
    "map": "#00AA88",
    "set": "#008866",
    "weakmap": "#BB5500",
    "weakset": "#AA2200",
    "date": "#CCAA00",
    "regexp": "#7700AA",
    "error": "#CC0044",
    "circularReference": "#777777",
    "propertyKey": "#444444",
    "punctuation": "#666666",
}


@dataclass(frozen=True)
class ContainerStyle:
    """
    Punctuation for one container kind.

    Attributes:
        start (Optional[str]): Opening token
        separator (Optional[str]): Between a key and its value (objects and maps)
        delimiter (Optional[str]): Between consecutive entries
        end (Optional[str]): Closing token

    Tokens left as None fall back to the default for the container kind.
    """
    start: Optional[str] = None
    separator: Optional[str] = None
    delimiter: Optional[str] = None
    end: Optional[str] = None


DEFAULT_CONTAINERS: Dict[str, ContainerStyle] = {
    "array": ContainerStyle("[", None, ", ", "]"),
    "object": ContainerStyle("{", ": ", ", ", "}"),
    "map": ContainerStyle("{<", ": ", ", ", ">}"),
    "set": ContainerStyle("{(", None, ", ", ")}"),
    "weakmap": ContainerStyle("(<", ": ", ", ", ">)"),
    "weakset": ContainerStyle("((", None, ", ", "))"),
    "date": ContainerStyle("Date(", None, None, ")"),
    "regexp": ContainerStyle("/", None, None, "/"),
    "error": ContainerStyle("Error(", None, None, ")"),
    "function": ContainerStyle("function(", None, None, ")"),
}

_TOKENS = ("start", "separator", "delimiter", "end")
_BARE = ContainerStyle("", None, None, "")

ContainerOverride = Union[ContainerStyle, Mapping[str, Any]]


class Theme:
    """
    A palette plus a container table, with per-entry fallback to the defaults.

    Args:
        palette: Category -> "#RRGGBB" color. Missing categories use DEFAULT_PALETTE.
        containers: Kind -> ContainerStyle or a dict with any of the keys
            start, separator, delimiter, end. Missing kinds and missing
            tokens use DEFAULT_CONTAINERS.
    """
    def __init__(
        self,
        palette: Optional[Mapping[str, str]] = None,
        containers: Optional[Mapping[str, ContainerOverride]] = None,
    ):
        self.palette = dict(palette or {})
        self.containers = dict(containers or {})

    def color(self, category: str) -> Optional[str]:
        color = self.palette.get(category)
        if color is None:
            color = DEFAULT_PALETTE.get(category)
        return color

    def container(self, kind: str) -> ContainerStyle:
        """Resolve the punctuation for `kind`, filling gaps from the defaults."""
        default = DEFAULT_CONTAINERS.get(kind, _BARE)
        override = self.containers.get(kind)
        if override is None:
            return default

        if isinstance(override, ContainerStyle):
            given = {name: getattr(override, name) for name in _TOKENS}
        else:
            given = dict(override)
        return ContainerStyle(**{
            name: given[name] if given.get(name) is not None else getattr(default, name)
            for name in _TOKENS
        })

    def __repr__(self):
        return f"Theme(palette={self.palette!r}, containers={self.containers!r})"


DEFAULT_THEME = Theme()
