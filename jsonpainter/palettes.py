"""
This module provides the palette registry: named palettes, each with a light
and a dark variant. Colors are listed in CATEGORIES order.
"""

from typing import Dict

from jsonpainter.errors import MissingVariantError, UnknownPaletteError
from jsonpainter.theme import CATEGORIES, DEFAULT_PALETTE

Palette = Dict[str, str]

VARIANTS = ("light", "dark")


def _palette(colors: str) -> Palette:
    values = colors.split()
    if len(values) != len(CATEGORIES):
        raise ValueError(f"expected {len(CATEGORIES)} colors, got {len(values)}")
    return dict(zip(CATEGORIES, values))


PALETTES: Dict[str, Dict[str, Palette]] = {
    "default": {
        "light": dict(DEFAULT_PALETTE),
        "dark": _palette(
            "#A0A0A0 #B8B8B8 #66AAFF #FFAA66 #66DD99 #CC99FF #FF9966 #FF6699 #66CCFF #66DDCC "
            "#66CCAA #FFAA77 #FF7766 #FFDD66 #BB77FF #FF6699 #AAAAAA #CCCCCC #999999"
        ),
    },
    "pastel": {
        "light": _palette(
            "#7A7A8A #8A8A9A #5A7A9A #AA7A5A #5A9A7A #9A5A9A #AA6A5A #AA5A6A #5A8AAA #5AAAAA "
            "#5A9A8A #AA8A5A #AA5A5A #AAAA5A #8A5A9A #AA5A6A #7A7A8A #5A5A6A #6A6A7A"
        ),
        "dark": _palette(
            "#C8C8D8 #D8D8E8 #B8D8F8 #F8C8A8 #B8E8C8 #E8B8E8 #F8C8B8 #F8B8C8 #B8D8F8 #B8F8F8 "
            "#B8E8D8 #F8D8B8 #F8B8B8 #F8F8B8 #D8B8E8 #F8B8C8 #C8C8D8 #D8D8E8 #C8C8D8"
        ),
    },
    "forest": {
        "light": _palette(
            "#445544 #556655 #225577 #885522 #227744 #662277 #884422 #882233 #336688 #228877 "
            "#227755 #886622 #882222 #888822 #662277 #882233 #445544 #223322 #334433"
        ),
        "dark": _palette(
            "#99BB99 #AACCAA #77BBEE #DDAA77 #77CC99 #BB77CC #DD9977 #DD7788 #88CCFF #77DDCC "
            "#77CCAA #DDBB77 #DD7777 #DDDD77 #BB77CC #DD7788 #99BB99 #BBDDBB #AACCAA"
        ),
    },
    "bold": {
        "light": _palette(
            "#666666 #888888 #0055DD #DD5500 #00AA00 #9900DD #DD3300 #DD0044 #0088DD #00CCAA "
            "#00AA77 #CC5500 #BB0000 #DDAA00 #7700BB #DD0044 #666666 #333333 #555555"
        ),
        "dark": _palette(
            "#BBBBBB #DDDDDD #66AAFF #FFAA44 #44FF44 #EE44FF #FF8844 #FF4488 #44DDFF #44FFDD "
            "#44FFBB #FFAA44 #FF4444 #FFFF44 #CC44FF #FF4488 #BBBBBB #EEEEEE #DDDDDD"
        ),
    },
    "dusk": {
        "light": _palette(
            "#554466 #665577 #445588 #885544 #447755 #774477 #885544 #884455 #446699 #448888 "
            "#447766 #886644 #884444 #888844 #664477 #884455 #554466 #443355 #554466"
        ),
        "dark": _palette(
            "#BBAACC #CCBBDD #AABBEE #EEBBAA #AADDBB #DDAAEE #EEBBAA #EEAABB #AACCFF #AAEEEE "
            "#AADDCC #EECCAA #EEAAAA #EEEEAA #CCAADD #EEAABB #BBAACC #DDCCEE #CCBBDD"
        ),
    },
    "grayscale": {
        "light": _palette(
            "#444444 #555555 #333333 #666666 #3A3A3A #4A4A4A #6A6A6A #3F3F3F #2A2A2A #505050 "
            "#454545 #5F5F5F #484848 #5A5A5A #3D3D3D #5D5D5D #444444 #333333 #555555"
        ),
        "dark": _palette(
            "#BBBBBB #CCCCCC #AAAAAA #DDDDDD #B5B5B5 #C5C5C5 #E5E5E5 #BFBFBF #A5A5A5 #D0D0D0 "
            "#C8C8C8 #DFDFDF #C3C3C3 #D5D5D5 #B8B8B8 #D8D8D8 #BBBBBB #EEEEEE #CCCCCC"
        ),
    },
}


def resolve_variant(variant: str) -> str:
    """"dark" selects the dark branch; every other value selects "light"."""
    return "dark" if variant == "dark" else "light"


def get_palette(name: str, variant: str = "light") -> Palette:
    """
    Look up a palette in the registry.

    Args:
        name (str): Registry name, e.g. "default" or "forest"
        variant (str): "dark" for the dark variant, anything else for light

    Returns:
        Palette: A copy of the category -> color mapping

    Raises:
        UnknownPaletteError: If `name` is not registered
        MissingVariantError: If the palette lacks the requested variant
    """
    if name not in PALETTES:
        raise UnknownPaletteError(name, PALETTES)
    variant = resolve_variant(variant)
    palette = PALETTES[name].get(variant)
    if palette is None:
        raise MissingVariantError(name, variant)
    return dict(palette)
