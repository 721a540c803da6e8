import pytest

import jsonpainter.palettes as palettes
from jsonpainter.backends import OUTPUT_MODES, AnsiBackend, HtmlBackend, PlainBackend, get_backend, hex_to_rgb
from jsonpainter.errors import MissingVariantError, UnknownOutputModeError, UnknownPaletteError
from jsonpainter.theme import CATEGORIES, DEFAULT_CONTAINERS, DEFAULT_PALETTE, ContainerStyle, Theme


def test_default_palette_covers_every_category():
    assert set(DEFAULT_PALETTE) == set(CATEGORIES)
    assert len(CATEGORIES) == 19


def test_theme_color_fallback():
    theme = Theme(palette={"string": "#010203"})
    assert theme.color("string") == "#010203"
    assert theme.color("number") == DEFAULT_PALETTE["number"]


def test_theme_container_fallback():
    theme = Theme(containers={"set": {"delimiter": "|"}})
    assert theme.container("array") == DEFAULT_CONTAINERS["array"]
    assert theme.container("set") == ContainerStyle("{(", None, "|", ")}")


def test_style_override_falls_back_like_dict_override():
    from_style = Theme(containers={"array": ContainerStyle(delimiter=";")})
    from_dict = Theme(containers={"array": {"delimiter": ";"}})
    assert from_style.container("array") == ContainerStyle("[", None, ";", "]")
    assert from_style.container("array") == from_dict.container("array")


def test_explicit_empty_token_is_kept():
    theme = Theme(containers={"array": ContainerStyle(start="", end="")})
    assert theme.container("array") == ContainerStyle("", None, ", ", "")


def test_unknown_kind_has_bare_tokens():
    assert Theme().container("nonesuch") == ContainerStyle("", None, None, "")


def test_default_array_tokens():
    assert DEFAULT_CONTAINERS["array"] == ContainerStyle("[", None, ", ", "]")


def test_registered_palettes_are_complete():
    for name, variants in palettes.PALETTES.items():
        for variant in palettes.VARIANTS:
            assert set(variants[variant]) == set(CATEGORIES), (name, variant)


def test_get_palette_variants():
    assert palettes.get_palette("default", "light") == DEFAULT_PALETTE
    assert palettes.get_palette("default", "dark")["null"] == "#A0A0A0"
    assert palettes.get_palette("forest", "light")["string"] == "#227744"


def test_non_dark_variant_selects_light():
    assert palettes.get_palette("default", "invalid") == palettes.get_palette("default", "light")
    assert palettes.get_palette("pastel", "DARK") == palettes.get_palette("pastel", "light")


def test_get_palette_returns_a_copy():
    palettes.get_palette("default")["null"] = "#FFFFFF"
    assert palettes.PALETTES["default"]["light"]["null"] == "#808080"


def test_unknown_palette_lists_known_names():
    with pytest.raises(UnknownPaletteError) as ei:
        palettes.get_palette("nonexistent", "light")
    assert "Unknown palette: nonexistent" in str(ei.value)
    assert "default" in ei.value.known
    assert "forest" in str(ei.value)


def test_missing_variant(monkeypatch):
    monkeypatch.setitem(palettes.PALETTES, "half", {"light": dict(DEFAULT_PALETTE)})
    assert palettes.get_palette("half", "light") == DEFAULT_PALETTE
    with pytest.raises(MissingVariantError) as ei:
        palettes.get_palette("half", "dark")
    assert 'Palette "half" does not have a dark variant' in str(ei.value)


def test_hex_to_rgb():
    assert hex_to_rgb("#CC6600") == (204, 102, 0)
    assert hex_to_rgb("#fff") == (255, 255, 255)
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_get_backend():
    assert set(OUTPUT_MODES) == {"ansi", "html", "logger"}
    assert isinstance(get_backend("ansi"), AnsiBackend)
    assert isinstance(get_backend("html"), HtmlBackend)
    assert isinstance(get_backend("logger"), PlainBackend)


@pytest.mark.parametrize("mode", ["invalid", "", "ANSI"])
def test_unknown_output_mode(mode):
    with pytest.raises(UnknownOutputModeError) as ei:
        get_backend(mode)
    assert f"Invalid output mode: {mode}" in str(ei.value)


def test_backends_leave_uncolored_text_alone():
    assert AnsiBackend()(None, "x") == "x"
    assert HtmlBackend()(None, "a<b") == "a&lt;b"
    assert PlainBackend()("#FF0000", "x") == "x"
