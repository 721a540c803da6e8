import pytest

from jsonpainter import Highlighter, Theme, highlight, highlight_value
from jsonpainter.backends import HtmlBackend, PlainBackend
from jsonpainter.errors import DepthLimitExceeded, MissingValue, UnknownOutputModeError, UnknownPaletteError
from jsonpainter.palettes import PALETTES
from jsonpainter.parser import DEFAULT_MAX_DEPTH


def test_highlight_composes_the_pipeline():
    assert highlight('{"a": 1, "b": [true, null]}', backend=PlainBackend()) == "{a: 1, b: [true, null]}"


def test_highlight_raises_parse_errors():
    with pytest.raises(MissingValue) as ei:
        highlight("{a:}")
    assert ei.value.offset == 3


def test_highlight_value_on_native_graph():
    obj = {"name": "x"}
    obj["self"] = obj
    assert highlight_value(obj, backend=PlainBackend()) == '{name: "x", self: [Circular#0]}'


def test_highlighter_logger_mode():
    hl = Highlighter(output_mode="logger")
    assert hl("{a: 1, b: 'two'}") == '{a: 1, b: "two"}'
    assert hl.highlight_value([1, None]) == "[1, null]"


def test_highlighter_resolves_palette_and_variant():
    hl = Highlighter(palette="forest", variant="dark", output_mode="html")
    assert hl.theme.palette == PALETTES["forest"]["dark"]
    assert isinstance(hl.backend, HtmlBackend)
    assert '<span style="color:#DDAA77">1</span>' in hl.highlight("[1]")


def test_highlighter_container_overrides():
    hl = Highlighter(output_mode="logger", containers={"array": {"start": "<", "delimiter": ";", "end": ">"}})
    assert hl.highlight("[1, 2, 3]") == "<1;2;3>"


def test_explicit_theme_wins():
    theme = Theme(containers={"object": {"start": "(", "end": ")"}})
    hl = Highlighter(theme, palette="forest", output_mode="logger")
    assert hl.theme is theme
    assert hl.highlight("{a: 1}") == "(a: 1)"


def test_configuration_fails_fast():
    with pytest.raises(UnknownPaletteError):
        Highlighter(palette="nope")
    with pytest.raises(UnknownOutputModeError):
        Highlighter(output_mode="chrome")


def test_max_depth_is_forwarded():
    hl = Highlighter(output_mode="logger", max_depth=1)
    assert hl.highlight("[1]") == "[1]"
    with pytest.raises(DepthLimitExceeded):
        hl.highlight("[[1]]")


def test_deepest_accepted_input_renders():
    arrays = "[" * DEFAULT_MAX_DEPTH + "]" * DEFAULT_MAX_DEPTH
    assert highlight(arrays, backend=PlainBackend()) == arrays

    objects = "{a: " * DEFAULT_MAX_DEPTH + "1" + "}" * DEFAULT_MAX_DEPTH
    assert highlight(objects, backend=PlainBackend()) == objects


def test_one_level_past_the_default_is_rejected():
    depth = DEFAULT_MAX_DEPTH + 1
    with pytest.raises(DepthLimitExceeded):
        highlight("[" * depth + "]" * depth)


def test_raised_limit_fails_with_a_parse_error_not_a_crash():
    hl = Highlighter(output_mode="logger", max_depth=100_000)
    with pytest.raises(DepthLimitExceeded) as ei:
        hl.highlight("[" * 5000 + "]" * 5000)
    assert ei.value.offset == 0


def test_debug_traces_to_stderr(capsys):
    hl = Highlighter(output_mode="logger", debug=True)
    assert hl.highlight("[1]") == "[1]"
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[parse]" in captured.err
    assert "[build]" in captured.err
    assert "[render]" in captured.err


def test_debug_is_silent_by_default(capsys):
    Highlighter(output_mode="logger").highlight("[1]")
    assert capsys.readouterr().err == ""
