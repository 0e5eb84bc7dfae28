import re

import pytest

from arkscript.common import NodeType
from arkscript.errorctx import (
    LineColorContextCounts,
    colorize_line,
    is_pairable_char,
    make_context,
    make_node_based_error_ctx,
    make_token_based_error_ctx,
)
from arkscript.node import Node

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip(text):
    return _ANSI.sub("", text)


@pytest.mark.parametrize("c", list("()[]{}"))
def test_pairable_chars(c):
    assert is_pairable_char(c) is True


@pytest.mark.parametrize("c", list("a <>\"'"))
def test_non_pairable_chars(c):
    assert is_pairable_char(c) is False


def test_colorize_plain_line_unchanged():
    counts = LineColorContextCounts()
    assert colorize_line("let a 1", counts) == "let a 1"
    assert counts == LineColorContextCounts()


def test_colorize_keeps_text_and_counts():
    counts = LineColorContextCounts()
    line = "(let a [1 {2}]) ("
    result = colorize_line(line, counts)
    assert strip(result) == line
    assert counts.open_parentheses == 1
    assert counts.open_square_braces == 0
    assert counts.open_curly_braces == 0


def test_colorize_first_paren_bright_blue():
    counts = LineColorContextCounts()
    assert colorize_line("(", counts) == "\x1b[94m(\x1b[00m"


def test_matching_brackets_share_color():
    counts = LineColorContextCounts()
    result = colorize_line("()", counts)
    colors = re.findall(r"\x1b\[(\d+)m[()]", result)
    assert len(colors) == 2
    assert colors[0] == colors[1]


def test_counts_carry_across_lines():
    counts = LineColorContextCounts()
    colorize_line("((", counts)
    colorize_line(")", counts)
    assert counts.open_parentheses == 1


def test_make_context_underlines():
    code = "abc\ndef foo\nghi\n"
    text = strip(make_context(code, 1, 4, 3))
    lines = text.splitlines()
    assert lines[0] == "    1 | abc"
    assert lines[1] == "    2 | def foo"
    assert lines[2] == "      |     ^^^"
    assert lines[3] == "    3 | ghi"


def test_make_context_clamps_underline_to_line():
    text = strip(make_context("ab\n", 0, 1, 10))
    caret_line = text.splitlines()[1]
    assert caret_line.count("^") == 1


def test_make_context_window_is_limited():
    code = "\n".join(f"line{i}" for i in range(10))
    text = strip(make_context(code, 5, 0, 1))
    numbered = [ln for ln in text.splitlines() if not ln.startswith("      |")]
    assert [ln.split("|")[0].strip() for ln in numbered] == ["3", "4", "5", "6", "7", "8"]


def test_token_based_error_ctx():
    code = "(let a 1)\n(print b)\n"
    text = strip(make_token_based_error_ctx("b", 1, 7, code))
    assert text.startswith("On line 2:7\n")
    assert "    2 | (print b)" in text
    assert "^" in text


def test_node_based_error_ctx_without_file():
    node = Node(NodeType.SYMBOL, "foo")
    node.set_pos(0, 0)
    text = make_node_based_error_ctx("bad thing", node)
    assert text.startswith("bad thing\n\n")
    assert "On line 1:0, got `(Symbol) foo'" in text
    assert "In file" not in text


def test_node_based_error_ctx_with_file(tmp_path):
    path = tmp_path / "code.ark"
    path.write_text("(let a 1)\n(print undefined)\n", encoding="utf-8")
    node = Node(NodeType.SYMBOL, "undefined", line=1, col=7, filename=str(path))
    text = strip(make_node_based_error_ctx("unknown symbol", node))
    assert f"In file {path}\n" in text
    assert "On line 2:7, got `(Symbol) undefined'" in text
    assert "      |        " + "^" * len("undefined") in text