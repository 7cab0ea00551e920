from __future__ import annotations

import pytest

from md_compose.elements import (
    DIVIDER,
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    H1,
    H2,
    H3,
    Italic,
    List,
    OrderedList,
    Strikethrough,
    Text,
)
from md_compose.renderable import Renderable


def test_headings() -> None:
    assert H1("Testing").render() == "# Testing\n"
    assert H2("x").render() == "## x\n"
    assert H3("x").render() == "### x\n"


def test_emphasis() -> None:
    assert Bold("b").render() == "**b**\n"
    assert Italic("i").render() == "*i*\n"
    assert Strikethrough("s").render() == "~~s~~\n"
    assert Code("x = 1").render() == "`x = 1`\n"


def test_text_is_passthrough_without_newline() -> None:
    assert Text("Lorem ipsum etc").render() == "Lorem ipsum etc"
    assert Text("").render() == ""


def test_divider_is_a_constant_text() -> None:
    assert DIVIDER == Text("---\n")
    assert DIVIDER.render() == "---\n"


def test_code_block_is_fenced() -> None:
    assert CodeBlock("print(1)").render() == "```\nprint(1)\n```\n"


def test_block_quote_prefixes_every_line() -> None:
    assert BlockQuote("one").render() == "> one"
    assert BlockQuote("one\ntwo\nthree").render() == "> one\n> two\n> three"
    assert BlockQuote("").render() == "> "


def test_lists() -> None:
    assert OrderedList(["a", "b"]).render() == "1. a\n2. b\n"
    assert List(["a", "b"]).render() == "- a\n- b\n"


def test_lists_accept_any_iterable_and_copy_it() -> None:
    items = ["x", "y"]
    lst = List(items)
    items.append("z")
    assert lst.items == ("x", "y")
    assert OrderedList(iter(["p"])).render() == "1. p\n"


def test_empty_lists_render_empty() -> None:
    assert List([]).render() == ""
    assert OrderedList([]).render() == ""
    assert List().render() == ""


def test_newlines_and_markup_are_not_escaped() -> None:
    assert Bold("a\nb").render() == "**a\nb**\n"
    assert Text("| * _ #").render() == "| * _ #"


@pytest.mark.parametrize(
    "element",
    [
        Text("t"),
        H1("h"),
        Bold("b"),
        BlockQuote("q\nr"),
        CodeBlock("c"),
        List(["a"]),
        OrderedList(["a", "b"]),
    ],
)
def test_render_is_repeatable(element: Renderable) -> None:
    assert isinstance(element, Renderable)
    assert element.render() == element.render()


def test_leaves_are_immutable() -> None:
    h = H1("x")
    with pytest.raises(AttributeError):
        h.text = "y"  # type: ignore[misc]
