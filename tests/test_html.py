from __future__ import annotations

import pytest

from md_compose.containers import Table
from md_compose.elements import H1
from md_compose.errors import HtmlConversionError
from md_compose.html import HtmlOptions, make_converter, to_html


def test_table_becomes_html_table() -> None:
    md = Table("Field", "Value").add(["Name", "Test"]).render()
    html = to_html(md)
    assert "<table>" in html
    assert "<th>Field</th>" in html
    assert "| -----" not in html


def test_headings_get_ids() -> None:
    assert to_html(H1("Testing").render()) == '<h1 id="testing">Testing</h1>'


def test_absolute_links_open_in_new_target() -> None:
    assert 'target="_blank"' in to_html("[a](https://example.com)")
    assert "target" not in to_html("[a](other.md)")


def test_strikethrough_becomes_del() -> None:
    assert to_html("~~s~~") == "<p><del>s</del></p>"
    assert "<del>" not in to_html("`~~s~~`")


def test_options_can_disable_extras() -> None:
    opts = HtmlOptions(strikethrough=False, target_blank=False)
    assert "<del>" not in to_html("~~s~~", opts)
    assert "target" not in to_html("[a](https://example.com)", opts)


def test_make_converter_binds_options() -> None:
    convert = make_converter(HtmlOptions(strikethrough=False))
    assert convert("~~s~~") == "<p>~~s~~</p>"


def test_conversion_is_deterministic() -> None:
    md = "# A\n\n# A\n"
    assert to_html(md) == to_html(md)


def test_engine_failure_is_raised_not_swallowed() -> None:
    opts = HtmlOptions(extensions=("md_compose_no_such_extension",))
    with pytest.raises(HtmlConversionError) as excinfo:
        to_html("x", opts)
    assert excinfo.value.__cause__ is not None
