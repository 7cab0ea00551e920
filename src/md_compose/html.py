"""
Markdown -> HTML conversion used to embed rendered content inside HTML tables.

HeaderRow only depends on the `HtmlConverter` signature, so any
`Callable[[str], str]` can stand in for `to_html` (tests pass a stub).

Engine settings mirror what a GitHub-style reader expects:
- pipe tables, fenced code, saner list handling
- automatic heading ids (toc)
- `~~text~~` as <del>
- absolute links open in a new target
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor
from markdown.treeprocessors import Treeprocessor

from md_compose.errors import HtmlConversionError

log = logging.getLogger(__name__)

HtmlConverter = Callable[[str], str]

STRIKETHROUGH_RE = r"(~~)(.+?)~~"


@dataclass(frozen=True)
class HtmlOptions:
    """python-markdown configuration for `to_html`."""

    extensions: tuple[str, ...] = ("tables", "fenced_code", "toc", "sane_lists")
    strikethrough: bool = True
    target_blank: bool = True
    output_format: str = "html"


class StrikethroughExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # Below backticks (190) so code spans keep their tildes.
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "md_compose_del", 175
        )


class _TargetBlankTreeprocessor(Treeprocessor):
    def run(self, root: Element) -> None:
        for link in root.iter("a"):
            href = link.get("href", "")
            if "://" in href or href.startswith("//"):
                link.set("target", "_blank")


class TargetBlankExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # Priority 0: after the inline processor has created the <a> elements.
        md.treeprocessors.register(
            _TargetBlankTreeprocessor(md), "md_compose_target_blank", 0
        )


def _build_engine(options: HtmlOptions) -> markdown.Markdown:
    extensions: list[str | Extension] = list(options.extensions)
    if options.strikethrough:
        extensions.append(StrikethroughExtension())
    if options.target_blank:
        extensions.append(TargetBlankExtension())
    return markdown.Markdown(extensions=extensions, output_format=options.output_format)


def to_html(markdown_text: str, options: HtmlOptions | None = None) -> str:
    """
    Convert a Markdown fragment to HTML.

    A fresh engine is built per call; python-markdown keeps per-document state
    (toc ids, references) that must not leak between cells.

    Raises:
        HtmlConversionError: if the engine fails on the input.
    """
    opts = options or HtmlOptions()
    try:
        engine = _build_engine(opts)
        html = engine.convert(markdown_text)
    except Exception as e:
        raise HtmlConversionError(
            f"Markdown->HTML conversion failed ({len(markdown_text)} chars of input)"
        ) from e

    log.debug(f"converted {len(markdown_text)} chars of markdown to {len(html)} chars of html")
    return html


def make_converter(options: HtmlOptions) -> HtmlConverter:
    """Bind `options` into a one-argument converter for HeaderRow."""

    def convert(markdown_text: str) -> str:
        return to_html(markdown_text, options)

    return convert
