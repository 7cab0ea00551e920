from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from md_compose.containers import Column, HeaderRow, Row, Table
from md_compose.elements import (
    DIVIDER,
    Bold,
    H1,
    H2,
    H3,
    Italic,
    List,
    OrderedList,
    Strikethrough,
    Text,
)
from md_compose.errors import DocumentWriteError, HtmlConversionError
from md_compose.writers import write_html, write_markdown

log = logging.getLogger(__name__)

DEFAULT_OUT = Path("test.md")


def build_demo_document() -> Column:
    table = Table("Field", "Value").add(
        ["Name", "Test"],
        ["Age", "-1"],
        ["Hello"],
    )

    return Column(
        H1("Testing"),
        Bold("Very bold"),
        table,
        H2("Testing 2"),
        Italic("Emphasis"),
        Strikethrough("Not valid"),
        H3("Testing 3"),
        Text("Lorem ipsum etc"),
        List(["Apple", "Banana", "Orange"]),
        OrderedList(["Item 1", "Item 2", "Item 3"]),
        DIVIDER,
        Row(table, table),
        HeaderRow("**Table 1**", "*Table 2*").add(table, table),
        HeaderRow("0", "1").add(table, table),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build the sample document and write it as Markdown."
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=DEFAULT_OUT,
        help="Output Markdown file",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Also write a standalone HTML page to this path",
    )
    parser.add_argument(
        "--print",
        dest="echo",
        action="store_true",
        help="Echo the Markdown to stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    doc = build_demo_document()
    if args.echo:
        print(doc.render(), end="")

    try:
        md_path = write_markdown(doc, args.out)
        log.info(f"Wrote markdown to: {md_path}")
        if args.html is not None:
            html_path = write_html(doc, args.html, title="Testing")
            log.info(f"Wrote html to: {html_path}")
    except (DocumentWriteError, HtmlConversionError) as e:
        log.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
