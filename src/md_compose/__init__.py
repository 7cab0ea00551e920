from md_compose.containers import Column, HeaderRow, Row, Table
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
from md_compose.errors import DocumentWriteError, HtmlConversionError, MdComposeError
from md_compose.html import HtmlConverter, HtmlOptions, make_converter, to_html
from md_compose.renderable import Renderable

__all__ = [
    "DIVIDER",
    "BlockQuote",
    "Bold",
    "Code",
    "CodeBlock",
    "Column",
    "DocumentWriteError",
    "H1",
    "H2",
    "H3",
    "HeaderRow",
    "HtmlConversionError",
    "HtmlConverter",
    "HtmlOptions",
    "Italic",
    "List",
    "MdComposeError",
    "OrderedList",
    "Renderable",
    "Row",
    "Strikethrough",
    "Table",
    "Text",
    "make_converter",
    "to_html",
]
