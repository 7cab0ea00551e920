from __future__ import annotations

from typing import Any, Iterable, Sequence

from md_compose.html import HtmlConverter, to_html
from md_compose.renderable import Renderable, render_all
from md_compose.utils.formatting import format_row


class Column:
    """
    Vertical stack of renderables.

    Every child is followed by one extra newline, which leaves a blank line
    between blocks that already end with their own newline.
    """

    def __init__(self, *items: Renderable) -> None:
        self._items: list[Renderable] = list(items)

    @property
    def items(self) -> Sequence[Renderable]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, *items: Renderable) -> Column:
        self._items.extend(items)
        return self

    def render(self) -> str:
        return "".join(f"{text}\n" for text in render_all(self._items))


class Row:
    """
    Renderables side by side, as a single-row HTML table without a header.

    Cells hold the raw child output; the blank line after <td> lets GFM
    readers keep parsing the cell body as Markdown.
    """

    def __init__(self, *items: Renderable) -> None:
        self._items: list[Renderable] = list(items)

    @property
    def items(self) -> Sequence[Renderable]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, *items: Renderable) -> Row:
        self._items.extend(items)
        return self

    def render(self) -> str:
        lines = ["<table>\n", "<tr>\n"]
        for text in render_all(self._items):
            lines.append(f"<td>\n\n{text}</td>\n")
        lines.append("</tr>\n")
        lines.append("</table>\n")
        return "".join(lines)


class HeaderRow:
    """
    HTML table with one header row and one data row.

    Data cells go through `converter` (Markdown -> HTML) before embedding, so a
    cell can itself be a pipe table. Header labels are emitted literally.
    Header and cell counts are independent: a mismatch renders ragged.
    """

    def __init__(self, *headers: str, converter: HtmlConverter | None = None) -> None:
        self._headers: tuple[str, ...] = tuple(headers)
        self._items: list[Renderable] = []
        self._converter: HtmlConverter = converter or to_html

    @property
    def headers(self) -> Sequence[str]:
        return self._headers

    @property
    def items(self) -> Sequence[Renderable]:
        return tuple(self._items)

    def add(self, *items: Renderable) -> HeaderRow:
        self._items.extend(items)
        return self

    def render(self) -> str:
        lines = ["<table>\n", "<thead>\n", "<tr>\n"]
        for label in self._headers:
            lines.append(f"<th>\n\n{label}\n</th>\n")
        lines.append("</tr>\n")
        lines.append("</thead>\n")

        lines.append("<tbody>\n")
        lines.append("<tr>\n")
        for text in render_all(self._items):
            lines.append(f"<td>\n\n{self._converter(text)}</td>\n")
        lines.append("</tr>\n")
        lines.append("</tbody>\n")
        lines.append("</table>\n")
        return "".join(lines)


class Table:
    """
    GitHub-flavored pipe table.

    | Field | Value |
    | ----- | ----- |
    | Name  | Test  |

    Separator dashes match each column label's length. Short rows are padded
    with empty cells at render time; long rows are emitted unchanged.
    """

    def __init__(self, *columns: str) -> None:
        self._columns: tuple[str, ...] = tuple(columns)
        self._rows: list[list[str]] = []

    @property
    def columns(self) -> Sequence[str]:
        return self._columns

    @property
    def rows(self) -> Sequence[Sequence[str]]:
        return tuple(tuple(r) for r in self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def add(self, *rows: Iterable[str]) -> Table:
        self._rows.extend(list(r) for r in rows)
        return self

    def add_row(self, *cells: str) -> Table:
        self._rows.append(list(cells))
        return self

    def add_any(self, *rows: Iterable[Any], fmt: str | None = None) -> Table:
        self._rows.extend(format_row(r, fmt) for r in rows)
        return self

    def add_row_any(self, *values: Any, fmt: str | None = None) -> Table:
        self._rows.append(format_row(values, fmt))
        return self

    def render(self) -> str:
        n_cols = len(self._columns)
        lines = [_pipe_line(self._columns)]
        lines.append(_pipe_line("-" * len(c) for c in self._columns))
        for row in self._rows:
            if len(row) < n_cols:
                row = row + [""] * (n_cols - len(row))
            lines.append(_pipe_line(row))
        return "".join(lines)


def _pipe_line(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"
