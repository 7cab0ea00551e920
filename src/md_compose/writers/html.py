"""
Standalone HTML export.

The document is rendered to Markdown, converted with `md_compose.html.to_html`
and wrapped in a minimal page with a print-friendly stylesheet. Tables get
borders so Row/HeaderRow layouts stay readable outside a Markdown viewer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from md_compose.html import HtmlOptions, to_html
from md_compose.renderable import Renderable
from md_compose.writers._io import write_text

PAGE_STYLE = """\
  body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
    font-size: 11pt;
    line-height: 1.35;
    max-width: 60em;
    margin: 2em auto;
  }
  h1, h2, h3 {
    margin: 0.8em 0 0.3em 0;
  }
  p {
    margin: 0.35em 0;
  }
  table {
    border-collapse: collapse;
    margin: 0.6em 0;
  }
  th, td {
    border: 1px solid #999;
    padding: 4px 6px;
    vertical-align: top;
  }
  code, pre {
    font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, "Liberation Mono", monospace;
    font-size: 10pt;
  }
  pre {
    white-space: pre-wrap;
  }
  blockquote {
    border-left: 3px solid #ccc;
    margin-left: 0;
    padding-left: 0.8em;
    color: #555;
  }
"""


def render_page(
    doc: Renderable,
    *,
    title: Optional[str] = None,
    options: Optional[HtmlOptions] = None,
) -> str:
    body = to_html(doc.render(), options)
    page_title = _html_escape(title or "Document")
    return f"""<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>{page_title}</title>
<style>
{PAGE_STYLE}</style>
</head>
<body>
{body}
</body>
</html>
"""


def write_html(
    doc: Renderable,
    path: str | Path,
    *,
    title: Optional[str] = None,
    options: Optional[HtmlOptions] = None,
) -> Path:
    """
    Render `doc` as a standalone HTML page and write it to `path`.

    Raises:
        HtmlConversionError: if the Markdown engine fails.
        DocumentWriteError: if the destination cannot be written.
    """
    return write_text(path, render_page(doc, title=title, options=options))


def _html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
