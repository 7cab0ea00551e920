from __future__ import annotations

from pathlib import Path

from md_compose.renderable import Renderable
from md_compose.writers._io import write_text


def write_markdown(doc: Renderable, path: str | Path) -> Path:
    """Render `doc` and write it to `path` (parents are created)."""
    return write_text(path, doc.render())
