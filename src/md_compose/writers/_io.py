from __future__ import annotations

import logging
from pathlib import Path

from md_compose.errors import DocumentWriteError

log = logging.getLogger(__name__)


def write_text(path: str | Path, text: str) -> Path:
    """Write UTF-8 text, creating parent directories as needed."""
    out = Path(path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
    except OSError as e:
        raise DocumentWriteError(f"could not write {out}: {e}") from e

    log.debug(f"wrote {len(text)} chars to {out}")
    return out
