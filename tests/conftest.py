from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    # Allow importing md_compose without requiring an editable install.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
