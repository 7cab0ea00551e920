from __future__ import annotations

import math
from numbers import Real
from typing import Any


def is_finite(x: Any) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool) and math.isfinite(float(x))


def format_cell(value: Any, fmt: str | None = None) -> str:
    """
    Stringify one table cell.

    None becomes an empty cell and booleans are spelled lowercase. A format
    spec only applies to finite real numbers; anything else falls back to str().
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if fmt and is_finite(value):
        return format(value, fmt)
    return str(value)


def format_row(values: Any, fmt: str | None = None) -> list[str]:
    return [format_cell(v, fmt) for v in values]
