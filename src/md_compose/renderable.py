from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Anything that can produce its final Markdown text.

    Leaves and containers implement this; so can user objects, which makes
    them valid children of any container.
    """

    def render(self) -> str: ...


def render_all(items: Iterable[Renderable]) -> list[str]:
    return [item.render() for item in items]
