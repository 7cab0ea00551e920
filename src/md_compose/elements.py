from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Text:
    """Plain passthrough. No newline is added."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class H1:
    text: str

    def render(self) -> str:
        return f"# {self.text}\n"


@dataclass(frozen=True)
class H2:
    text: str

    def render(self) -> str:
        return f"## {self.text}\n"


@dataclass(frozen=True)
class H3:
    text: str

    def render(self) -> str:
        return f"### {self.text}\n"


@dataclass(frozen=True)
class Bold:
    text: str

    def render(self) -> str:
        return f"**{self.text}**\n"


@dataclass(frozen=True)
class Italic:
    text: str

    def render(self) -> str:
        return f"*{self.text}*\n"


@dataclass(frozen=True)
class Strikethrough:
    text: str

    def render(self) -> str:
        return f"~~{self.text}~~\n"


@dataclass(frozen=True)
class Code:
    """Inline code span on its own line."""

    text: str

    def render(self) -> str:
        return f"`{self.text}`\n"


@dataclass(frozen=True)
class CodeBlock:
    """Fenced block. The payload is emitted as-is between the fences."""

    code: str

    def render(self) -> str:
        return f"```\n{self.code}\n```\n"


@dataclass(frozen=True)
class BlockQuote:
    """
    Multi-line quote: every line of the payload gets a `> ` prefix.
    Unlike the other leaves, no trailing newline is added.
    """

    text: str

    def render(self) -> str:
        return "> " + "\n> ".join(self.text.split("\n"))


@dataclass(frozen=True)
class OrderedList:
    items: tuple[str, ...]

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def render(self) -> str:
        return "".join(f"{i}. {item}\n" for i, item in enumerate(self.items, start=1))


@dataclass(frozen=True)
class List:
    """Bullet list, one `- item` line per entry."""

    items: tuple[str, ...]

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def render(self) -> str:
        return "".join(f"- {item}\n" for item in self.items)


DIVIDER = Text("---\n")
