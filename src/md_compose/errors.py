from __future__ import annotations


class MdComposeError(Exception):
    """Base class for errors raised outside the render path."""


class HtmlConversionError(MdComposeError, RuntimeError):
    """The Markdown->HTML engine rejected its input."""


class DocumentWriteError(MdComposeError, OSError):
    """A rendered document could not be written to its destination."""
