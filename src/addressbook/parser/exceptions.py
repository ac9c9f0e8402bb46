"""Parser exceptions."""

from __future__ import annotations


class ParseError(RuntimeError):
    """Raised when a command line does not conform to the expected format."""


__all__ = ["ParseError"]
