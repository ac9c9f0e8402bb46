"""Errors surfaced to the user when a command cannot run."""

from __future__ import annotations


class CommandError(RuntimeError):
    """Raised when a command fails; the message is shown verbatim."""


class InvalidIndexError(CommandError):
    """Raised when an index does not resolve within the displayed list."""


class DuplicatePersonCommandError(CommandError):
    """Raised when a command would store a person that already exists."""


__all__ = ["CommandError", "DuplicatePersonCommandError", "InvalidIndexError"]
