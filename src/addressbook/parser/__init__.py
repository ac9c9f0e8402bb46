"""Command line parsing."""

from .exceptions import ParseError
from .parser import parse_command, parse_index
from .tokenizer import ArgumentMultimap, tokenize

__all__ = ["ArgumentMultimap", "ParseError", "parse_command", "parse_index", "tokenize"]
