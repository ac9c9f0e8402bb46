"""Translate a command line into a command variant."""

from __future__ import annotations

import re
from collections.abc import Callable

from addressbook.commands import (
    AddCommand,
    ClearCommand,
    Command,
    CommandKind,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    HistoryCommand,
    ListCommand,
    RedoCommand,
    RemarkCommand,
    SortCommand,
    UndoCommand,
)
from addressbook.commands.messages import (
    ADD_USAGE,
    DELETE_USAGE,
    EDIT_USAGE,
    FIND_USAGE,
    HELP_USAGE,
    MESSAGE_EDIT_NOT_EDITED,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_REMARK_NOT_ADDED,
    MESSAGE_UNKNOWN_COMMAND,
    REMARK_USAGE,
)
from addressbook.domain import NameKeywordsFilter, Person, PersonDescriptor
from addressbook.domain.types import (
    validate_address,
    validate_email,
    validate_name,
    validate_phone,
    validate_tag,
)

from .exceptions import ParseError
from .tokenizer import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_TAG,
    ArgumentMultimap,
    tokenize,
)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def _validated(check: Callable[[str], str], raw: str) -> str:
    value = raw.strip()
    try:
        return check(value)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def parse_index(raw: str) -> int:
    """Convert a one-based index string into a zero-based position."""

    value = raw.strip()
    if not value.isdecimal() or int(value) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(value) - 1


def parse_tags(raw_tags: tuple[str, ...]) -> frozenset[str]:
    return frozenset(_validated(validate_tag, tag) for tag in raw_tags)


def _parse_tags_for_edit(raw_tags: tuple[str, ...]) -> frozenset[str] | None:
    if not raw_tags:
        return None
    # A lone empty ``t/`` clears every tag.
    if raw_tags == ("",):
        return frozenset()
    return parse_tags(raw_tags)


def _parse_descriptor(arguments: ArgumentMultimap) -> PersonDescriptor:
    fields: dict[str, object] = {}
    validators = (
        ("name", PREFIX_NAME, validate_name),
        ("phone", PREFIX_PHONE, validate_phone),
        ("email", PREFIX_EMAIL, validate_email),
        ("address", PREFIX_ADDRESS, validate_address),
    )
    for field_name, prefix, check in validators:
        raw = arguments.value(prefix)
        if raw is not None:
            fields[field_name] = _validated(check, raw)
    tags = _parse_tags_for_edit(arguments.all_values(PREFIX_TAG))
    if tags is not None:
        fields["tags"] = tags
    remark = arguments.value(PREFIX_REMARK)
    if remark is not None:
        fields["remark"] = remark
    return PersonDescriptor.model_validate(fields)


def _parse_indexed(arguments: ArgumentMultimap, usage: str) -> int:
    try:
        return parse_index(arguments.preamble)
    except ParseError as exc:
        raise _invalid_format(usage) from exc


def _parse_add(arguments: str) -> AddCommand:
    tokens = tokenize(arguments)
    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if tokens.preamble or not all(tokens.has(prefix) for prefix in required):
        raise _invalid_format(ADD_USAGE)

    person = Person(
        name=_validated(validate_name, tokens.value(PREFIX_NAME) or ""),
        phone=_validated(validate_phone, tokens.value(PREFIX_PHONE) or ""),
        email=_validated(validate_email, tokens.value(PREFIX_EMAIL) or ""),
        address=_validated(validate_address, tokens.value(PREFIX_ADDRESS) or ""),
        tags=parse_tags(tokens.all_values(PREFIX_TAG)),
        remark=tokens.value(PREFIX_REMARK) or "",
    )
    return AddCommand(person=person)


def _parse_edit(arguments: str) -> EditCommand:
    tokens = tokenize(arguments)
    index = _parse_indexed(tokens, EDIT_USAGE)
    descriptor = _parse_descriptor(tokens)
    if not descriptor.is_any_field_edited():
        raise ParseError(MESSAGE_EDIT_NOT_EDITED)
    return EditCommand(index=index, descriptor=descriptor)


def _parse_remark(arguments: str) -> RemarkCommand:
    tokens = tokenize(arguments)
    index = _parse_indexed(tokens, REMARK_USAGE)
    descriptor = _parse_descriptor(tokens)
    if not descriptor.is_remark_edited():
        raise ParseError(MESSAGE_REMARK_NOT_ADDED)
    return RemarkCommand(index=index, descriptor=descriptor)


def _parse_delete(arguments: str) -> DeleteCommand:
    try:
        index = parse_index(arguments)
    except ParseError as exc:
        raise _invalid_format(DELETE_USAGE) from exc
    return DeleteCommand(index=index)


def _parse_find(arguments: str) -> FindCommand:
    keywords = tuple(arguments.split())
    if not keywords:
        raise _invalid_format(FIND_USAGE)
    return FindCommand(person_filter=NameKeywordsFilter(keywords=keywords))


_PARSERS: dict[CommandKind, Callable[[str], Command]] = {
    CommandKind.ADD: _parse_add,
    CommandKind.EDIT: _parse_edit,
    CommandKind.REMARK: _parse_remark,
    CommandKind.DELETE: _parse_delete,
    CommandKind.FIND: _parse_find,
    CommandKind.SORT: lambda _: SortCommand(),
    CommandKind.LIST: lambda _: ListCommand(),
    CommandKind.CLEAR: lambda _: ClearCommand(),
    CommandKind.UNDO: lambda _: UndoCommand(),
    CommandKind.REDO: lambda _: RedoCommand(),
    CommandKind.HISTORY: lambda _: HistoryCommand(),
    CommandKind.HELP: lambda _: HelpCommand(),
    CommandKind.EXIT: lambda _: ExitCommand(),
}


def parse_command(text: str) -> Command:
    """Parse user input into a command ready for execution."""

    match = _COMMAND_FORMAT.fullmatch(text.strip())
    if match is None:
        raise _invalid_format(HELP_USAGE)

    word = match.group("word")
    try:
        kind = CommandKind(word)
    except ValueError as exc:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND) from exc
    return _PARSERS[kind](match.group("arguments"))


__all__ = ["MESSAGE_INVALID_INDEX", "parse_command", "parse_index", "parse_tags"]
