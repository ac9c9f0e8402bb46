"""Descriptor-based partial update shared by ``edit`` and ``remark``."""

from __future__ import annotations

import logging

from addressbook.domain import Person, PersonDescriptor
from addressbook.model import Model

from .exceptions import DuplicatePersonCommandError, InvalidIndexError
from .messages import MESSAGE_DUPLICATE_PERSON, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX

logger = logging.getLogger(__name__)


def resolve_displayed(model: Model, index: int) -> Person:
    """Return the person at a zero-based position of the filtered view."""

    displayed = model.filtered_persons()
    if index < 0 or index >= len(displayed):
        raise InvalidIndexError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return displayed[index]


def apply_partial_update(model: Model, index: int, descriptor: PersonDescriptor) -> Person:
    """Patch the displayed person at ``index`` and commit the result.

    Both failure modes are detected before the model is touched, so the
    replacement and the snapshot commit happen together or not at all.
    """

    target = resolve_displayed(model, index)
    edited = descriptor.apply_to(target)

    if not target.is_same_person(edited) and model.has_person(edited):
        raise DuplicatePersonCommandError(MESSAGE_DUPLICATE_PERSON)

    model.set_person(target, edited)
    model.reset_filter_to_show_all()
    model.commit()
    logger.debug("Updated fields %s of %s", descriptor.edited_fields(), target.name)
    return edited


__all__ = ["apply_partial_update", "resolve_displayed"]
