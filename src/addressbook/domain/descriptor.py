"""Sparse patch applied to a person by the edit and remark commands."""

from __future__ import annotations

from .base import DomainModel
from .person import Person
from .types import Address, Email, Name, Phone, Remark, Tags

_FIELDS = ("name", "phone", "email", "address", "tags", "remark")


class PersonDescriptor(DomainModel):
    """Optional per-field overrides for a person.

    ``None`` leaves the field untouched; any other value, including an empty
    remark or an empty tag set, replaces it. Tags are copied into a frozenset
    on construction so later changes to the caller's collection are not seen.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    tags: Tags | None = None
    remark: Remark | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, field) is not None for field in _FIELDS)

    def is_remark_edited(self) -> bool:
        return self.remark is not None

    def edited_fields(self) -> tuple[str, ...]:
        return tuple(field for field in _FIELDS if getattr(self, field) is not None)

    def apply_to(self, person: Person) -> Person:
        """Return a new person with every set field replaced."""

        updates = {field: getattr(self, field) for field in self.edited_fields()}
        if not updates:
            return person
        return Person.model_validate({**person.model_dump(), **updates})


__all__ = ["PersonDescriptor"]
