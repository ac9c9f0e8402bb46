"""Person domain model."""

from __future__ import annotations

from pydantic import field_serializer

from .base import DomainModel
from .types import Address, Email, Name, Phone, Remark, Tags


class Person(DomainModel):
    """A contact in the address book.

    Persons are never mutated in place; edits produce a new value. Two persons
    may be the same contact (``is_same_person``) while differing in tags or
    remark, whereas ``==`` compares every field.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: Tags = frozenset()
    remark: Remark = ""

    @field_serializer("tags", when_used="json")
    def serialize_tags(self, tags: Tags) -> list[str]:
        return sorted(tags)

    def identity(self) -> tuple[str, str, str, str]:
        return (self.name, self.phone, self.email, self.address)

    def is_same_person(self, other: Person | None) -> bool:
        """Return True when both persons share every identity field."""

        if other is None:
            return False
        return self.identity() == other.identity()

    def sorted_tags(self) -> tuple[str, ...]:
        return tuple(sorted(self.tags))

    def __str__(self) -> str:
        rendered_tags = "".join(f"[{tag}]" for tag in self.sorted_tags())
        return (
            f"{self.name} Phone: {self.phone} Email: {self.email} "
            f"Address: {self.address} Remark: {self.remark} Tags: {rendered_tags}"
        )


__all__ = ["Person"]
