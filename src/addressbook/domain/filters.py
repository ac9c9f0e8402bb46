"""Filters shaping the displayed subset of the address book."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, field_validator

from .base import DomainModel
from .person import Person


class ShowAllFilter(DomainModel):
    """Matches every person."""

    kind: Literal["all"] = "all"

    def matches(self, person: Person) -> bool:
        return True


class NameKeywordsFilter(DomainModel):
    """Matches persons whose name contains any keyword as a whole word."""

    kind: Literal["name_keywords"] = "name_keywords"
    keywords: Annotated[tuple[str, ...], Field(min_length=1)]

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(keyword.strip() for keyword in value if keyword.strip())
        if not normalized:
            msg = "At least one non-blank keyword is required"
            raise ValueError(msg)
        if any(" " in keyword for keyword in normalized):
            msg = "Keywords must be single words"
            raise ValueError(msg)
        return normalized

    def matches(self, person: Person) -> bool:
        words = {word.casefold() for word in person.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


PersonFilter = ShowAllFilter | NameKeywordsFilter

__all__ = ["NameKeywordsFilter", "PersonFilter", "ShowAllFilter"]
