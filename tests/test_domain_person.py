from __future__ import annotations

import pytest
from pydantic import ValidationError

from addressbook.domain import Person
from addressbook.domain.types import NAME_CONSTRAINTS, PHONE_CONSTRAINTS

from typical_persons import ALICE, BOB


def test_person_defaults_to_empty_remark_and_tags() -> None:
    person = Person(name="Amy Bee", phone="85355255", email="amy@gmail.com", address="Block 312")
    assert person.remark == ""
    assert person.tags == frozenset()


def test_person_rejects_invalid_fields() -> None:
    with pytest.raises(ValidationError, match=NAME_CONSTRAINTS):
        Person(name="James&", phone="911", email="a@bc", address="x")
    with pytest.raises(ValidationError, match=PHONE_CONSTRAINTS):
        Person(name="James", phone="91", email="a@bc", address="x")
    with pytest.raises(ValidationError):
        Person(name="James", phone="911", email="bob!yahoo", address="x")
    with pytest.raises(ValidationError):
        Person(name="James", phone="911", email="a@bc", address=" ")
    with pytest.raises(ValidationError):
        Person(name="James", phone="911", email="a@bc", address="x", tags={"hubby*"})


def test_person_is_immutable() -> None:
    with pytest.raises(ValidationError):
        ALICE.remark = "changed"  # type: ignore[misc]


def test_is_same_person_ignores_tags_and_remark() -> None:
    variant = ALICE.model_copy(update={"tags": frozenset(), "remark": "Likes coffee"})
    assert ALICE.is_same_person(variant)
    assert ALICE != variant


def test_is_same_person_compares_identity_fields() -> None:
    assert not ALICE.is_same_person(None)
    assert not ALICE.is_same_person(BOB)
    assert not ALICE.is_same_person(ALICE.model_copy(update={"phone": "99999999"}))
    assert not ALICE.is_same_person(ALICE.model_copy(update={"address": "elsewhere"}))


def test_person_rendering() -> None:
    person = ALICE.model_copy(update={"tags": frozenset({"b", "a"}), "remark": "hi"})
    assert str(person) == (
        "Alice Pauline Phone: 94351253 Email: alice@example.com "
        "Address: 123, Jurong West Ave 6, #08-111 Remark: hi Tags: [a][b]"
    )


def test_person_json_dump_sorts_tags() -> None:
    payload = Person.model_validate(
        {**ALICE.model_dump(), "tags": ["zeta", "alpha"]}
    ).model_dump(mode="json")
    assert payload["tags"] == ["alpha", "zeta"]
    assert Person.model_validate(payload).tags == frozenset({"alpha", "zeta"})


def test_person_fields_accept_ascii_characters_only() -> None:
    with pytest.raises(ValidationError, match=PHONE_CONSTRAINTS):
        Person(name="James", phone="１２３", email="a@bc", address="x")
    with pytest.raises(ValidationError, match=NAME_CONSTRAINTS):
        Person(name="Zoë", phone="911", email="a@bc", address="x")
    with pytest.raises(ValidationError):
        Person(name="James", phone="911", email="a@bc", address="x", tags={"café"})
