from __future__ import annotations

import pytest
from pydantic import ValidationError

from addressbook.domain import PersonDescriptor

from typical_persons import ALICE, BENSON


def test_empty_descriptor_edits_nothing() -> None:
    descriptor = PersonDescriptor()
    assert not descriptor.is_any_field_edited()
    assert not descriptor.is_remark_edited()
    assert descriptor.apply_to(ALICE) == ALICE


def test_explicit_empty_remark_counts_as_edited() -> None:
    descriptor = PersonDescriptor(remark="")
    assert descriptor.is_any_field_edited()
    assert descriptor.is_remark_edited()
    assert descriptor.apply_to(BENSON).remark == ""


def test_unset_fields_keep_current_values() -> None:
    edited = PersonDescriptor(phone="91234567").apply_to(BENSON)
    assert edited.phone == "91234567"
    assert edited.remark == BENSON.remark
    assert edited.tags == BENSON.tags
    assert edited.name == BENSON.name


def test_empty_tag_set_clears_tags() -> None:
    edited = PersonDescriptor(tags=set()).apply_to(BENSON)
    assert edited.tags == frozenset()


def test_descriptor_copies_tags_on_construction() -> None:
    tags = {"friends"}
    descriptor = PersonDescriptor(tags=tags)
    tags.add("enemies")
    assert descriptor.tags == frozenset({"friends"})
    assert isinstance(descriptor.tags, frozenset)


def test_descriptor_matching_target_round_trips() -> None:
    descriptor = PersonDescriptor(
        name=BENSON.name,
        phone=BENSON.phone,
        email=BENSON.email,
        address=BENSON.address,
        tags=BENSON.tags,
        remark=BENSON.remark,
    )
    assert descriptor.apply_to(BENSON) == BENSON


def test_descriptor_equality_is_structural() -> None:
    assert PersonDescriptor(remark="x", tags={"a"}) == PersonDescriptor(remark="x", tags=("a",))
    assert PersonDescriptor(remark="x") != PersonDescriptor(remark="y")
    assert PersonDescriptor(remark="") != PersonDescriptor()


def test_descriptor_validates_fields_and_is_frozen() -> None:
    with pytest.raises(ValidationError):
        PersonDescriptor(phone="12")
    descriptor = PersonDescriptor(remark="x")
    with pytest.raises(ValidationError):
        descriptor.remark = "y"  # type: ignore[misc]
