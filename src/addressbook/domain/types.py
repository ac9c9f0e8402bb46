"""Validated field types shared by persons and descriptors."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special "
    "characters, excluding the parentheses, (!#$%&'*+/=?`{|}~^.-).\n"
    "2. This is followed by a '@' and then a domain name. The domain name must be at least "
    "2 characters long, start and end with alphanumeric characters, and consist of "
    "alphanumeric characters, a period or a hyphen for the characters in between, if any."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"

_NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*", re.ASCII)
_PHONE_PATTERN = re.compile(r"\d{3,}", re.ASCII)
_EMAIL_PATTERN = re.compile(r"[\w!#$%&'*+/=?`{|}~^.-]+@[^\W_][a-zA-Z0-9.-]*[^\W_]", re.ASCII)
_ADDRESS_PATTERN = re.compile(r"\S.*", re.DOTALL)
_TAG_PATTERN = re.compile(r"[^\W_]+", re.ASCII)


def _checker(pattern: re.Pattern[str], message: str):
    def check(value: str) -> str:
        if pattern.fullmatch(value) is None:
            raise ValueError(message)
        return value

    return check


validate_name = _checker(_NAME_PATTERN, NAME_CONSTRAINTS)
validate_phone = _checker(_PHONE_PATTERN, PHONE_CONSTRAINTS)
validate_email = _checker(_EMAIL_PATTERN, EMAIL_CONSTRAINTS)
validate_address = _checker(_ADDRESS_PATTERN, ADDRESS_CONSTRAINTS)
validate_tag = _checker(_TAG_PATTERN, TAG_CONSTRAINTS)

Name = Annotated[str, AfterValidator(validate_name)]
Phone = Annotated[str, AfterValidator(validate_phone)]
Email = Annotated[str, AfterValidator(validate_email)]
Address = Annotated[str, AfterValidator(validate_address)]
Tag = Annotated[str, AfterValidator(validate_tag)]
Remark = str
Tags = frozenset[Tag]

__all__ = [
    "ADDRESS_CONSTRAINTS",
    "EMAIL_CONSTRAINTS",
    "NAME_CONSTRAINTS",
    "PHONE_CONSTRAINTS",
    "TAG_CONSTRAINTS",
    "Address",
    "Email",
    "Name",
    "Phone",
    "Remark",
    "Tag",
    "Tags",
    "validate_address",
    "validate_email",
    "validate_name",
    "validate_phone",
    "validate_tag",
]
