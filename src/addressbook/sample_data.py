"""Contacts used to populate a fresh address book."""

from __future__ import annotations

from addressbook.domain import AddressBook, Person


def sample_persons() -> tuple[Person, ...]:
    return (
        Person(
            name="Alex Yeoh",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            tags=frozenset({"friends"}),
        ),
        Person(
            name="Bernice Yu",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            tags=frozenset({"colleagues", "friends"}),
        ),
        Person(
            name="Charlotte Oliveiro",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            tags=frozenset({"neighbours"}),
        ),
        Person(
            name="David Li",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            tags=frozenset({"family"}),
        ),
        Person(
            name="Irfan Ibrahim",
            phone="92492021",
            email="irfan@example.com",
            address="Blk 47 Tampines Street 20, #17-35",
            tags=frozenset({"classmates"}),
        ),
        Person(
            name="Roy Balakrishnan",
            phone="92624417",
            email="royb@example.com",
            address="Blk 45 Aljunied Street 85, #11-31",
            tags=frozenset({"colleagues"}),
        ),
    )


def sample_address_book() -> AddressBook:
    return AddressBook.of(sample_persons())


__all__ = ["sample_address_book", "sample_persons"]
