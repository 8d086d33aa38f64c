"""Sample contacts used to seed a fresh address book."""

from __future__ import annotations

from addrctl.domain.address_book import AddressBook
from addrctl.domain.person import Person


def sample_persons() -> list[Person]:
    return [
        Person(
            name="Alex Yeoh",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            birthday="01-01-1990",
            relationship="Brother",
            nickname="Al",
            notes="Likes photography",
            tags=frozenset({"friends"}),
        ),
        Person(
            name="Bernice Yu",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            birthday="15-03-1992",
            relationship="Kor Kor",
            nickname="Bernie",
            tags=frozenset({"colleagues", "friends"}),
        ),
        Person(
            name="Charlotte Oliveiro",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            birthday="22-07-1995",
            relationship="Cousin",
            notes="Allergic to peanuts",
            tags=frozenset({"neighbours"}),
        ),
        Person(
            name="David Li",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            birthday="30-12-1989",
            relationship="Old Classmate",
            nickname="Dave",
            notes="Prefers email contact",
            tags=frozenset({"family"}),
        ),
        Person(
            name="Irfan Ibrahim",
            phone="92492021",
            email="irfan@example.com",
            address="Blk 47 Tampines Street 20, #17-35",
            birthday="05-09-1993",
            relationship="Tutor",
            tags=frozenset({"classmates"}),
        ),
        Person(
            name="Roy Balakrishnan",
            phone="92624417",
            email="royb@example.com",
            address="Blk 45 Aljunied Street 85, #11-31",
            birthday="12-06-1988",
            relationship="Best-Friend",
            nickname="RB",
            notes="Birthday gift idea: books",
            tags=frozenset({"colleagues"}),
        ),
    ]


def sample_address_book() -> AddressBook:
    return AddressBook(sample_persons())
