"""
Unit tests for person schemas.
"""

import pytest

from address_book_api.app.schemas.person import AddressBookRead, PersonIn, PersonRead, person_href
from address_book_api.app.services.address_book import Person


@pytest.mark.parametrize(
    "collection_url",
    ["http://localhost:8282/contacts", "http://localhost:8282/contacts/"],
)
def test_person_href(collection_url):
    assert person_href(collection_url, 3) == "http://localhost:8282/contacts/person/3"


def test_person_read_derives_href():
    person = Person(id=2, name="Maria", email="maria@example.com")

    read = PersonRead.from_person(person, "http://h/contacts")

    assert read.model_dump() == {
        "id": 2,
        "name": "Maria",
        "email": "maria@example.com",
        "href": "http://h/contacts/person/2",
    }


def test_address_book_read_keeps_order():
    people = [Person(id=3, name="c"), Person(id=1, name="a")]

    book = AddressBookRead.from_people(people, 4, "http://h/contacts")

    assert [p.id for p in book.person_list] == [3, 1]
    assert book.next_id == 4


def test_person_in_accepts_empty_body():
    person_in = PersonIn()
    assert (person_in.name, person_in.email, person_in.id) == (None, None, None)
