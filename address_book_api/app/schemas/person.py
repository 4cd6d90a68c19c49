"""
Pydantic models for people and the address book collection.

``PersonIn`` is accepted by both create and replace.  Clients often send
back a representation they fetched earlier, so ``id`` and ``href`` are
tolerated in the body but never used: the id always comes from the
address book (create) or from the URL (replace).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from address_book_api.app.services.address_book import Person


def person_href(collection_url: str, person_id: int) -> str:
    """Return the locator of a member resource, e.g. ``.../contacts/person/3``."""
    return f"{collection_url.rstrip('/')}/person/{person_id}"


class PersonIn(BaseModel):
    """Request body for creating or replacing a person."""

    name: Optional[str] = Field(None, examples=["Juan"])
    email: Optional[str] = Field(None, examples=["juan@example.com"])
    id: Optional[int] = Field(None, description="Ignored; ids are assigned by the server")
    href: Optional[str] = Field(None, description="Ignored; hrefs are derived from the id")


class PersonRead(BaseModel):
    """Schema for reading a person from the API."""

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    href: str

    @classmethod
    def from_person(cls, person: Person, collection_url: str) -> "PersonRead":
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            href=person_href(collection_url, person.id),
        )


class AddressBookRead(BaseModel):
    """Schema for the whole collection."""

    next_id: int
    person_list: List[PersonRead] = Field(default_factory=list)

    @classmethod
    def from_people(
        cls, people: List[Person], next_id: int, collection_url: str
    ) -> "AddressBookRead":
        return cls(
            next_id=next_id,
            person_list=[PersonRead.from_person(p, collection_url) for p in people],
        )
