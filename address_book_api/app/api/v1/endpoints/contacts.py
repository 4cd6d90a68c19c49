"""
Contact endpoints for API v1.

The collection resource is ``/contacts`` and each member is
``/contacts/person/{person_id}``.  Method semantics follow HTTP:

* ``GET`` on either resource is safe and idempotent.
* ``POST /contacts`` is neither: every call creates a new person with
  a new id and returns ``201`` with a ``Location`` header.
* ``PUT`` replaces an existing person and is idempotent.  It never
  creates; an unknown id is a client error (``400``).
* ``DELETE`` removes a person (``204``).  Repeating it reports ``404``,
  leaving the collection in the same state.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from address_book_api.app.api.deps import get_address_book, get_collection_url
from address_book_api.app.core.exceptions import AddressBookError
from address_book_api.app.schemas.person import AddressBookRead, PersonIn, PersonRead
from address_book_api.app.services.address_book import AddressBook

logger = logging.getLogger(__name__)

router = APIRouter()


def _http_error(exc: AddressBookError) -> HTTPException:
    logger.debug("Rejecting request: %s", exc.message)
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get("", response_model=AddressBookRead, name="list_contacts")
async def list_contacts(
    book: AddressBook = Depends(get_address_book),
    collection_url: str = Depends(get_collection_url),
) -> AddressBookRead:
    """Return the whole address book in creation order."""
    people, next_id = book.snapshot()
    return AddressBookRead.from_people(people, next_id, collection_url)


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
async def create_person(
    person_in: PersonIn,
    response: Response,
    book: AddressBook = Depends(get_address_book),
    collection_url: str = Depends(get_collection_url),
) -> PersonRead:
    """Create a person.  Any ``id`` or ``href`` in the body is ignored."""
    person = book.create_person(name=person_in.name, email=person_in.email)
    person_out = PersonRead.from_person(person, collection_url)
    response.headers["Location"] = person_out.href
    return person_out


@router.get("/person/{person_id}", response_model=PersonRead)
async def get_person(
    person_id: int,
    book: AddressBook = Depends(get_address_book),
    collection_url: str = Depends(get_collection_url),
) -> PersonRead:
    """Retrieve a single person.  Returns 404 if the id is unknown."""
    try:
        person = book.get_person(person_id)
    except AddressBookError as exc:
        raise _http_error(exc) from exc
    return PersonRead.from_person(person, collection_url)


@router.put("/person/{person_id}", response_model=PersonRead)
async def update_person(
    person_id: int,
    person_in: PersonIn,
    book: AddressBook = Depends(get_address_book),
    collection_url: str = Depends(get_collection_url),
) -> PersonRead:
    """Replace the name and email of an existing person.

    The id in the URL is authoritative.  Returns 400 if no person has
    that id, since updates never create.
    """
    try:
        person = book.replace_person(person_id, name=person_in.name, email=person_in.email)
    except AddressBookError as exc:
        raise _http_error(exc) from exc
    return PersonRead.from_person(person, collection_url)


@router.delete("/person/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: int,
    book: AddressBook = Depends(get_address_book),
) -> None:
    """Delete a person.  Returns 404 if the id is unknown or already deleted."""
    try:
        book.delete_person(person_id)
    except AddressBookError as exc:
        raise _http_error(exc) from exc
    return None
