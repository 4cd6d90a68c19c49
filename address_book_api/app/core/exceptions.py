"""Error hierarchy raised by the address book service."""

from __future__ import annotations

from typing import Optional

from fastapi import status


class AddressBookError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "address_book_error"

    def __init__(self, message: str, *, person_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.person_id = person_id


class PersonNotFoundError(AddressBookError):
    """No person with the requested id is stored."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class InvalidRequestError(AddressBookError):
    """The request is well formed but violates the collection's policy."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_request"


class PersonNotReplaceableError(InvalidRequestError):
    """Replacing a person that does not exist.  Updates never create."""


class DuplicatePersonError(InvalidRequestError):
    """Seeding with an id that is already taken or not positive."""
