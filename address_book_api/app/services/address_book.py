"""
Service layer for the address book.

``AddressBook`` is the only owner of contact state: an ordered list of
people plus the counter that hands out identifiers.  An instance is
created once per application (see ``create_app``) and handed to the
route handlers through a dependency, so tests can build as many
independent books as they like.

Identifiers are assigned sequentially starting at ``1`` and are never
reused, even after a person is deleted.  Hrefs are not stored here;
they are derived from the id when a person is serialised (see
``schemas.person``).

All public methods take an internal re‑entrant lock, so concurrent
requests served from the ASGI server's thread pool see each mutation
as a single atomic step.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

from address_book_api.app.core.exceptions import (
    DuplicatePersonError,
    PersonNotFoundError,
    PersonNotReplaceableError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Person:
    """A stored contact.

    Attributes:
        id: Identifier assigned by the address book; immutable.
        name: Free text, may be empty.
        email: Free text, may be empty.
    """

    id: int
    name: Optional[str] = None
    email: Optional[str] = None


class AddressBook:
    """In‑memory collection of people with a monotonic id sequence."""

    def __init__(self, people: Optional[Iterable[Person]] = None) -> None:
        self._people: List[Person] = []
        self._next_id = 1
        self._lock = threading.RLock()
        for person in people or ():
            self.seed_person(person.id, name=person.name, email=person.email)

    # ------------------------------------------------------------------
    # Safe operations
    # ------------------------------------------------------------------
    def list_people(self) -> List[Person]:
        """Return every stored person in creation order."""
        with self._lock:
            return list(self._people)

    def peek_next_id(self) -> int:
        """Return the id the next ``create_person`` call will assign."""
        with self._lock:
            return self._next_id

    def snapshot(self) -> Tuple[List[Person], int]:
        """Return the people and the next id as one consistent pair."""
        with self._lock:
            return list(self._people), self._next_id

    def get_person(self, person_id: int) -> Person:
        """Return the person with ``person_id``.

        Raises ``PersonNotFoundError`` when no such person is stored.
        """
        with self._lock:
            return self._people[self._index_of(person_id)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_person(self, name: Optional[str] = None, email: Optional[str] = None) -> Person:
        """Store a new person under the next free id and return it.

        Calling this twice with the same data creates two people.
        """
        with self._lock:
            person = Person(id=self._next_id, name=name, email=email)
            self._people.append(person)
            self._next_id += 1
        logger.info("Created person %s", person.id)
        return person

    def replace_person(
        self, person_id: int, name: Optional[str] = None, email: Optional[str] = None
    ) -> Person:
        """Overwrite the name and email of an existing person.

        The id is kept.  Replacing an unknown id is rejected with
        ``PersonNotReplaceableError`` instead of creating the person.
        """
        with self._lock:
            try:
                index = self._index_of(person_id)
            except PersonNotFoundError as exc:
                raise PersonNotReplaceableError(
                    f"Cannot replace person {person_id}: it does not exist",
                    person_id=person_id,
                ) from exc
            person = replace(self._people[index], name=name, email=email)
            self._people[index] = person
        logger.info("Replaced person %s", person_id)
        return person

    def delete_person(self, person_id: int) -> Person:
        """Remove the person with ``person_id`` and return it.

        The id counter is left untouched and the remaining people keep
        their ids.  Deleting an id that is not stored, including one
        that was already deleted, raises ``PersonNotFoundError``.
        """
        with self._lock:
            person = self._people.pop(self._index_of(person_id))
        logger.info("Deleted person %s", person_id)
        return person

    def seed_person(
        self, person_id: int, name: Optional[str] = None, email: Optional[str] = None
    ) -> Person:
        """Insert a person under a caller‑chosen id.

        Used to prepare a book before it is served.  The id must be
        positive and unused.  When it is not below the counter, the
        counter moves to ``person_id + 1`` so later creates never
        collide with it.
        """
        with self._lock:
            if person_id < 1:
                raise DuplicatePersonError(
                    f"Person id must be positive, got {person_id}", person_id=person_id
                )
            if any(p.id == person_id for p in self._people):
                raise DuplicatePersonError(
                    f"Person {person_id} already exists", person_id=person_id
                )
            person = Person(id=person_id, name=name, email=email)
            self._people.append(person)
            if person_id >= self._next_id:
                self._next_id = person_id + 1
        logger.debug("Seeded person %s", person_id)
        return person

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _index_of(self, person_id: int) -> int:
        for index, person in enumerate(self._people):
            if person.id == person_id:
                return index
        logger.debug("Person %s not found", person_id)
        raise PersonNotFoundError(f"Person {person_id} not found", person_id=person_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)
