"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from address_book_api.app.core.config import Settings
from address_book_api.app.main import create_app
from address_book_api.app.services.address_book import AddressBook

BASE_URL = "http://localhost:8282"
CONTACTS_URL = f"{BASE_URL}/contacts"


@pytest.fixture
def settings() -> Settings:
    """Settings with a fixed public URL so hrefs are predictable."""
    return Settings(public_url=BASE_URL, api_prefix="", log_level="WARNING")


@pytest.fixture
def book() -> AddressBook:
    """A fresh, empty address book."""
    return AddressBook()


@pytest.fixture
def make_client(settings: Settings) -> Generator:
    """Factory that serves a (possibly seeded) address book.

    Usage::

        client = make_client(book)
    """
    clients = []

    def _make(address_book: AddressBook) -> TestClient:
        client = TestClient(create_app(address_book, settings), base_url=BASE_URL)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client, book: AddressBook) -> TestClient:
    """A client talking to an app that serves the empty ``book`` fixture."""
    return make_client(book)
