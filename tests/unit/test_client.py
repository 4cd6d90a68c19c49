"""
Unit tests for the requests-based address book client.
"""

from typing import Any, Dict, List, Optional

import pytest
import requests

from address_book_client import AddressBookClient


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int, body: Any = None, headers: Optional[Dict[str, str]] = None):
        self.status_code = status_code
        self._body = body
        self.headers = headers or {}
        self.text = "" if body is None else str(body)

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records requests and replays queued responses."""

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def request(self, **kwargs: Any) -> FakeResponse:
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def juan() -> Dict[str, Any]:
    return {"id": 1, "name": "Juan", "email": None, "href": "http://localhost:8282/contacts/person/1"}


def make_client(*responses: Any) -> AddressBookClient:
    return AddressBookClient(base_url="http://localhost:8282/", session=FakeSession(*responses))


def test_list_contacts(juan):
    client = make_client(FakeResponse(200, {"next_id": 2, "person_list": [juan]}))

    data, error = client.list_contacts()

    assert error is None
    assert data["person_list"] == [juan]
    call = client.session.calls[0]
    assert (call["method"], call["url"]) == ("GET", "http://localhost:8282/contacts")


def test_create_person_returns_location(juan):
    client = make_client(FakeResponse(201, dict(juan), {"Location": juan["href"]}))

    data, error = client.create_person({"name": "Juan"})

    assert error is None
    assert data["id"] == 1
    assert data["location"] == juan["href"]
    assert client.session.calls[0]["json"] == {"name": "Juan"}


def test_get_person_not_found():
    client = make_client(FakeResponse(404, {"detail": "Person 3 not found"}))

    data, error = client.get_person(3)

    assert data is None
    assert error == {"status_code": 404, "message": "Person 3 not found"}
    assert client.session.calls[0]["url"] == "http://localhost:8282/contacts/person/3"


def test_update_unknown_person_is_a_client_error():
    client = make_client(FakeResponse(400, {"detail": "Cannot replace person 3: it does not exist"}))

    data, error = client.update_person(3, {"name": "Maria"})

    assert data is None
    assert error["status_code"] == 400
    assert client.session.calls[0]["method"] == "PUT"


def test_delete_person_twice():
    client = make_client(FakeResponse(204), FakeResponse(404, {"detail": "Person 2 not found"}))

    assert client.delete_person(2) == (True, None)
    deleted, error = client.delete_person(2)

    assert deleted is False
    assert error["status_code"] == 404


def test_connection_error():
    client = make_client(requests.ConnectionError("refused"))

    data, error = client.get_person(1)

    assert data is None
    assert error == {"status_code": None, "message": "refused"}
