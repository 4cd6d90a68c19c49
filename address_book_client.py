"""Address book API client.

A thin wrapper around the HTTP interface exposed by
``address_book_api``.  It uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`list_contacts` – fetch the whole address book.
* :meth:`create_person` – add a person; the server assigns the id.
* :meth:`get_person` – fetch a single person by id.
* :meth:`update_person` – replace the name and email of a person.
* :meth:`delete_person` – remove a person.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  Callers can therefore
tell a missing person (``404``) from a rejected replacement (``400``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class AddressBookClient:
    """Client for the address book HTTP API."""

    collection_path = "/contacts"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the server including any API prefix,
                e.g. ``http://localhost:8282``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _person_path(self, person_id: Any) -> str:
        return f"{self.collection_path}/person/{person_id}"

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and normalise failures.

        Returns:
            A tuple ``(response, error)``.  ``response`` is the raw
            response on a 2xx status.  Otherwise it is ``None`` and
            ``error`` describes the failure.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[Dict[str, Any], Optional[Error]]:
        """Retrieve the address book (``person_list`` and ``next_id``)."""
        response, error = self._request("GET", self.collection_path)
        if error:
            return {}, error
        return response.json(), None

    def create_person(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a person.

        The returned person carries an extra ``location`` key holding the
        ``Location`` header sent by the server.
        """
        response, error = self._request("POST", self.collection_path, json_body=payload)
        if error:
            return None, error
        data = response.json()
        data["location"] = response.headers.get("Location")
        return data, None

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------
    def get_person(self, person_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        response, error = self._request("GET", self._person_path(person_id))
        if error:
            return None, error
        return response.json(), None

    def update_person(
        self, person_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a person.  Unknown ids yield a ``400`` error."""
        response, error = self._request("PUT", self._person_path(person_id), json_body=payload)
        if error:
            return None, error
        return response.json(), None

    def delete_person(self, person_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a person.

        Returns:
            A tuple ``(deleted, error)``.
        """
        _, error = self._request("DELETE", self._person_path(person_id))
        if error:
            return False, error
        return True, None
