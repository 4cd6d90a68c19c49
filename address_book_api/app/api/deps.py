"""
FastAPI dependencies shared by the route modules.

The address book and the settings live on ``app.state`` (set by
``create_app``) rather than in module globals, so every application
instance serves its own collection.
"""

from fastapi import Request

from address_book_api.app.core.config import Settings
from address_book_api.app.services.address_book import AddressBook


def get_address_book(request: Request) -> AddressBook:
    """Return the address book owned by the running application."""
    return request.app.state.address_book


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_collection_url(request: Request) -> str:
    """Return the absolute URL of the contacts collection.

    ``PUBLIC_URL`` wins when configured (e.g. behind a proxy); otherwise
    the URL is resolved from the incoming request.
    """
    settings = get_settings(request)
    if settings.public_url:
        return f"{settings.public_url.rstrip('/')}{settings.api_prefix}/contacts"
    return str(request.url_for("list_contacts"))
