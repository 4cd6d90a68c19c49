"""
Main entrypoint for the Address Book API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures an app around one ``AddressBook``; a default instance is
created at module import time as ``app`` so it can be served with::

    uvicorn address_book_api.app.main:app --reload

Tests call ``create_app`` directly with a prepared address book.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.address_book import AddressBook


def create_app(
    address_book: Optional[AddressBook] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    address_book : Optional[AddressBook]
        The collection to serve.  A new empty book is created when
        omitted.  The caller keeps its reference and may seed it
        before the first request.
    settings : Optional[Settings]
        Overrides the environment‑derived settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.address_book = address_book if address_book is not None else AddressBook()

    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).debug(
        "Serving %d contacts under '%s/contacts'", len(app.state.address_book), settings.api_prefix
    )
    return app


app = create_app()
