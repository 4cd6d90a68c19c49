"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts without any configuration at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Address Book API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the v1 routes are mounted.  Empty by default so
    # the collection lives at ``/contacts``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Externally visible base URL (scheme, host and port), e.g.
    # ``http://localhost:8282``.  When empty, member hrefs are built from
    # the URL of the incoming request instead.
    public_url: str = os.getenv("PUBLIC_URL", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8282"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
