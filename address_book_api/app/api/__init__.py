"""
API package containing versioned routes and shared dependencies.

Each version subpackage (``v1``) exposes a top‑level ``router``.
``deps`` holds the dependencies that hand the application's address
book to route handlers.
"""
