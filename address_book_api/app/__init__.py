"""
Application package initializer.

The project is organised into small layers: ``services`` owns the
in‑memory address book, ``schemas`` defines the JSON representations,
and ``api/v1/endpoints`` maps HTTP methods onto service calls.
Versioning is handled by grouping routers under the ``api/<version>/``
hierarchy.
"""

from .main import app  # noqa: F401
