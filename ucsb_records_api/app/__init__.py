"""
Application package.

The API is organised into ``core`` (settings, logging, database,
security, errors), ``schemas`` (pydantic entity models),
``repositories`` (the SQLite record store), ``services`` (the shared
CRUD logic) and ``api`` (versioned routers, one module per entity).
"""

from .main import app  # noqa: F401
