"""
Application package initializer.

The application is split into layers: ``api`` holds the HTTP routers,
``services`` the business rules for accounts and messages,
``repositories`` the SQL accessors for the two tables and ``schemas``
the pydantic records exchanged between them.  ``core`` carries the
configuration, logging and database bootstrap shared by all layers.
"""

from .main import app  # noqa: F401
