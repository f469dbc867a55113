"""
Application package initializer.

The API is organised into ``core`` (settings, logging, errors and the
in-memory store), ``schemas``, ``services`` and versioned routers in
``api/v1``.
"""

from .main import app, create_app  # noqa: F401
