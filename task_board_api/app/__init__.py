"""
Application package initializer.

The application is organised into layers: ``schemas`` (wire models),
``repositories`` (task store port and engines), ``services`` (business
rules) and ``api`` (versioned HTTP routes).  ``core`` holds settings,
logging, middleware and the SQLite helpers.
"""

from .main import app  # noqa: F401
