"""
Application package.

``core`` holds configuration, logging and the lifecycle registry,
``services`` the in-memory order store, ``schemas`` the request and
response models and ``api`` the HTTP routes.
"""

from .main import app  # noqa: F401
