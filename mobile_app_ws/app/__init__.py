"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The user resource is served twice: once from a process‑local map
(``/users``) and once from an embedded SQLite table (``/jpa/users``).
Each variant exposes a router defined in ``api/endpoints``; both are
assembled by ``main.create_app``.
"""

from .main import app  # noqa: F401
