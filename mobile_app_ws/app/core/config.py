"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Mobile App Web Service"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "0.0.1"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Host and port used by ``run.py`` when serving with uvicorn.
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8080")))

    # Path or connection string for the SQLite database backing the
    # ``/jpa/users`` routes.  Relative paths are resolved against the
    # project root by the ``db`` module.  ``:memory:`` gives a store
    # that disappears with the process.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "mobile_app_ws.db"))

    # Defaults for the ``page`` and ``limit`` query parameters of the
    # list endpoints.  They are echoed back but do not slice results.
    default_page: int = field(default_factory=lambda: int(os.getenv("DEFAULT_PAGE", "1")))
    default_limit: int = field(default_factory=lambda: int(os.getenv("DEFAULT_LIMIT", "50")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings`` instances and pass them to ``create_app``.
settings = Settings()
