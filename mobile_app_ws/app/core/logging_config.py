"""
Logging setup for the service.

``LOG_LEVEL`` applies to the ``mobile_app_ws`` loggers only.  Everything
else (uvicorn, sqlite helpers, third‑party libraries) reaches the same
handlers but is held at ``WARNING`` unless the service itself runs at
``DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "mobile_app_ws"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Set the service log level and attach handlers to the root logger.

    The level is applied on every call so each application built in the
    process gets its own setting.  Handlers are attached only when the
    root logger has none yet; under a test runner that captures logs
    this leaves its handlers in charge.

    Returns the package logger.
    """
    numeric_level = _level_from_name(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return package_logger

    root.setLevel(logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING)
    formatter = logging.Formatter(_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return package_logger
