"""
Main entrypoint for the Mobile App Web Service.

This module assembles the FastAPI application: it sets up logging,
builds the two storage backends, mounts their routers and registers
the exception handlers.  ``create_app`` does the work; ``app`` is
created at import time so it can be served directly, e.g.::

    uvicorn mobile_app_ws.app.main:app --reload

Callers that need their own backends (tests, embedding) pass them to
``create_app`` explicitly.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.router import build_api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.user_repository import UserRepository
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
    user_repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    user_service : Optional[UserService]
        Backend for ``/users``.  A fresh, empty one is created if
        omitted.
    user_repository : Optional[UserRepository]
        Backend for ``/jpa/users``.  Defaults to a repository over
        ``settings.database_url``.  Its schema is migrated when the
        application starts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    user_service = user_service or UserService()
    user_repository = user_repository or UserRepository(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        user_repository.init_schema()
        logger.info("%s v%s started", settings.project_name, settings.api_version)
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.user_service = user_service
    app.state.user_repository = user_repository

    register_exception_handlers(app)
    app.include_router(build_api_router(user_service, user_repository, settings))
    return app


app = create_app()
