"""
Top‑level router.

Mounts the in‑memory user routes under ``/users`` and the persisted
ones under ``/jpa/users``.  The storage backends are passed in by the
caller; nothing here looks them up.
"""

from fastapi import APIRouter

from ..core.config import Settings
from ..services.user_repository import UserRepository
from ..services.user_service import UserService
from .endpoints import jpa_users, users


def build_api_router(
    user_service: UserService, user_repository: UserRepository, settings: Settings
) -> APIRouter:
    router = APIRouter()
    router.include_router(
        users.create_router(user_service, settings.default_page, settings.default_limit),
        prefix="/users",
        tags=["users"],
    )
    router.include_router(
        jpa_users.create_router(user_repository, settings.default_page, settings.default_limit),
        prefix="/jpa/users",
        tags=["jpa-users"],
    )
    return router
