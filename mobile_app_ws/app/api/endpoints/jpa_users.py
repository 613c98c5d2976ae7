"""
Persisted user endpoints, mounted under ``/jpa/users``.

These mirror the in‑memory routes but go straight to the SQLite
``UserRepository``.  Ids are integers assigned by the database; a
non‑integer id in the path, or one outside the signed 64‑bit range,
is rejected with 400.
"""

import logging

from fastapi import APIRouter, HTTPException, Path, Query, Request, status
from fastapi.responses import Response

from ...core.ids import INT64_MAX, INT64_MIN
from ...schemas.user import UpdateUserDetailsRequestModel, UserDetailsRequestModel, UserRest
from ...services.user_repository import UserRepository
from .common import no_content, openapi_request_body, parse_request, render_user, render_users

logger = logging.getLogger(__name__)


def create_router(
    repository: UserRepository, default_page: int = 1, default_limit: int = 50
) -> APIRouter:
    """Build the ``/jpa/users`` router around ``repository``."""
    router = APIRouter()

    @router.get("")
    async def get_users(
        request: Request,
        page: int = Query(default_page),
        limit: int = Query(default_limit),
    ) -> Response:
        """List every stored user; ``page`` and ``limit`` are only echoed."""
        users = await repository.find_all()
        return render_users(request, users, page, limit)

    @router.get("/{user_id}", responses={204: {"description": "No user with this id"}})
    async def get_user(request: Request, user_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX)) -> Response:
        user = await repository.find_by_id(user_id)
        if user is None:
            return no_content()
        return render_user(request, user)

    @router.post("", openapi_extra=openapi_request_body(UserDetailsRequestModel))
    async def create_user(request: Request) -> Response:
        """Validate the body and insert it; the database assigns the id."""
        details, error = await parse_request(request, UserDetailsRequestModel)
        if error is not None:
            return error
        user = await repository.save(UserRest.from_details(details))
        return render_user(request, user)

    @router.put("/{user_id}", openapi_extra=openapi_request_body(UpdateUserDetailsRequestModel))
    async def update_user(request: Request, user_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX)) -> Response:
        """Overwrite the first and last name of an existing user.

        The read and the write are separate statements, so two
        concurrent updates of the same id can lose one of them.
        """
        details, error = await parse_request(request, UpdateUserDetailsRequestModel)
        if error is not None:
            return error
        existing = await repository.find_by_id(user_id)
        if existing is None:
            logger.info("Update of missing user %s", user_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
        user = await repository.save(existing.with_names(details))
        return render_user(request, user)

    @router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_user(user_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX)) -> Response:
        """Remove a user.  Deleting an absent id is not an error."""
        await repository.delete_by_id(user_id)
        return no_content()

    return router
