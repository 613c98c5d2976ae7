"""
In‑memory user endpoints, mounted under ``/users``.

Ids in paths are opaque strings: an id that was never issued, numeric
or not, is simply absent.  Bodies and responses may be JSON or XML.
"""

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import Response

from ...schemas.user import UpdateUserDetailsRequestModel, UserDetailsRequestModel
from ...services.user_service import UserService
from .common import no_content, openapi_request_body, parse_request, render_user, render_users


def create_router(service: UserService, default_page: int = 1, default_limit: int = 50) -> APIRouter:
    """Build the ``/users`` router around ``service``."""
    router = APIRouter()

    @router.get("")
    async def get_users(
        request: Request,
        page: int = Query(default_page),
        limit: int = Query(default_limit),
    ) -> Response:
        """List every stored user; ``page`` and ``limit`` are only echoed."""
        users = await service.list_users(page=page, limit=limit)
        return render_users(request, users, page, limit)

    @router.get("/{user_id}", responses={204: {"description": "No user with this id"}})
    async def get_user(user_id: str, request: Request) -> Response:
        user = await service.get_user(user_id)
        if user is None:
            return no_content()
        return render_user(request, user)

    @router.post("", openapi_extra=openapi_request_body(UserDetailsRequestModel))
    async def create_user(request: Request) -> Response:
        """Validate the body, assign an id and store the record."""
        details, error = await parse_request(request, UserDetailsRequestModel)
        if error is not None:
            return error
        user = await service.create_user(details)
        return render_user(request, user)

    @router.put("/{user_id}", openapi_extra=openapi_request_body(UpdateUserDetailsRequestModel))
    async def update_user(user_id: str, request: Request) -> Response:
        """Overwrite the first and last name of an existing user."""
        details, error = await parse_request(request, UpdateUserDetailsRequestModel)
        if error is not None:
            return error
        user = await service.update_user(user_id, details)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
        return render_user(request, user)

    @router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_user(user_id: str) -> Response:
        """Remove a user.  Deleting an absent id is not an error."""
        await service.delete_user(user_id)
        return no_content()

    return router
