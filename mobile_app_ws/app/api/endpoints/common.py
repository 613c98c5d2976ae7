"""Helpers shared by the user routers."""

import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from fastapi import Request, status
from fastapi.responses import Response
from pydantic import BaseModel

from ...core.errors import error_response
from ...core.negotiation import JSON_MEDIA_TYPE, XML_MEDIA_TYPE, read_body, render
from ...core.validation import validate_payload, violations_to_dict
from ...schemas.user import UserRest

USER_ROOT = "UserRest"

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


def openapi_request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI ``requestBody`` entry for handlers that decode bodies themselves."""
    schema = model.model_json_schema(by_alias=True)
    return {
        "requestBody": {
            "required": True,
            "content": {
                JSON_MEDIA_TYPE: {"schema": schema},
                XML_MEDIA_TYPE: {"schema": schema},
            },
        }
    }


async def parse_request(
    request: Request, model: Type[ModelT]
) -> Tuple[Optional[ModelT], Optional[Response]]:
    """Decode and validate the body of ``request``.

    Returns the model instance, or a 400 response listing every field
    that failed validation.
    """
    data = await read_body(request)
    instance, violations = validate_payload(model, data)
    if not violations:
        return instance, None
    errors = violations_to_dict(violations)
    message = "Validation failed for " + ", ".join(errors)
    logger.info("%s %s rejected: %s", request.method, request.url.path, errors)
    return None, error_response(request, status.HTTP_400_BAD_REQUEST, message, errors)


def render_user(request: Request, user: UserRest) -> Response:
    return render(request, user.to_wire(), USER_ROOT)


def render_users(request: Request, users, page: int, limit: int) -> Response:
    response = render(request, [user.to_wire() for user in users], USER_ROOT)
    response.headers["X-Page"] = str(page)
    response.headers["X-Limit"] = str(limit)
    return response


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
