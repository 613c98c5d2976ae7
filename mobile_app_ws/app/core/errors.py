"""
Translation of exceptions into the uniform error payload.

Every failure leaves the service as an ``ErrorMessage`` (``timeStamp``
and ``message``), encoded in the representation the client accepts.
``register_exception_handlers`` wires the translators into a FastAPI
application.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.error import ErrorMessage
from .exceptions import UserServiceException
from .negotiation import render

ERROR_ROOT = "ErrorMessage"

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    message: str,
    errors: Optional[Dict[str, str]] = None,
) -> Response:
    payload = ErrorMessage(message=message, errors=errors)
    return render(request, payload.to_wire(), ERROR_ROOT, status_code=status_code)


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


async def handle_request_validation(request: Request, exc: RequestValidationError) -> Response:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("path", "query", "body")]
        errors.setdefault(".".join(loc) or "request", error.get("msg", "Invalid value"))
    message = "Validation failed for " + ", ".join(sorted(errors))
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(request, status.HTTP_400_BAD_REQUEST, message, errors)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = error_response(request, exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_user_service_exception(request: Request, exc: UserServiceException) -> Response:
    logger.error("User service failure on %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def handle_any_exception(request: Request, exc: Exception) -> Response:
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, _describe(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(UserServiceException, handle_user_service_exception)
    app.add_exception_handler(Exception, handle_any_exception)
