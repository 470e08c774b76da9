"""
Error taxonomy and the FastAPI handlers that render it.

Every error a route can raise on purpose derives from MiniLinkError and
carries its HTTP status and the message shown to the client. Anything else
reaching the app is an unexpected failure and is answered with a generic 500.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MiniLinkError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InternalError(MiniLinkError):
    pass


class Unauthenticated(MiniLinkError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class InvalidToken(Unauthenticated):
    """Raised by the token service when a token cannot be verified."""


class Conflict(MiniLinkError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Conflict"


class EmailTaken(Conflict):
    message = "Email already exists"


class DuplicateRequest(Conflict):
    message = "Already sent"


class InvalidCredentials(MiniLinkError):
    # Same message for unknown email and wrong password
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class NotFound(MiniLinkError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class UserNotFound(NotFound):
    message = "User not found"


class JobNotFound(NotFound):
    message = "Job not found"


async def minilink_error_handler(request: Request, exc: MiniLinkError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed body or parameters: name the first offending field."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"Invalid request: {field} {errors[0].get('msg', '')}".strip()
    return JSONResponse(
        status_code=422,
        content={"message": message},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Error boundary: log the traceback, tell the client nothing."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": InternalError.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MiniLinkError, minilink_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
