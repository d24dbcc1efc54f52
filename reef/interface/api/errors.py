"""Translation of domain errors into HTTP responses.

Every error response has the same body:

    {"error_code": 2001, "error_name": "UserAlreadyExisting",
     "error_message": "User with username 'alice' already exists"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from reef.adapter.error import AdapterError
from reef.domain.error import (
    AuthenticationFailedError,
    DomainError,
    DuplicateUserError,
    ErrorCode,
    IncorrectCredentialsError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error_code: int
    error_name: str
    error_message: str


def status_for(error: DomainError) -> int:
    """Return the HTTP status for a domain error."""
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, DuplicateUserError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, IncorrectCredentialsError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(error, AuthenticationFailedError):
        # The provider's own status is not exposed beyond 401 vs 403
        if error.status_code == status.HTTP_401_UNAUTHORIZED:
            return status.HTTP_401_UNAUTHORIZED
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, code: ErrorCode, message: str) -> JSONResponse:
    """Build the JSON error response."""
    body = ErrorResponse(
        error_code=code.number,
        error_name=code.error_name,
        error_message=message,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a ``DomainError`` to its status and error body."""
    status_code = status_for(exc)

    if isinstance(exc, AuthenticationFailedError):
        logger.warning(
            "Identity provider rejected request: path=%s provider_status=%s detail=%s",
            request.url.path,
            exc.status_code,
            exc.detail,
        )
    elif status_code >= 500:
        logger.error("Request failed: path=%s error=%s", request.url.path, exc.message)
    else:
        logger.info(
            "Request refused: path=%s code=%s", request.url.path, exc.code.error_name
        )

    message = exc.message
    if status_code >= 500:
        message = "Internal failure"
    return error_response(status_code, exc.code, message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as ``ValidationFailed``."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.info("Request validation failed: path=%s %s", request.url.path, message)
    return error_response(
        status.HTTP_400_BAD_REQUEST, ErrorCode.VALIDATION_FAILED, message
    )


async def handle_adapter_error(request: Request, exc: AdapterError) -> JSONResponse:
    """Report unusable provider answers as an internal failure."""
    logger.error("Adapter failure: path=%s error=%s", request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_FAILURE,
        "Internal failure",
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Report any other fault (lost database connection, bug) as an internal failure.

    The details are logged server-side only.
    """
    logger.error(
        "Unhandled error: path=%s error_type=%s",
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_FAILURE,
        "Internal failure",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``.

    ``Exception`` is the fallback so no failure leaves without the error body.
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(AdapterError, handle_adapter_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
