import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    AuthenticationError,
    BookingValidationError,
    DirectoryError,
    IdentityError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


def _backend_status(status_code: int | None) -> int:
    # Client-side errors from the backend (RLS denial, constraint violation,
    # bad credentials) keep their status; everything else is a bad gateway.
    if status_code is not None and 400 <= status_code < 500:
        return status_code
    return 502


async def directory_error_handler(_request: Request, exc: DirectoryError) -> JSONResponse:
    logger.error("Directory error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=_backend_status(exc.status_code),
        content={"detail": exc.message},
    )


async def identity_error_handler(_request: Request, exc: IdentityError) -> JSONResponse:
    logger.error("Identity error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=_backend_status(exc.status_code),
        content={"detail": exc.message},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def booking_validation_error_handler(
    _request: Request, exc: BookingValidationError
) -> JSONResponse:
    logger.warning("Booking request rejected: %s (%s)", exc.message, exc.code)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "code": exc.code},
    )


async def invalid_transition_error_handler(
    _request: Request, exc: InvalidTransitionError
) -> JSONResponse:
    logger.warning("Rejected status change: %s", exc.message)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message, "code": "invalid_transition"},
    )


async def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def authentication_error_handler(
    _request: Request, exc: AuthenticationError
) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_denied_error_handler(
    _request: Request, exc: PermissionDeniedError
) -> JSONResponse:
    logger.warning("Permission denied: %s", exc.message)
    return JSONResponse(status_code=403, content={"detail": exc.message})
