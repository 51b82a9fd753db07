"""
Error Handlers - Map lifecycle engine errors to HTTP responses

Response body:
    {"detail": "<message>", "code": "<kind>"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.errors import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    MarketplaceError,
    NotFoundError,
    PartialFailureError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)

STATUS_CODES = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidStateError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    PartialFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
