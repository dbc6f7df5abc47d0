"""Mapping of the shared error taxonomy onto HTTP responses.

Services raise domain exceptions and never build HTTP responses
themselves; the handlers registered here translate them once for the
whole application.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared_kernel.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from shared_kernel.middleware.tenant_context import TenantContextNotSetError

logger = structlog.get_logger()

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(exc: DomainError) -> int:
    """Return the HTTP status for a domain error.

    Subclasses map like their nearest listed ancestor, so
    ``DuplicateUsernameError`` answers 400 like any ``ValidationError``.
    """
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=status_for(exc), content={"detail": str(exc)})


async def tenant_context_error_handler(
    request: Request, exc: TenantContextNotSetError
) -> JSONResponse:
    logger.error("tenant_context_missing", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on ``app``."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(TenantContextNotSetError, tenant_context_error_handler)
