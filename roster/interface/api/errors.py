"""HTTP mapping of domain errors.

Every rejection is returned as ``{"kind": ..., "detail": ...}`` with a
status code derived from the error kind.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from roster.domain.error import DomainError

STATUS_BY_KIND: dict[str, int] = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "unauthorized": status.HTTP_403_FORBIDDEN,
    "invalid_operation": status.HTTP_400_BAD_REQUEST,
    "conflict": status.HTTP_409_CONFLICT,
    "transient": status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error into its HTTP response."""
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logfire.info(
        "Request rejected",
        path=request.url.path,
        kind=exc.kind,
        status_code=status_code,
    )
    headers = {"Retry-After": "1"} if exc.kind == "transient" else None
    return JSONResponse(
        status_code=status_code,
        content={"kind": exc.kind, "detail": exc.reason},
        headers=headers,
    )


async def value_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Value objects built inside use cases (email, username) failed validation."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "kind": "validation_error",
            "detail": "; ".join(error["msg"] for error in exc.errors()),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(ValidationError, value_error_handler)
