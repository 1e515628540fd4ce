import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from groupledger.exceptions import BaseAPIException
from groupledger.metrics import rejected_operations_total
from groupledger.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    error_response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or None),
        meta={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": request.url.path,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(exclude_none=True),
    )


async def ledger_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a rejected ledger operation with its error code and details."""
    assert isinstance(exc, BaseAPIException)
    rejected_operations_total.labels(error_code=exc.error_code).inc()
    logger.warning(
        "Rejected operation error_code=%s path=%s",
        exc.error_code,
        request.url.path,
        extra={
            "error_code": exc.error_code,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details,
        },
    )
    return _error_response(
        request, exc.status_code, exc.error_code, exc.message, exc.details
    )


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Constraint violations the ledger did not translate itself."""
    assert isinstance(exc, IntegrityError)
    logger.warning(
        "Database integrity error",
        extra={
            "error": str(exc.orig),
            "path": request.url.path,
            "method": request.method,
        },
    )
    return _error_response(
        request, 409, "INTEGRITY_ERROR", "Database constraint violation"
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.error(
        "Unhandled exception: %s",
        type(exc).__name__,
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return _error_response(
        request, 500, "INTERNAL_ERROR", "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, ledger_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
