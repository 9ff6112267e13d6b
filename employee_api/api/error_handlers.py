"""Error Handlers — map every failure to the one JSON error envelope clients see.

Invariants:
    - EmployeeApiError → its own http_status and to_response() envelope
    - RequestValidationError → 400 (not FastAPI's 422) with one detail per invalid field
    - Any other exception → 500 INTERNAL_ERROR; exception text stays in the logs
    - Every envelope carries code, message, category, severity and the request path
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from employee_api.core.errors import EmployeeApiError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EmployeeApiError, _handle_employee_api_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


async def _handle_employee_api_error(
    request: Request, exc: EmployeeApiError,
) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "employee_id": exc.context.employee_id,
        },
    )
    body = exc.to_response()
    body["error"]["path"] = request.url.path
    return JSONResponse(status_code=exc.http_status, content=body)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [_describe_field_error(e) for e in exc.errors()]
    logger.warning(
        f"Validation failed on {request.url.path}: "
        + "; ".join(d["description"] for d in details),
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            request, "VALIDATION_ERROR", "Validation failed",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {exc.__class__.__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            request, "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    request: Request,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "path": request.url.path,
            **extra,
        },
    }


def _describe_field_error(error: dict) -> dict:
    """One validation detail; the field path drops the body/query/path prefix."""
    parts = [str(p) for p in error["loc"]]
    if parts and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    name = ".".join(parts) or "request"
    return {
        "field": name,
        "message": error["msg"],
        "type": error["type"],
        "description": f"Field '{name}' {error['msg']}",
    }
