"""Global error handling to map domain errors and prevent information disclosure."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.config import Settings
from employee_api.exceptions import (
    ConflictError,
    EmployeeAPIError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from employee_api.services.employee_service import is_email_conflict
from employee_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Resource not found",
    405: "Method not allowed",
    422: "Invalid input data",
    429: "Too many requests",
    500: "Internal server error",
}

# Request validation failures; Starlette renamed its named constant for 422
HTTP_422_STATUS = 422

# Error codes for framework-level HTTP errors (unknown routes and the like)
HTTP_ERROR_CODES = {
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    429: ErrorCode.RATE_LIMITED,
}


def _app_settings(request: Request) -> Settings:
    """Get the settings the handling application was created with."""
    return request.app.state.settings


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Exception handlers for unhandled errors run outside the CORS middleware,
    so error responses need the headers added explicitly.

    Args:
        request: The incoming request

    Returns:
        Dict of CORS headers to add to the response
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    # Only add CORS headers if the origin is allowed
    if origin in _app_settings(request).cors_origins_list:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }

    return {}


def error_response(
    request: Request,
    status_code: int,
    detail: Any,
    code: ErrorCode,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON error body shared by every handler."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code},
        headers={**_get_cors_headers(request), **(headers or {})},
    )


def status_for_error(exc: EmployeeAPIError) -> int:
    """Map a domain exception to its HTTP status code.

    Conflicts are reported as 400 to match the published error contract.
    """
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ValidationError, ConflictError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def sanitize_error_detail(detail: Any, status_code: int) -> str:
    """Sanitize error detail to prevent information disclosure.

    Args:
        detail: Original error detail
        status_code: HTTP status code

    Returns:
        Safe error message
    """
    if isinstance(detail, list):
        # Validation errors - extract safe field information
        safe_errors = []
        for error in detail:
            if isinstance(error, dict):
                loc = error.get("loc", [])
                msg = error.get("msg", "Invalid value")
                # Only include field name, not detailed type information
                field = loc[-1] if loc else "field"
                if isinstance(field, str) and not field.startswith("_"):
                    safe_errors.append(f"{field}: {msg}")
        if safe_errors:
            return "; ".join(safe_errors[:3])  # Limit to 3 errors

    # Return generic message for unknown patterns
    return SAFE_ERROR_MESSAGES.get(status_code, "Request failed")


async def employee_api_exception_handler(request: Request, exc: EmployeeAPIError) -> JSONResponse:
    """Handle domain exceptions raised by services.

    Args:
        request: FastAPI request
        exc: Domain exception

    Returns:
        JSONResponse with the exception's code and message
    """
    status_code = status_for_error(exc)
    if status_code >= 500:
        log_error(
            logger,
            f"Unexpected domain error for {request.url.path}",
            exc,
            debug=_app_settings(request).debug,
        )
        return error_response(
            request, status_code, SAFE_ERROR_MESSAGES[500], ErrorCode.INTERNAL_ERROR
        )

    logger.info(f"Rejected {request.method} {request.url.path}: {exc.code}")
    return error_response(request, status_code, exc.message, exc.code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with sanitized error
    """
    if exc.status_code >= 500:
        code = ErrorCode.INTERNAL_ERROR
    else:
        code = HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.INVALID_REQUEST)

    # In debug mode, return original detail
    if _app_settings(request).debug:
        return error_response(request, exc.status_code, exc.detail, code, exc.headers)

    safe_detail = SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")
    return error_response(request, exc.status_code, safe_detail, code, exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with sanitized error
    """
    # Log the field locations only; input values may contain personal data
    logger.warning(
        f"Validation error for {request.url.path}: {[error.get('loc') for error in exc.errors()]}"
    )

    safe_detail = sanitize_error_detail(exc.errors(), HTTP_422_STATUS)
    return error_response(
        request,
        HTTP_422_STATUS,
        safe_detail,
        ErrorCode.INVALID_REQUEST,
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy exceptions without leaking database details.

    A unique-email violation that escaped the service layer is still reported
    as the conflict it is.

    Args:
        request: FastAPI request
        exc: SQLAlchemy exception

    Returns:
        JSONResponse with safe error
    """
    if isinstance(exc, IntegrityError) and is_email_conflict(exc):
        logger.warning(f"Email uniqueness violation for {request.url.path}")
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Email already exists",
            ErrorCode.EMAIL_EXISTS,
        )

    log_error(
        logger,
        f"Database error for {request.url.path}",
        exc,
        debug=_app_settings(request).debug,
    )

    detail = SAFE_ERROR_MESSAGES[500]
    if _app_settings(request).debug:
        detail = f"Database error ({type(exc).__name__})"
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail,
        ErrorCode.INTERNAL_ERROR,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    logger.error(f"Unhandled exception for {request.url.path}", exc_info=exc)

    detail = SAFE_ERROR_MESSAGES[500]
    if _app_settings(request).debug:
        detail = f"{SAFE_ERROR_MESSAGES[500]} ({type(exc).__name__})"
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail,
        ErrorCode.INTERNAL_ERROR,
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit violations, including Retry-After per RFC 6585 Section 4."""
    logger.warning(f"Rate limit exceeded for {request.url.path}")
    return error_response(
        request,
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Rate limit exceeded",
        ErrorCode.RATE_LIMITED,
        headers={"Retry-After": "60"},
    )
