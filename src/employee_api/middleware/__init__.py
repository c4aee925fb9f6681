"""Middleware package."""

from employee_api.middleware.request_id_middleware import RequestIDMiddleware
from employee_api.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
