"""Rate limiting for mutating endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from employee_api.config import Settings, get_settings

_settings = get_settings()

# In-memory storage; limits apply per process
limiter = Limiter(
    key_func=get_remote_address,
    enabled=_settings.rate_limit_enabled,
)

_write_limit_per_minute = _settings.rate_limit_write


def configure_rate_limit(settings: Settings) -> None:
    """Apply an application's rate limit settings to the shared limiter.

    Route decorators bind the limiter at import time, so ``create_app``
    reconfigures it in place rather than building a new one.
    """
    global _write_limit_per_minute
    limiter.enabled = settings.rate_limit_enabled
    _write_limit_per_minute = settings.rate_limit_write


def write_operation_limit() -> str:
    """Create, update and delete share one budget per client."""
    return f"{_write_limit_per_minute}/minute"
