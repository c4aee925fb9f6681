"""Request ID generation utilities."""

import re
import uuid

# Client-supplied IDs are echoed only if they look like plain tokens
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._\-]{1,64}$")


def generate_request_id() -> str:
    """Generate a unique request ID for tracing.

    Returns:
        A UUID4 string for request tracking across the application.
    """
    return str(uuid.uuid4())


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a well-formed incoming request ID or generate a new one."""
    if incoming and _SAFE_REQUEST_ID.match(incoming):
        return incoming
    return generate_request_id()
