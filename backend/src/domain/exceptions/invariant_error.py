"""
InvariantError - Raised when client input breaks an entity invariant.
Maps to: HTTP 400 Bad Request
"""

from src.domain.exceptions.client_error import ClientError


class InvariantError(ClientError):
    """Exception raised for client-correctable validation errors."""

    status_code = 400
