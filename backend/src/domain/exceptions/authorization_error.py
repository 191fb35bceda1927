"""
AuthorizationError - Raised when the caller is authenticated but does not
own the resource being mutated.
Maps to: HTTP 403 Forbidden
"""

from src.domain.exceptions.client_error import ClientError


class AuthorizationError(ClientError):
    """Raised when user lacks permission to modify a resource"""

    status_code = 403

    def __init__(self, message: str = "Anda tidak berhak mengakses resource ini"):
        super().__init__(message)
