"""
NotFoundError - Raised when a referenced thread or comment does not exist.
Maps to: HTTP 404 Not Found
"""

from src.domain.exceptions.client_error import ClientError


class NotFoundError(ClientError):
    """Exception raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, message: str = "resource tidak ditemukan"):
        super().__init__(message)
