"""
ClientError - Base class for errors that are safe to show to API clients.
"""


class ClientError(Exception):
    """Carries a human message and the HTTP status it maps to."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
