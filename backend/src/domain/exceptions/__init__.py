"""
DOMAIN EXCEPTIONS - Business rule violations

Internal failures are raised as DomainError(ErrorCode.X). The presentation
layer passes them through DomainErrorTranslator, which yields one of the
client-safe errors below (each knows its HTTP status), or returns the
original error untouched when it has no mapping.
"""

from src.domain.exceptions.error_code import ErrorCode
from src.domain.exceptions.domain_error import DomainError
from src.domain.exceptions.client_error import ClientError
from src.domain.exceptions.invariant_error import InvariantError
from src.domain.exceptions.not_found_error import NotFoundError
from src.domain.exceptions.authorization_error import AuthorizationError
from src.domain.exceptions.error_translator import DomainErrorTranslator

__all__ = [
    "ErrorCode",
    "DomainError",
    "ClientError",
    "InvariantError",
    "NotFoundError",
    "AuthorizationError",
    "DomainErrorTranslator",
]
