"""
DomainError - Internal failure raised by entities and repository adapters.
Never sent to clients directly; see DomainErrorTranslator.
"""

from typing import Any

from src.domain.exceptions.error_code import ErrorCode


class DomainError(Exception):
    """Raised with one ErrorCode and optional structured context."""

    def __init__(self, code: ErrorCode, **context: Any):
        super().__init__(code.value)
        self.code = code
        self.context = context

    def __repr__(self) -> str:
        return f"DomainError({self.code.value!r}, context={self.context!r})"
