"""
NewThread Entity - A thread as submitted by a user, before it has an id.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.domain.exceptions import DomainError, ErrorCode

TITLE_MAX_LENGTH = 50


def verify_new_thread_payload(payload: Mapping[str, Any]) -> Optional[ErrorCode]:
    """Return the first broken rule (required -> type -> length), or None."""
    title = payload.get("title")
    body = payload.get("body")

    if not title or not body:
        return ErrorCode.NEW_THREAD_LACK_REQUIRED_PROPERTY

    if not isinstance(title, str) or not isinstance(body, str):
        return ErrorCode.NEW_THREAD_DATA_TYPE_NOT_MEET_SPECIFICATION

    if len(title) > TITLE_MAX_LENGTH:
        return ErrorCode.NEW_THREAD_TITLE_LIMIT_CHAR

    return None


@dataclass(frozen=True)
class NewThread:
    title: str
    body: str
    owner: str  # user id, taken from the verified access token

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> NewThread:
        error_code = verify_new_thread_payload(payload)
        if error_code is not None:
            raise DomainError(error_code)

        return cls(
            title=payload["title"],
            body=payload["body"],
            owner=payload.get("owner"),
        )
