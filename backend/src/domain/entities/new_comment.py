"""
NewComment Entity - A comment as submitted by a user.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.domain.exceptions import DomainError, ErrorCode


def verify_new_comment_payload(payload: Mapping[str, Any]) -> Optional[ErrorCode]:
    content = payload.get("content")

    if not content:
        return ErrorCode.NEW_COMMENT_NOT_CONTAIN_NEEDED_PROPERTY

    if not isinstance(content, str):
        return ErrorCode.NEW_COMMENT_NOT_MEET_DATA_TYPE_SPECIFICATION

    return None


@dataclass(frozen=True)
class NewComment:
    content: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> NewComment:
        error_code = verify_new_comment_payload(payload)
        if error_code is not None:
            raise DomainError(error_code)

        return cls(content=payload["content"])
