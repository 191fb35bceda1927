"""
AddedComment Entity - A comment as stored, returned by CommentRepository.add_comment.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.domain.exceptions import DomainError, ErrorCode

_FIELDS = ("id", "content", "owner")


def verify_added_comment_payload(payload: Mapping[str, Any]) -> Optional[ErrorCode]:
    values = [payload.get(field) for field in _FIELDS]

    if not all(values):
        return ErrorCode.ADDED_COMMENT_NOT_CONTAIN_NEEDED_PROPERTY

    if not all(isinstance(value, str) for value in values):
        return ErrorCode.ADDED_COMMENT_NOT_MEET_DATA_TYPE_SPECIFICATION

    return None


@dataclass(frozen=True)
class AddedComment:
    id: str
    content: str
    owner: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> AddedComment:
        error_code = verify_added_comment_payload(payload)
        if error_code is not None:
            raise DomainError(error_code)

        return cls(
            id=payload["id"], content=payload["content"], owner=payload["owner"]
        )
