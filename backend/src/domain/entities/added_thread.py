"""
AddedThread Entity - A thread as stored, returned by ThreadRepository.add_thread.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.domain.exceptions import DomainError, ErrorCode

_FIELDS = ("id", "title", "owner")


def verify_added_thread_payload(payload: Mapping[str, Any]) -> Optional[ErrorCode]:
    values = [payload.get(field) for field in _FIELDS]

    if not all(values):
        return ErrorCode.ADDED_THREAD_LACK_REQUIRED_PROPERTY

    if not all(isinstance(value, str) for value in values):
        return ErrorCode.ADDED_THREAD_DATA_TYPE_NOT_MEET_SPECIFICATION

    return None


@dataclass(frozen=True)
class AddedThread:
    id: str
    title: str
    owner: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> AddedThread:
        error_code = verify_added_thread_payload(payload)
        if error_code is not None:
            raise DomainError(error_code)

        return cls(id=payload["id"], title=payload["title"], owner=payload["owner"])
