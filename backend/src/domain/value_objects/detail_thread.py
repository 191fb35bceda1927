"""
DetailThread / DetailComment Value Objects - Output of GetDetailThreadUseCase.

DetailComment deliberately has no tombstone attribute.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

DELETED_COMMENT_CONTENT = "**komentar telah dihapus**"


def to_iso_date(value: Union[datetime, str]) -> str:
    """Render a stored timestamp as ISO-8601; strings are assumed to be ISO already."""
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def parse_iso_date(value: Union[datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class DetailComment:
    id: str
    username: Optional[str]
    date: str
    content: str


@dataclass(frozen=True)
class DetailThread:
    id: str
    title: str
    body: str
    date: str
    username: Optional[str]
    comments: list[DetailComment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
