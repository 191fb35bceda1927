"""
ThreadComment Value Object - A stored comment row, tombstone flag included.

Only repositories and GetDetailThreadUseCase see this shape; it must never be
returned to clients because `is_delete` and the retained content of deleted
comments are internal.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class ThreadComment:
    id: str
    username: Optional[str]
    date: Union[datetime, str]  # created_at
    content: str
    is_delete: bool = False
