"""
VALUE OBJECTS - Immutable read shapes

Each value object:
- Has no identity of its own (compared by value)
- Is immutable (frozen dataclass)
- Pure Python (no framework dependencies)
"""

from src.domain.value_objects.thread_detail import ThreadDetail
from src.domain.value_objects.thread_comment import ThreadComment
from src.domain.value_objects.detail_thread import (
    DELETED_COMMENT_CONTENT,
    DetailComment,
    DetailThread,
    parse_iso_date,
    to_iso_date,
)

__all__ = [
    "ThreadDetail",
    "ThreadComment",
    "DetailThread",
    "DetailComment",
    "DELETED_COMMENT_CONTENT",
    "parse_iso_date",
    "to_iso_date",
]
