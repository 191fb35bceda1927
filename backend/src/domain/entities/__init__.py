"""
ENTITIES - Thread and comment objects that validate themselves

Each entity:
- Is a frozen dataclass
- Is built through from_payload(), which checks required fields first,
  then types, then ranges, and raises DomainError on the first failure
- Pure Python (no ORM, no Pydantic)
"""

from src.domain.entities.new_thread import NewThread, TITLE_MAX_LENGTH
from src.domain.entities.added_thread import AddedThread
from src.domain.entities.new_comment import NewComment
from src.domain.entities.added_comment import AddedComment

__all__ = [
    "NewThread",
    "AddedThread",
    "NewComment",
    "AddedComment",
    "TITLE_MAX_LENGTH",
]
