"""
Comment Repository Port - Interface for comment persistence.
Implementation: src/infrastructure/persistence/prisma_comment_repository.py

Comments are soft-deleted: delete_comment_by_id only sets the tombstone
flag. Rows disappear physically only when their thread is removed.
"""

from abc import ABC, abstractmethod

from src.domain.entities.added_comment import AddedComment
from src.domain.entities.new_comment import NewComment
from src.domain.value_objects.thread_comment import ThreadComment


class CommentRepository(ABC):
    @abstractmethod
    async def add_comment(
        self, new_comment: NewComment, thread_id: str, owner: str
    ) -> AddedComment: ...

    @abstractmethod
    async def check_comment_availability(self, comment_id: str) -> None:
        """Raises DomainError(GET_THREAD_COMMENT_NO_THREAD_COMMENT_FOUND) if absent."""

    @abstractmethod
    async def verify_comment_owner(self, comment_id: str, owner: str) -> None:
        """Raises DomainError(VERIFY_COMMENT_OWNER_ACCESS_FORBIDEN) on mismatch."""

    @abstractmethod
    async def delete_comment_by_id(self, comment_id: str) -> None: ...

    @abstractmethod
    async def get_comments_by_thread_id(self, thread_id: str) -> list[ThreadComment]:
        """Comments of a thread, oldest first."""
