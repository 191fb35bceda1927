"""
Prisma Comment Repository Implementation.

Implements CommentRepository on the `thread_comments` table:

    model ThreadComment {
        id         String   @id
        content    String
        thread_id  String
        user_id    String
        is_delete  Boolean  @default(false)
        created_at DateTime @default(now())
    }

Deleting only flips `is_delete`; the row (and its content) stays until the
parent thread is removed by the cascade.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.domain.entities.added_comment import AddedComment
from src.domain.entities.new_comment import NewComment
from src.domain.exceptions import DomainError, ErrorCode
from src.domain.ports.repositories import CommentRepository
from src.domain.value_objects.thread_comment import ThreadComment
from src.infrastructure.persistence.id_generator import IdGenerator, generate_id

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import ThreadComment as PrismaThreadComment

logger = logging.getLogger(__name__)


class PrismaCommentRepository(CommentRepository):
    """
    Prisma implementation of CommentRepository.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma, id_generator: IdGenerator = generate_id):
        """
        Args:
            prisma: Connected Prisma client (injected by DI container)
            id_generator: Source of the random part of new comment ids
        """
        self._prisma = prisma
        self._id_generator = id_generator

    def _to_value_object(self, record: PrismaThreadComment) -> ThreadComment:
        return ThreadComment(
            id=record.id,
            username=record.user.username if record.user else None,
            date=record.created_at,
            content=record.content,
            is_delete=record.is_delete,
        )

    async def _find_or_raise(self, comment_id: str) -> PrismaThreadComment:
        record = await self._prisma.threadcomment.find_unique(where={"id": comment_id})
        if not record:
            raise DomainError(
                ErrorCode.GET_THREAD_COMMENT_NO_THREAD_COMMENT_FOUND,
                comment_id=comment_id,
            )
        return record

    async def add_comment(
        self, new_comment: NewComment, thread_id: str, owner: str
    ) -> AddedComment:
        comment_id = f"comment-{self._id_generator()}"
        record = await self._prisma.threadcomment.create(
            data={
                "id": comment_id,
                "content": new_comment.content,
                "thread_id": thread_id,
                "user_id": owner,
                "is_delete": False,
            }
        )
        logger.debug(f"[CommentRepository] Created {record.id} on {thread_id}")

        return AddedComment.from_payload(
            {"id": record.id, "content": record.content, "owner": record.user_id}
        )

    async def check_comment_availability(self, comment_id: str) -> None:
        await self._find_or_raise(comment_id)

    async def verify_comment_owner(self, comment_id: str, owner: str) -> None:
        record = await self._find_or_raise(comment_id)
        if record.user_id != owner:
            raise DomainError(
                ErrorCode.VERIFY_COMMENT_OWNER_ACCESS_FORBIDEN,
                comment_id=comment_id,
                owner=owner,
            )

    async def delete_comment_by_id(self, comment_id: str) -> None:
        """Soft delete: set the tombstone flag, keep the row."""
        await self._prisma.threadcomment.update(
            where={"id": comment_id},
            data={"is_delete": True},
        )
        logger.debug(f"[CommentRepository] Soft-deleted {comment_id}")

    async def get_comments_by_thread_id(self, thread_id: str) -> list[ThreadComment]:
        """Get comments for a thread, oldest first, with author usernames."""
        records = await self._prisma.threadcomment.find_many(
            where={"thread_id": thread_id},
            include={"user": True},
            order={"created_at": "asc"},
        )
        return [self._to_value_object(record) for record in records]
