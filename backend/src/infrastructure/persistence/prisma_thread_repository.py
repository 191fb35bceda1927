"""
Prisma Thread Repository Implementation.

Guidelines:
- Implements ThreadRepository port from domain layer
- Uses Prisma client for database operations
- Maps between Prisma models and domain entities / value objects
- All methods are async

Prisma Thread Model (from prisma/schema.prisma):
    model Thread {
        id         String   @id
        title      String
        body       String
        user_id    String
        created_at DateTime @default(now())
        user       User     @relation(...)
    }

Mapping:
- create() result -> AddedThread(id, title, owner=user_id)
- find_unique(include user) -> ThreadDetail(date=created_at, username=user.username)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.domain.entities.added_thread import AddedThread
from src.domain.entities.new_thread import NewThread
from src.domain.exceptions import DomainError, ErrorCode
from src.domain.ports.repositories import ThreadRepository
from src.domain.value_objects.thread_detail import ThreadDetail
from src.infrastructure.persistence.id_generator import IdGenerator, generate_id

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaThreadRepository(ThreadRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma, id_generator: IdGenerator = generate_id):
        self._prisma = prisma
        self._id_generator = id_generator

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        thread_id = f"thread-{self._id_generator()}"
        record = await self._prisma.thread.create(
            data={
                "id": thread_id,
                "title": new_thread.title,
                "body": new_thread.body,
                "user_id": new_thread.owner,
            }
        )
        logger.debug(f"[ThreadRepository] Created {record.id} for {record.user_id}")

        return AddedThread.from_payload(
            {"id": record.id, "title": record.title, "owner": record.user_id}
        )

    async def verify_thread_exists(self, thread_id: str) -> None:
        record = await self._prisma.thread.find_unique(where={"id": thread_id})
        if not record:
            raise DomainError(ErrorCode.GET_THREAD_NO_THREAD_FOUND, thread_id=thread_id)

    async def get_thread_by_id(self, thread_id: str) -> ThreadDetail:
        """Get thread with its author's username."""
        record = await self._prisma.thread.find_unique(
            where={"id": thread_id},
            include={"user": True},
        )
        if not record:
            raise DomainError(ErrorCode.GET_THREAD_NO_THREAD_FOUND, thread_id=thread_id)

        return ThreadDetail(
            id=record.id,
            title=record.title,
            body=record.body,
            date=record.created_at,
            username=record.user.username if record.user else None,
        )
