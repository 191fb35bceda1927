"""
Prisma-backed repository provider.
"""

from typing import AsyncIterator

from dishka import Provider, Scope, provide
from prisma import Prisma

from src.domain.ports.repositories import CommentRepository, ThreadRepository
from src.infrastructure.persistence import (
    PrismaCommentRepository,
    PrismaThreadRepository,
)


class PrismaProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterator[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container is closed on shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, prisma: Prisma) -> ThreadRepository:
        """
        - Return type is ABSTRACT (ThreadRepository)
        - Implementation is CONCRETE (PrismaThreadRepository)
        """
        return PrismaThreadRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)
