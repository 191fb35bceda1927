"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from src.infrastructure.persistence.prisma_thread_repository import (
    PrismaThreadRepository,
)
from src.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from src.infrastructure.persistence.id_generator import generate_id

__all__ = [
    "PrismaThreadRepository",
    "PrismaCommentRepository",
    "generate_id",
]
