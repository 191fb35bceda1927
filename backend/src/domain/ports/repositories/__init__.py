"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the use cases need
- Does NOT specify implementation (Prisma, in-memory, etc.)

An implementation that leaves any method abstract cannot be instantiated.
Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.thread_repository import ThreadRepository
from src.domain.ports.repositories.comment_repository import CommentRepository

__all__ = [
    "ThreadRepository",
    "CommentRepository",
]
