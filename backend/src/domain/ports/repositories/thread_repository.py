"""
Thread Repository Port - Interface for thread persistence.
Implementation: src/infrastructure/persistence/prisma_thread_repository.py
"""

from abc import ABC, abstractmethod

from src.domain.entities.added_thread import AddedThread
from src.domain.entities.new_thread import NewThread
from src.domain.value_objects.thread_detail import ThreadDetail


class ThreadRepository(ABC):
    @abstractmethod
    async def add_thread(self, new_thread: NewThread) -> AddedThread: ...

    @abstractmethod
    async def get_thread_by_id(self, thread_id: str) -> ThreadDetail:
        """Raises DomainError(GET_THREAD_NO_THREAD_FOUND) if the thread is absent."""

    @abstractmethod
    async def verify_thread_exists(self, thread_id: str) -> None:
        """Raises DomainError(GET_THREAD_NO_THREAD_FOUND) if the thread is absent."""
