"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class AddThreadCommand(Command[AddedThread]):
        title: Any
        body: Any
        owner: str

    class AddThreadUseCase(CommandHandler[AddedThread]):
        def __init__(self, thread_repository: ThreadRepository):
            self._thread_repository = thread_repository

        async def execute(self, command: AddThreadCommand) -> AddedThread:
            new_thread = NewThread.from_payload({...})
            return await self._thread_repository.add_thread(new_thread)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
