"""
Add Thread Command.

Fields are typed Any on purpose: the command carries the raw request values
and NewThread decides whether they are acceptable.
"""

from dataclasses import dataclass
from typing import Any

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.added_thread import AddedThread
from src.domain.entities.new_thread import NewThread
from src.domain.ports.repositories import ThreadRepository


@dataclass(frozen=True)
class AddThreadCommand(Command[AddedThread]):
    title: Any
    body: Any
    owner: str


class AddThreadUseCase(CommandHandler[AddedThread]):
    _thread_repository: ThreadRepository

    def __init__(self, thread_repository: ThreadRepository):
        self._thread_repository = thread_repository

    async def execute(self, command: AddThreadCommand) -> AddedThread:
        new_thread = NewThread.from_payload(
            {"title": command.title, "body": command.body, "owner": command.owner}
        )
        return await self._thread_repository.add_thread(new_thread)
