"""Add Comment Command."""

from dataclasses import dataclass
from typing import Any

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.added_comment import AddedComment
from src.domain.entities.new_comment import NewComment
from src.domain.ports.repositories import CommentRepository, ThreadRepository


@dataclass(frozen=True)
class AddCommentCommand(Command[AddedComment]):
    content: Any
    thread_id: str
    owner: str


class AddCommentUseCase(CommandHandler[AddedComment]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository

    async def execute(self, command: AddCommentCommand) -> AddedComment:
        """
        Steps (order matters):
        1. Validate the payload - a malformed comment never reaches the database
        2. Verify the parent thread exists - no orphaned comments
        3. Persist the comment
        """
        new_comment = NewComment.from_payload({"content": command.content})

        await self._thread_repository.verify_thread_exists(command.thread_id)

        return await self._comment_repository.add_comment(
            new_comment, command.thread_id, command.owner
        )
