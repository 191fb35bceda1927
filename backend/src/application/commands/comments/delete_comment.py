"""Delete Comment Command."""

from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.ports.repositories import CommentRepository, ThreadRepository


@dataclass(frozen=True)
class DeleteCommentCommand(Command[None]):
    thread_id: str
    comment_id: str
    owner: str


class DeleteCommentUseCase(CommandHandler[None]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository

    async def execute(self, command: DeleteCommentCommand) -> None:
        """
        Soft-delete a comment. Each check must pass before the next runs:
        thread exists -> comment exists -> caller owns it -> set tombstone.

        Deleting an already-deleted comment runs the full chain again and
        leaves the tombstone set.
        """
        await self._thread_repository.verify_thread_exists(command.thread_id)
        await self._comment_repository.check_comment_availability(command.comment_id)
        await self._comment_repository.verify_comment_owner(
            command.comment_id, command.owner
        )
        await self._comment_repository.delete_comment_by_id(command.comment_id)
