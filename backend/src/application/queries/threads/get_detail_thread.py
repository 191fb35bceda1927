"""
GetDetailThread Query - Get a thread with all of its comments.

Deleted comments stay in the list (so the discussion keeps its shape) but
their content is replaced and the tombstone flag is dropped.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.ports.repositories import CommentRepository, ThreadRepository
from src.domain.value_objects import (
    DELETED_COMMENT_CONTENT,
    DetailComment,
    DetailThread,
    ThreadComment,
    parse_iso_date,
    to_iso_date,
)


@dataclass(frozen=True)
class GetDetailThreadQuery(Query[DetailThread]):
    thread_id: str


class GetDetailThreadUseCase(QueryHandler[DetailThread]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository

    async def execute(self, query: GetDetailThreadQuery) -> DetailThread:
        """
        Steps:
        1. Fetch the thread (the repository raises not-found itself)
        2. Fetch its comments
        3. Redact deleted comments
        4. Sort by date ascending, regardless of storage order

        Raises:
            DomainError(GET_THREAD_NO_THREAD_FOUND): If the thread doesn't exist
        """
        thread = await self._thread_repository.get_thread_by_id(query.thread_id)
        comments = await self._comment_repository.get_comments_by_thread_id(
            query.thread_id
        )

        # sorted() is stable: comments with equal dates keep storage order
        ordered = sorted(comments, key=lambda comment: parse_iso_date(comment.date))

        return DetailThread(
            id=thread.id,
            title=thread.title,
            body=thread.body,
            date=to_iso_date(thread.date),
            username=thread.username,
            comments=[self._to_detail_comment(comment) for comment in ordered],
        )

    @staticmethod
    def _to_detail_comment(comment: ThreadComment) -> DetailComment:
        return DetailComment(
            id=comment.id,
            username=comment.username,
            date=to_iso_date(comment.date),
            content=DELETED_COMMENT_CONTENT if comment.is_delete else comment.content,
        )
