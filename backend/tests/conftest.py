import os
import sys
import time
from datetime import datetime, timedelta, timezone
from itertools import count

import jwt
import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))
os.environ.setdefault("APP_ENV", "testing")

from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from src.config.settings import get_config
from src.domain.entities import AddedComment, AddedThread, NewComment, NewThread
from src.domain.exceptions import DomainError, ErrorCode
from src.domain.ports.repositories import CommentRepository, ThreadRepository
from src.domain.value_objects import ThreadComment, ThreadDetail
from src.fastapi_app import create_fastapi_app
from src.setup.ioc.container import create_container

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
USERNAMES = {"user-123": "dicoding", "user-456": "john"}


class InMemoryThreadRepository(ThreadRepository):
    def __init__(self):
        self.threads: dict[str, dict] = {}
        self._ids = count(1)

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        thread_id = f"thread-{next(self._ids)}"
        self.threads[thread_id] = {
            "id": thread_id,
            "title": new_thread.title,
            "body": new_thread.body,
            "owner": new_thread.owner,
            "created_at": BASE_TIME + timedelta(minutes=len(self.threads)),
        }
        return AddedThread(id=thread_id, title=new_thread.title, owner=new_thread.owner)

    async def get_thread_by_id(self, thread_id: str) -> ThreadDetail:
        await self.verify_thread_exists(thread_id)
        row = self.threads[thread_id]
        return ThreadDetail(
            id=row["id"],
            title=row["title"],
            body=row["body"],
            date=row["created_at"],
            username=USERNAMES.get(row["owner"]),
        )

    async def verify_thread_exists(self, thread_id: str) -> None:
        if thread_id not in self.threads:
            raise DomainError(ErrorCode.GET_THREAD_NO_THREAD_FOUND, thread_id=thread_id)


class InMemoryCommentRepository(CommentRepository):
    def __init__(self):
        self.comments: dict[str, dict] = {}
        self._ids = count(1)

    async def add_comment(
        self, new_comment: NewComment, thread_id: str, owner: str
    ) -> AddedComment:
        comment_id = f"comment-{next(self._ids)}"
        self.comments[comment_id] = {
            "id": comment_id,
            "content": new_comment.content,
            "thread_id": thread_id,
            "owner": owner,
            "is_delete": False,
            "created_at": BASE_TIME + timedelta(hours=len(self.comments) + 1),
        }
        return AddedComment(id=comment_id, content=new_comment.content, owner=owner)

    async def check_comment_availability(self, comment_id: str) -> None:
        if comment_id not in self.comments:
            raise DomainError(
                ErrorCode.GET_THREAD_COMMENT_NO_THREAD_COMMENT_FOUND,
                comment_id=comment_id,
            )

    async def verify_comment_owner(self, comment_id: str, owner: str) -> None:
        await self.check_comment_availability(comment_id)
        if self.comments[comment_id]["owner"] != owner:
            raise DomainError(ErrorCode.VERIFY_COMMENT_OWNER_ACCESS_FORBIDEN)

    async def delete_comment_by_id(self, comment_id: str) -> None:
        self.comments[comment_id]["is_delete"] = True

    async def get_comments_by_thread_id(self, thread_id: str) -> list[ThreadComment]:
        rows = sorted(
            (row for row in self.comments.values() if row["thread_id"] == thread_id),
            key=lambda row: row["created_at"],
        )
        return [
            ThreadComment(
                id=row["id"],
                username=USERNAMES.get(row["owner"]),
                date=row["created_at"],
                content=row["content"],
                is_delete=row["is_delete"],
            )
            for row in rows
        ]


class InMemoryProvider(Provider):
    """Hands the same in-memory repositories to every request."""

    def __init__(self, threads: ThreadRepository, comments: CommentRepository):
        super().__init__()
        self._threads = threads
        self._comments = comments

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        return self._threads

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self._comments


def _access_token(user_id="user-123", username="dicoding", expires_in=300):
    now = int(time.time())
    return jwt.encode(
        {"id": user_id, "username": username, "iat": now, "exp": now + expires_in},
        get_config().ACCESS_TOKEN_KEY,
        algorithm="HS256",
    )


@pytest.fixture()
def thread_repository():
    return InMemoryThreadRepository()


@pytest.fixture()
def comment_repository():
    return InMemoryCommentRepository()


@pytest.fixture()
def app(thread_repository, comment_repository):
    """Create a FastAPI app backed by in-memory repositories."""
    container = create_container(
        InMemoryProvider(thread_repository, comment_repository)
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def access_token():
    """Factory for signed access tokens."""
    return _access_token


@pytest.fixture()
def auth_headers():
    """Authentication headers for user-123."""
    return {"Authorization": f"Bearer {_access_token()}"}
