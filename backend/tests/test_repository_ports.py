"""Repository ports must be implemented completely."""

import pytest

from src.domain.ports.repositories import CommentRepository, ThreadRepository


def test_thread_repository_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ThreadRepository()


def test_comment_repository_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CommentRepository()


def test_partial_implementation_is_rejected():
    class HalfDoneThreadRepository(ThreadRepository):
        async def add_thread(self, new_thread):
            return None

    with pytest.raises(TypeError) as exc_info:
        HalfDoneThreadRepository()

    assert "get_thread_by_id" in str(exc_info.value)
    assert "verify_thread_exists" in str(exc_info.value)


def test_in_memory_doubles_satisfy_the_ports(thread_repository, comment_repository):
    assert isinstance(thread_repository, ThreadRepository)
    assert isinstance(comment_repository, CommentRepository)
