"""DeleteCommentUseCase tests."""

from unittest.mock import AsyncMock, Mock, call

import pytest

from src.application.commands.comments import (
    DeleteCommentCommand,
    DeleteCommentUseCase,
)
from src.domain.exceptions import DomainError, ErrorCode
from src.domain.ports.repositories import CommentRepository, ThreadRepository

COMMAND = DeleteCommentCommand(
    thread_id="thread-123", comment_id="comment-123", owner="user-123"
)


@pytest.fixture
def repositories():
    thread_repository = AsyncMock(spec=ThreadRepository)
    comment_repository = AsyncMock(spec=CommentRepository)

    calls = Mock()
    calls.attach_mock(thread_repository.verify_thread_exists, "verify_thread_exists")
    for name in (
        "check_comment_availability",
        "verify_comment_owner",
        "delete_comment_by_id",
    ):
        calls.attach_mock(getattr(comment_repository, name), name)

    return thread_repository, comment_repository, calls


@pytest.mark.asyncio
async def test_runs_four_checks_in_order(repositories):
    thread_repository, comment_repository, calls = repositories
    use_case = DeleteCommentUseCase(thread_repository, comment_repository)

    result = await use_case.execute(COMMAND)

    assert result is None
    assert calls.mock_calls == [
        call.verify_thread_exists("thread-123"),
        call.check_comment_availability("comment-123"),
        call.verify_comment_owner("comment-123", "user-123"),
        call.delete_comment_by_id("comment-123"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "failing_step, code, calls_made",
    [
        ("verify_thread_exists", ErrorCode.GET_THREAD_NO_THREAD_FOUND, 1),
        (
            "check_comment_availability",
            ErrorCode.GET_THREAD_COMMENT_NO_THREAD_COMMENT_FOUND,
            2,
        ),
        ("verify_comment_owner", ErrorCode.VERIFY_COMMENT_OWNER_ACCESS_FORBIDEN, 3),
    ],
)
async def test_short_circuits_on_failed_check(
    repositories, failing_step, code, calls_made
):
    thread_repository, comment_repository, calls = repositories
    repository = (
        thread_repository
        if failing_step == "verify_thread_exists"
        else comment_repository
    )
    getattr(repository, failing_step).side_effect = DomainError(code)
    use_case = DeleteCommentUseCase(thread_repository, comment_repository)

    with pytest.raises(DomainError) as exc_info:
        await use_case.execute(COMMAND)

    assert exc_info.value.code is code
    assert len(calls.mock_calls) == calls_made
    comment_repository.delete_comment_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_deleting_twice_runs_full_chain_again(repositories):
    thread_repository, comment_repository, calls = repositories
    use_case = DeleteCommentUseCase(thread_repository, comment_repository)

    await use_case.execute(COMMAND)
    await use_case.execute(COMMAND)

    assert len(calls.mock_calls) == 8
    assert comment_repository.verify_comment_owner.await_count == 2
