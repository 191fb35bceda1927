"""
Threads API Router - FastAPI endpoints for threads and their comments.

Guidelines:
- Receives use cases via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Request bodies are taken as raw JSON objects; the domain entities decide
  what is valid, so clients get the domain's error messages
- Errors are not caught here: the app-level handlers translate them

Flow:
  HTTP Request → Router → Command → Use Case → Repository → Database
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from src.application.commands.comments import (
    AddCommentCommand,
    AddCommentUseCase,
    DeleteCommentCommand,
    DeleteCommentUseCase,
)
from src.application.commands.threads import AddThreadCommand, AddThreadUseCase
from src.application.queries.threads import (
    GetDetailThreadQuery,
    GetDetailThreadUseCase,
)
from src.application.dto import AddedCommentDTO, AddedThreadDTO, ThreadDetailDTO
from src.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== RESPONSE MODELS ====================


class AddThreadData(BaseModel):
    addedThread: AddedThreadDTO


class AddThreadResponse(BaseModel):
    """
    {"status": "success", "data": {"addedThread": {"id", "title", "owner"}}}
    """

    status: str = "success"
    data: AddThreadData


class AddCommentData(BaseModel):
    addedComment: AddedCommentDTO


class AddCommentResponse(BaseModel):
    status: str = "success"
    data: AddCommentData


class DetailThreadData(BaseModel):
    thread: ThreadDetailDTO


class DetailThreadResponse(BaseModel):
    status: str = "success"
    data: DetailThreadData


class SuccessResponse(BaseModel):
    status: str = "success"


# ==================== ROUTER ====================

router = APIRouter(prefix="/threads", tags=["threads"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=AddThreadResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_thread(
    use_case: FromDishka[AddThreadUseCase],
    payload: Optional[dict[str, Any]] = Body(None),
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a new thread owned by the caller."""
    payload = payload or {}
    command = AddThreadCommand(
        title=payload.get("title"),
        body=payload.get("body"),
        owner=current_user.id,
    )
    added_thread = await use_case.execute(command)
    logger.info(f"Thread {added_thread.id} created by {current_user.id}")

    return AddThreadResponse(
        data=AddThreadData(addedThread=AddedThreadDTO.from_entity(added_thread))
    )


@router.get(
    "/{thread_id}",
    response_model=DetailThreadResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_thread(
    thread_id: str,
    use_case: FromDishka[GetDetailThreadUseCase],
):
    """
    Get a thread with its comments, oldest first.

    Public: no authentication required.
    Deleted comments appear with content "**komentar telah dihapus**".
    """
    detail = await use_case.execute(GetDetailThreadQuery(thread_id=thread_id))

    return DetailThreadResponse(
        data=DetailThreadData(thread=ThreadDetailDTO.from_value_object(detail))
    )


@router.post(
    "/{thread_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_comment(
    thread_id: str,
    use_case: FromDishka[AddCommentUseCase],
    payload: Optional[dict[str, Any]] = Body(None),
    current_user: AuthUser = Depends(get_current_user),
):
    """Add a comment to a thread."""
    payload = payload or {}
    command = AddCommentCommand(
        content=payload.get("content"),
        thread_id=thread_id,
        owner=current_user.id,
    )
    added_comment = await use_case.execute(command)
    logger.info(f"Comment {added_comment.id} added to {thread_id}")

    return AddCommentResponse(
        data=AddCommentData(addedComment=AddedCommentDTO.from_entity(added_comment))
    )


@router.delete(
    "/{thread_id}/comments/{comment_id}",
    response_model=SuccessResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_comment(
    thread_id: str,
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
    current_user: AuthUser = Depends(get_current_user),
):
    """Soft-delete one of the caller's own comments."""
    command = DeleteCommentCommand(
        thread_id=thread_id,
        comment_id=comment_id,
        owner=current_user.id,
    )
    await use_case.execute(command)
    logger.info(f"Comment {comment_id} on {thread_id} deleted by {current_user.id}")

    return SuccessResponse()
