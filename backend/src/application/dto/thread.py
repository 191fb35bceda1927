"""Thread and comment DTOs for API responses."""

from typing import Optional
from pydantic import BaseModel

from src.domain.entities.added_comment import AddedComment
from src.domain.entities.added_thread import AddedThread
from src.domain.value_objects.detail_thread import DetailThread


class AddedThreadDTO(BaseModel):
    id: str
    title: str
    owner: str

    @classmethod
    def from_entity(cls, thread: AddedThread) -> "AddedThreadDTO":
        return cls(id=thread.id, title=thread.title, owner=thread.owner)


class AddedCommentDTO(BaseModel):
    id: str
    content: str
    owner: str

    @classmethod
    def from_entity(cls, comment: AddedComment) -> "AddedCommentDTO":
        return cls(id=comment.id, content=comment.content, owner=comment.owner)


class CommentDTO(BaseModel):
    id: str
    username: Optional[str] = None
    date: str
    content: str


class ThreadDetailDTO(BaseModel):
    id: str
    title: str
    body: str
    date: str
    username: Optional[str] = None
    comments: list[CommentDTO]

    @classmethod
    def from_value_object(cls, thread: DetailThread) -> "ThreadDetailDTO":
        return cls.model_validate(thread.to_dict())
