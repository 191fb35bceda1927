"""Comment commands."""

from .add_comment import AddCommentCommand, AddCommentUseCase
from .delete_comment import DeleteCommentCommand, DeleteCommentUseCase

__all__ = [
    "AddCommentCommand",
    "AddCommentUseCase",
    "DeleteCommentCommand",
    "DeleteCommentUseCase",
]
