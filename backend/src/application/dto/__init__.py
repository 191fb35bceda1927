"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- thread.py → AddedThreadDTO, AddedCommentDTO, ThreadDetailDTO, CommentDTO

Note: These are different from domain entities.
DTOs are for API output, entities are for business logic.
"""

from src.application.dto.thread import (
    AddedCommentDTO,
    AddedThreadDTO,
    CommentDTO,
    ThreadDetailDTO,
)

__all__ = [
    "AddedThreadDTO",
    "AddedCommentDTO",
    "CommentDTO",
    "ThreadDetailDTO",
]
