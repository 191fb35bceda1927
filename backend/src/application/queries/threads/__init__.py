"""Thread queries."""

from src.application.queries.threads.get_detail_thread import (
    GetDetailThreadQuery,
    GetDetailThreadUseCase,
)

__all__ = [
    "GetDetailThreadQuery",
    "GetDetailThreadUseCase",
]
