"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- threads/ → get_detail_thread
"""

from src.application.queries.threads import (
    GetDetailThreadQuery,
    GetDetailThreadUseCase,
)

__all__ = [
    "GetDetailThreadQuery",
    "GetDetailThreadUseCase",
]
