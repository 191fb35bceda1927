"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.threads import router as threads_router

__all__ = [
    "threads_router",
]
