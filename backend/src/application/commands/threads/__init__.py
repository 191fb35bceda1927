"""Thread commands."""

from .add_thread import AddThreadCommand, AddThreadUseCase

__all__ = [
    "AddThreadCommand",
    "AddThreadUseCase",
]
