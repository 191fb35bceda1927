"""
ThreadDetail Value Object - A stored thread joined with its author's username.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class ThreadDetail:
    id: str
    title: str
    body: str
    date: Union[datetime, str]  # created_at
    username: Optional[str]
