"""
Id generation for persisted rows.

Repositories receive a zero-argument callable and prefix its result
("thread-", "comment-"), so tests can inject deterministic ids.
"""

from typing import Callable
from uuid import uuid4

IdGenerator = Callable[[], str]


def generate_id() -> str:
    return uuid4().hex[:16]
