"""
ErrorCode - Closed set of internal failure identifiers.

Values are the dotted sentinel strings used across the service,
e.g. "NEW_THREAD.TITLE_LIMIT_CHAR". They are never shown to clients as-is;
DomainErrorTranslator turns them into client errors.
"""

from enum import Enum


class ErrorCode(str, Enum):
    NEW_THREAD_LACK_REQUIRED_PROPERTY = "NEW_THREAD.LACK_REQUIRED_PROPERTY"
    NEW_THREAD_DATA_TYPE_NOT_MEET_SPECIFICATION = (
        "NEW_THREAD.DATA_TYPE_NOT_MEET_SPECIFICATION"
    )
    NEW_THREAD_TITLE_LIMIT_CHAR = "NEW_THREAD.TITLE_LIMIT_CHAR"

    ADDED_THREAD_LACK_REQUIRED_PROPERTY = "ADDED_THREAD.LACK_REQUIRED_PROPERTY"
    ADDED_THREAD_DATA_TYPE_NOT_MEET_SPECIFICATION = (
        "ADDED_THREAD.DATA_TYPE_NOT_MEET_SPECIFICATION"
    )

    NEW_COMMENT_NOT_CONTAIN_NEEDED_PROPERTY = "NEW_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY"
    NEW_COMMENT_NOT_MEET_DATA_TYPE_SPECIFICATION = (
        "NEW_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION"
    )

    ADDED_COMMENT_NOT_CONTAIN_NEEDED_PROPERTY = (
        "ADDED_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY"
    )
    ADDED_COMMENT_NOT_MEET_DATA_TYPE_SPECIFICATION = (
        "ADDED_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION"
    )

    GET_THREAD_NO_THREAD_FOUND = "GET_THREAD.NO_THREAD_FOUND"
    GET_THREAD_COMMENT_NO_THREAD_COMMENT_FOUND = (
        "GET_THREAD_COMMENT.NO_THREAD_COMMENT_FOUND"
    )

    # Spelling kept: clients and logs already match on these strings
    VERIFY_COMMENT_OWNER_ACCESS_FORBIDEN = "VERIFY_COMMENT_OWNER.ACCESS_FORBIDEN"
    DELETE_THREAD_COMMENT_ACCESS_FORBIDEN = "DELETE_THREAD_COMMENT.ACCESS_FORBIDEN"

    def __str__(self) -> str:
        return self.value
