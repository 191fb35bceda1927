"""
DomainErrorTranslator - Turns internal failures into client errors.

Usage:
    try:
        await use_case.execute(command)
    except Exception as e:
        translated = DomainErrorTranslator.translate(e)
        if isinstance(translated, ClientError):
            ...  # respond with translated.status_code / translated.message
        else:
            ...  # unexpected, respond generically

Errors whose code is not in the directory come back as the very same
instance, so the caller can tell "translated" from "internal" by type.
"""

from typing import Callable, Optional

from src.domain.exceptions.authorization_error import AuthorizationError
from src.domain.exceptions.client_error import ClientError
from src.domain.exceptions.domain_error import DomainError
from src.domain.exceptions.error_code import ErrorCode
from src.domain.exceptions.invariant_error import InvariantError
from src.domain.exceptions.not_found_error import NotFoundError


def _invariant(message: str) -> Callable[[], ClientError]:
    return lambda: InvariantError(message)


def _not_found(message: str) -> Callable[[], ClientError]:
    return lambda: NotFoundError(message)


def _forbidden(message: str) -> Callable[[], ClientError]:
    return lambda: AuthorizationError(message)


class DomainErrorTranslator:
    # Factories, not instances: every translation yields a fresh exception
    _directory: dict[ErrorCode, Callable[[], ClientError]] = {
        ErrorCode.NEW_THREAD_LACK_REQUIRED_PROPERTY: _invariant(
            "tidak dapat membuat thread baru karena properti yang dibutuhkan tidak ada"
        ),
        ErrorCode.NEW_THREAD_DATA_TYPE_NOT_MEET_SPECIFICATION: _invariant(
            "tidak dapat membuat thread baru karena tipe data tidak sesuai"
        ),
        ErrorCode.NEW_THREAD_TITLE_LIMIT_CHAR: _invariant(
            "tidak dapat membuat thread baru karena karakter judul melebihi batas maksimal"
        ),
        ErrorCode.NEW_COMMENT_NOT_CONTAIN_NEEDED_PROPERTY: _invariant(
            "tidak dapat membuat komentar pada thread dikarenakan properti yang dibutuhkan tidak ada"
        ),
        ErrorCode.NEW_COMMENT_NOT_MEET_DATA_TYPE_SPECIFICATION: _invariant(
            "content harus string"
        ),
        ErrorCode.ADDED_COMMENT_NOT_CONTAIN_NEEDED_PROPERTY: _invariant(
            "properti yang dibutuhkan kosong"
        ),
        ErrorCode.ADDED_COMMENT_NOT_MEET_DATA_TYPE_SPECIFICATION: _invariant(
            "content harus string"
        ),
        ErrorCode.GET_THREAD_NO_THREAD_FOUND: _not_found("thread tidak ditemukan"),
        ErrorCode.GET_THREAD_COMMENT_NO_THREAD_COMMENT_FOUND: _not_found(
            "komentar tidak ditemukan"
        ),
        ErrorCode.VERIFY_COMMENT_OWNER_ACCESS_FORBIDEN: _forbidden(
            "kamu tidak punya akses untuk komentar ini"
        ),
        ErrorCode.DELETE_THREAD_COMMENT_ACCESS_FORBIDEN: _forbidden(
            "kamu tidak punya akses untuk menghapus komentar ini"
        ),
    }

    @classmethod
    def translate(cls, error: Exception) -> Exception:
        """Return the client error for a known code, otherwise `error` itself."""
        code = cls._code_of(error)
        if code is None or code not in cls._directory:
            return error
        return cls._directory[code]()

    @staticmethod
    def _code_of(error: Exception) -> Optional[ErrorCode]:
        if isinstance(error, DomainError):
            return error.code
        if isinstance(error, ClientError) or len(error.args) != 1:
            return None

        # Plain exceptions carrying a sentinel string, e.g. Exception("GET_THREAD.NO_THREAD_FOUND")
        try:
            return ErrorCode(error.args[0])
        except ValueError:
            return None

    @classmethod
    def is_mapped(cls, code: ErrorCode) -> bool:
        return code in cls._directory
