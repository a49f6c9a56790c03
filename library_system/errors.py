from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kitaplık işlemlerinin başarısızlık türleri"""
    DUPLICATE_ID = "duplicate_id"
    INVALID_NAME = "invalid_name"
    INVALID_QUANTITY = "invalid_quantity"
    USER_NOT_FOUND = "user_not_found"
    BOOK_NOT_FOUND = "book_not_found"
    BOOK_UNAVAILABLE = "book_unavailable"
    NOT_BORROWED = "not_borrowed"


class LibraryError(Exception):
    """Base class for recoverable catalog/membership failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateIdError(LibraryError, ValueError):
    kind = ErrorKind.DUPLICATE_ID


class InvalidNameError(LibraryError, ValueError):
    kind = ErrorKind.INVALID_NAME


class InvalidQuantityError(LibraryError, ValueError):
    kind = ErrorKind.INVALID_QUANTITY


class UserNotFoundError(LibraryError, LookupError):
    kind = ErrorKind.USER_NOT_FOUND


class BookNotFoundError(LibraryError, LookupError):
    kind = ErrorKind.BOOK_NOT_FOUND


class BookUnavailableError(LibraryError):
    kind = ErrorKind.BOOK_UNAVAILABLE


class NotBorrowedError(LibraryError):
    kind = ErrorKind.NOT_BORROWED
