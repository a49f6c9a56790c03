import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from library_system.book import Book
from library_system.catalog import Catalog
from library_system.errors import (
    BookNotFoundError,
    BookUnavailableError,
    ErrorKind,
    LibraryError,
    NotBorrowedError,
    UserNotFoundError,
)
from library_system.membership import Membership
from library_system.user import User

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """Outcome of a workflow operation: either a value or a LibraryError."""
    value: Optional[T] = None
    error: Optional[LibraryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LibraryError) -> "Result[T]":
        return cls(error=error)


class Library:
    """Owns the Catalog and Membership for one session and runs the borrow/return workflow.

    Every mutating operation checks all of its preconditions before touching
    either collection, so a failed Result never leaves partial changes behind.
    """

    def __init__(self, catalog: Optional[Catalog] = None, membership: Optional[Membership] = None) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.membership = membership if membership is not None else Membership()

    # ------------------------- Registration ------------------------- #
    def add_book(self, id: int, name: str, quantity: int) -> Result[Book]:
        try:
            return Result.success(self.catalog.add_book(id, name, quantity))
        except LibraryError as e:
            return Result.failure(e)

    def add_user(self, id: int, name: str) -> Result[User]:
        try:
            return Result.success(self.membership.add_user(id, name))
        except LibraryError as e:
            return Result.failure(e)

    # ------------------------- Borrow / return ------------------------- #
    def borrow_book(self, user_id: int, book_id: int) -> Result[Book]:
        user = self.membership.find_by_id(user_id)
        if user is None:
            return Result.failure(UserNotFoundError("User not found."))
        book = self.catalog.find_by_id(book_id)
        if book is None:
            return Result.failure(BookNotFoundError("Book not found."))
        if not book.is_available:
            logger.warning(f"Borrow rejected: book {book_id} has no copies left")
            return Result.failure(BookUnavailableError("Book is not available."))

        self.membership.borrow(user_id, book_id)
        self.catalog.decrement_quantity(book_id)
        logger.info(f"User {user_id} borrowed book {book_id}; {book.quantity} copies left")
        return Result.success(book)

    def return_book(self, user_id: int, book_id: int) -> Result[Book]:
        user = self.membership.find_by_id(user_id)
        if user is None:
            return Result.failure(UserNotFoundError("User not found."))
        book = self.catalog.find_by_id(book_id)
        if book is None:
            return Result.failure(BookNotFoundError("Book not found."))
        if not user.has_borrowed(book_id):
            return Result.failure(NotBorrowedError("This user hasn't borrowed this book."))

        self.membership.return_book(user_id, book_id)
        self.catalog.increment_quantity(book_id)
        logger.info(f"User {user_id} returned book {book_id}; {book.quantity} copies available")
        return Result.success(book)

    # ------------------------- Queries ------------------------- #
    def find_book(self, id: int) -> Optional[Book]:
        return self.catalog.find_by_id(id)

    def find_user(self, id: int) -> Optional[User]:
        return self.membership.find_by_id(id)

    def list_books_by_prefix(self, prefix: str) -> List[Book]:
        return self.catalog.list_by_prefix(prefix)

    def list_books_sorted(self, by_id: bool = True) -> List[Book]:
        return self.catalog.list_sorted(by_id)

    def list_borrowers_of(self, book_id: int) -> List[User]:
        return self.membership.list_borrowers_of(book_id)

    def list_users_by_book(self, book_name: str) -> Result[List[User]]:
        """Users holding the book with the given name (case-insensitive exact match)."""
        book = self.catalog.find_by_name(book_name)
        if book is None:
            return Result.failure(BookNotFoundError(f"No book found with the name '{book_name}'."))
        return Result.success(self.membership.list_borrowers_of(book.id))

    def list_all_users(self) -> List[User]:
        return self.membership.list_all()
