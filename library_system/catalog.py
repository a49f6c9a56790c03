import logging
from typing import Dict, Iterator, List, Optional

from library_system.book import Book
from library_system.errors import (
    BookNotFoundError,
    BookUnavailableError,
    DuplicateIdError,
    InvalidNameError,
    InvalidQuantityError,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Holds the book inventory, keyed by book id in insertion order."""

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}

    # ------------------------- Core operations ------------------------- #
    def add_book(self, id: int, name: str, quantity: int) -> Book:
        """Create and insert a Book. Prevent duplicates by id."""
        if id in self._books:
            logger.warning(f"Rejected book {id}: id already exists")
            raise DuplicateIdError("A book with this ID already exists.")
        if name is None or not name.strip():
            raise InvalidNameError("Book name cannot be empty.")
        if quantity < 0:
            raise InvalidQuantityError("Quantity cannot be negative.")

        book = Book(id, name, quantity)
        self._books[id] = book
        logger.info(f"Book added: id={id}, name={name!r}, quantity={quantity}")
        return book

    def find_by_id(self, id: int) -> Optional[Book]:
        return self._books.get(id)

    def find_by_name(self, name: str) -> Optional[Book]:
        """Case-insensitive exact name match; returns the first book added with that name."""
        wanted = name.lower()
        for book in self._books.values():
            if book.name.lower() == wanted:
                return book
        return None

    # ------------------------- Queries ------------------------- #
    def list_by_prefix(self, prefix: str) -> List[Book]:
        wanted = prefix.lower()
        return [book for book in self._books.values() if book.name.lower().startswith(wanted)]

    def list_sorted(self, by_id: bool = True) -> List[Book]:
        """All books ordered by id, or by name using plain string ordering.

        sorted() is stable, so books with identical names keep their insertion order.
        """
        if by_id:
            return sorted(self._books.values(), key=lambda b: b.id)
        return sorted(self._books.values(), key=lambda b: b.name)

    # ------------------------- Quantity bookkeeping ------------------------- #
    def decrement_quantity(self, id: int) -> Book:
        book = self._require(id)
        if book.quantity <= 0:
            raise BookUnavailableError("Book is not available.")
        book.quantity -= 1
        return book

    def increment_quantity(self, id: int) -> Book:
        book = self._require(id)
        book.quantity += 1
        return book

    def _require(self, id: int) -> Book:
        book = self._books.get(id)
        if book is None:
            raise BookNotFoundError("Book not found.")
        return book

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books.values()))

    def __contains__(self, id: object) -> bool:
        return id in self._books
