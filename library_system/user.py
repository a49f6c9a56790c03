from __future__ import annotations

from typing import Dict, List


class User:
    """A library member and the ids of the books they currently hold."""

    def __init__(self, id: int, name: str) -> None:
        self._id = id
        self._name = name
        # dict keys act as an insertion-ordered set of book ids
        self._borrowed: Dict[int, None] = {}

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def borrowed_books(self) -> List[int]:
        return list(self._borrowed)

    def has_borrowed(self, book_id: int) -> bool:
        return book_id in self._borrowed

    def borrow_book(self, book_id: int) -> None:
        """Record a borrowed book id. Recording the same id twice is a no-op."""
        self._borrowed.setdefault(book_id, None)

    def return_book(self, book_id: int) -> None:
        self._borrowed.pop(book_id, None)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, borrowed_books={self.borrowed_books!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "borrowed_books": self.borrowed_books,
        }
