import logging
from typing import Dict, Iterator, List, Optional

from library_system.errors import DuplicateIdError, InvalidNameError, UserNotFoundError
from library_system.user import User

logger = logging.getLogger(__name__)


class Membership:
    """Holds the registered users and their borrowed-book sets."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}

    def add_user(self, id: int, name: str) -> User:
        if id in self._users:
            logger.warning(f"Rejected user {id}: id already exists")
            raise DuplicateIdError("A user with this ID already exists.")
        if name is None or not name.strip():
            raise InvalidNameError("User name cannot be empty.")

        user = User(id, name)
        self._users[id] = user
        logger.info(f"User added: id={id}, name={name!r}")
        return user

    def find_by_id(self, id: int) -> Optional[User]:
        return self._users.get(id)

    def borrow(self, user_id: int, book_id: int) -> User:
        """Add book_id to the user's borrowed set.

        Only the membership set changes here; available copies are tracked by the
        Catalog and adjusted by the caller.
        """
        user = self._require(user_id)
        user.borrow_book(book_id)
        return user

    def return_book(self, user_id: int, book_id: int) -> User:
        user = self._require(user_id)
        user.return_book(book_id)
        return user

    def list_all(self) -> List[User]:
        return sorted(self._users.values(), key=lambda u: u.id)

    def list_borrowers_of(self, book_id: int) -> List[User]:
        return [user for user in self._users.values() if user.has_borrowed(book_id)]

    def _require(self, id: int) -> User:
        user = self._users.get(id)
        if user is None:
            raise UserNotFoundError("User not found.")
        return user

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users.values()))

    def __contains__(self, id: object) -> bool:
        return id in self._users
